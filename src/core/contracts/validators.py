"""
JSON Schema Contract Validators — сериализация ключевого материала RSA

Контракты (src/core/contracts/schema/):
- rsa_key_pair — полный набор параметров RSAKeyPair
- rsa_exchange — протокол цикла encrypt/decrypt (RSAExchange + round_trip_ok)

Два направления:
- dump: модель → dict, проверенный по схеме (для вывода --json)
- load: dict из JSON → схема → pydantic модель (для --key-file)

Схема проверяет форму (поля, типы, минимумы); модель проверяет
арифметическую согласованность (n == p*q, e*d ≡ 1 mod phi, ...).
Оба вида нарушений приводятся к ContractViolation.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ContractViolation перечисляет ВСЕ нарушения схемы, а не первое
2. load() никогда не возвращает модель, не прошедшую схему
3. round_trip_ok в rsa_exchange должен совпадать с пересчитанным значением
"""

import json
from pathlib import Path
from typing import Any, Dict, Generic, List, Type, TypeVar

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel
from pydantic import ValidationError as ModelValidationError

from src.core.domain.keys import RSAExchange, RSAKeyPair

ModelT = TypeVar("ModelT", bound=BaseModel)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ContractViolation(ValueError):
    """
    Данные не соответствуют контракту.

    Attributes:
        contract: Имя контракта (rsa_key_pair, rsa_exchange)
        errors: Все найденные нарушения в виде "путь: сообщение"
    """

    def __init__(self, contract: str, errors: List[str]):
        self.contract = contract
        self.errors = errors
        super().__init__(f"{contract} contract violated: " + "; ".join(errors))


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Загрузчик схем из каталога schema/ пакета, с кэшем по имени контракта."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, contract: str) -> Dict[str, Any]:
        """
        Схема контракта (из кэша или с диска).

        Raises:
            FileNotFoundError: Нет файла <contract>.json
            ValueError: Файл не является валидной Draft 2020-12 схемой
        """
        cached = self._schemas.get(contract)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{contract}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {contract}.json: {e.message}") from e

        self._schemas[contract] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator(Generic[ModelT]):
    """
    Связка контракт ↔ pydantic модель.

    Подклассы задают имя контракта и тип модели; сериализация модели
    берётся из её to_contract().
    """

    contract: str
    model_type: Type[ModelT]

    def __init__(self, loader: SchemaLoader | None = None):
        schema = (loader or _SCHEMA_LOADER).load_schema(self.contract)
        self._validator = Draft202012Validator(schema)

    def violations(self, data: Dict[str, Any]) -> List[str]:
        """Все нарушения схемы в стабильном порядке (по пути поля)."""
        errors = sorted(
            self._validator.iter_errors(data),
            key=lambda error: [str(part) for part in error.absolute_path],
        )
        return [
            f"{'/'.join(str(part) for part in error.absolute_path) or '$'}: {error.message}"
            for error in errors
        ]

    def check(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Проверка dict по схеме.

        Raises:
            ContractViolation: Если есть хотя бы одно нарушение
        """
        errors = self.violations(data)
        if errors:
            raise ContractViolation(self.contract, errors)
        return data

    def dump(self, model: ModelT) -> Dict[str, Any]:
        """Модель → проверенный dict контракта."""
        if not isinstance(model, self.model_type):
            raise TypeError(
                f"{self.contract} expects {self.model_type.__name__}, "
                f"got {type(model).__name__}"
            )
        return self.check(model.to_contract())

    def load(self, data: Dict[str, Any]) -> ModelT:
        """
        dict контракта → модель.

        Raises:
            ContractViolation: Нарушение схемы или согласованности модели
        """
        self.check(data)
        fields = {name: data[name] for name in self.model_type.model_fields}
        try:
            return self.model_type(**fields)
        except ModelValidationError as e:
            raise ContractViolation(
                self.contract,
                [f"{'/'.join(map(str, err['loc'])) or '$'}: {err['msg']}" for err in e.errors()],
            ) from e


class KeyPairValidator(ContractValidator[RSAKeyPair]):
    contract = "rsa_key_pair"
    model_type = RSAKeyPair


class ExchangeValidator(ContractValidator[RSAExchange]):
    contract = "rsa_exchange"
    model_type = RSAExchange

    def load(self, data: Dict[str, Any]) -> RSAExchange:
        exchange = super().load(data)
        if exchange.round_trip_ok != data["round_trip_ok"]:
            raise ContractViolation(
                self.contract,
                [
                    f"round_trip_ok: recorded {data['round_trip_ok']} but plaintext "
                    f"{exchange.plaintext} vs recovered {exchange.recovered} "
                    f"gives {exchange.round_trip_ok}"
                ],
            )
        return exchange


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_key_pair(key_pair: RSAKeyPair) -> Dict[str, Any]:
    """RSAKeyPair → dict контракта rsa_key_pair (проверенный по схеме)."""
    return KeyPairValidator().dump(key_pair)


def validate_exchange(exchange: RSAExchange) -> Dict[str, Any]:
    """RSAExchange → dict контракта rsa_exchange (проверенный по схеме)."""
    return ExchangeValidator().dump(exchange)


def load_key_pair(data: Dict[str, Any]) -> RSAKeyPair:
    """
    Восстановление ключевой пары из JSON контракта.

    Принимает как сам контракт, так и вывод --json CLI
    ({"key_pair": {...}, "exchange": {...}}).

    Raises:
        ContractViolation: Если данные не проходят схему или модель
    """
    if isinstance(data, dict) and "key_pair" in data:
        data = data["key_pair"]
    return KeyPairValidator().load(data)


def load_exchange(data: Dict[str, Any]) -> RSAExchange:
    """
    Восстановление протокола обмена из JSON контракта.

    Raises:
        ContractViolation: Если данные не проходят схему, модель
            или round_trip_ok не совпадает с пересчитанным
    """
    return ExchangeValidator().load(data)
