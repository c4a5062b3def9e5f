"""
Contract Validation Module

Модуль для валидации JSON контрактов ключевого материала и протоколов обмена.
"""

from .validators import (
    ContractValidator,
    ContractViolation,
    ExchangeValidator,
    KeyPairValidator,
    SchemaLoader,
    load_exchange,
    load_key_pair,
    validate_exchange,
    validate_key_pair,
)

__all__ = [
    # Exceptions
    "ContractViolation",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "KeyPairValidator",
    "ExchangeValidator",
    # Functions
    "validate_key_pair",
    "validate_exchange",
    "load_key_pair",
    "load_exchange",
]
