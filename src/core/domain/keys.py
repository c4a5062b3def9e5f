"""
Keys — Модели ключевого материала RSA

Immutable Pydantic модели:
- RSAPublicKey (n, e) — шифрование
- RSAPrivateKey (n, d) — расшифрование
- RSAKeyPair (p, q, n, phi, e, d) — полный набор параметров с проверкой согласованности
- RSAExchange — протокол одного цикла encrypt/decrypt

Соответствуют JSON контрактам rsa_key_pair и rsa_exchange.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# KEY MODELS
# =============================================================================


class RSAPublicKey(BaseModel):
    """Публичный ключ (N, e)."""

    n: int = Field(..., gt=1, description="Модуль N = P * Q")
    e: int = Field(..., gt=0, description="Публичная экспонента")

    model_config = {"frozen": True}


class RSAPrivateKey(BaseModel):
    """Приватный ключ (N, d)."""

    n: int = Field(..., gt=1, description="Модуль N = P * Q")
    d: int = Field(..., ge=0, description="Приватная экспонента")

    model_config = {"frozen": True}


class RSAKeyPair(BaseModel):
    """
    Полный набор параметров RSA.

    Immutable модель (frozen=True). Согласованность проверяется при создании:
    - n == p * q
    - phi == (p - 1) * (q - 1)
    - (e * d) mod phi == 1 mod phi (отсюда gcd(e, phi) == 1)
    """

    p: int = Field(..., gt=1, description="Первый простой множитель")
    q: int = Field(..., gt=1, description="Второй простой множитель")
    n: int = Field(..., gt=1, description="Модуль N = P * Q")
    phi: int = Field(..., gt=0, description="Функция Эйлера Phi(N) = (P-1)(Q-1)")
    e: int = Field(..., gt=0, description="Публичная экспонента, взаимно простая с Phi(N)")
    d: int = Field(..., ge=0, description="Приватная экспонента, d = e^-1 mod Phi(N)")

    model_config = {"frozen": True}

    @field_validator("n")
    @classmethod
    def validate_modulus(cls, v: int, info) -> int:
        """Проверка N = P * Q"""
        if "p" in info.data and "q" in info.data:
            expected = info.data["p"] * info.data["q"]
            if v != expected:
                raise ValueError(f"n {v} must equal p * q = {expected}")
        return v

    @field_validator("phi")
    @classmethod
    def validate_totient(cls, v: int, info) -> int:
        """Проверка Phi(N) = (P-1)(Q-1)"""
        if "p" in info.data and "q" in info.data:
            expected = (info.data["p"] - 1) * (info.data["q"] - 1)
            if v != expected:
                raise ValueError(f"phi {v} must equal (p - 1) * (q - 1) = {expected}")
        return v

    @field_validator("d")
    @classmethod
    def validate_private_exponent(cls, v: int, info) -> int:
        """Проверка e * d ≡ 1 (mod Phi(N))"""
        if "e" in info.data and "phi" in info.data:
            e = info.data["e"]
            phi = info.data["phi"]
            if (e * v) % phi != 1 % phi:
                raise ValueError(f"d {v} is not the inverse of e {e} modulo phi {phi}")
        return v

    def public_key(self) -> RSAPublicKey:
        return RSAPublicKey(n=self.n, e=self.e)

    def private_key(self) -> RSAPrivateKey:
        return RSAPrivateKey(n=self.n, d=self.d)

    def to_contract(self) -> dict[str, Any]:
        """Сериализация в JSON контракт rsa_key_pair."""
        return self.model_dump(mode="json")


# =============================================================================
# EXCHANGE MODEL
# =============================================================================


class RSAExchange(BaseModel):
    """
    Протокол цикла шифрования: M → C = M^e mod N → M' = C^d mod N.

    plaintext — уже приведённое к [0, N) значение, которое было зашифровано.
    """

    n: int = Field(..., gt=1, description="Модуль N")
    e: int = Field(..., gt=0, description="Публичная экспонента")
    d: int = Field(..., ge=0, description="Приватная экспонента")
    plaintext: int = Field(..., ge=0, description="Открытый текст M, 0 <= M < N")
    ciphertext: int = Field(..., ge=0, description="Шифртекст C, 0 <= C < N")
    recovered: int = Field(..., ge=0, description="Расшифрованный M'")

    model_config = {"frozen": True}

    @field_validator("plaintext", "ciphertext", "recovered")
    @classmethod
    def validate_below_modulus(cls, v: int, info) -> int:
        """Все значения должны лежать в [0, N)"""
        if "n" in info.data and v >= info.data["n"]:
            raise ValueError(f"{info.field_name} {v} must be < n {info.data['n']}")
        return v

    @property
    def round_trip_ok(self) -> bool:
        """True, если расшифрование восстановило исходный текст."""
        return self.plaintext == self.recovered

    def to_contract(self) -> dict[str, Any]:
        """Сериализация в JSON контракт rsa_exchange."""
        data = self.model_dump(mode="json")
        data["round_trip_ok"] = self.round_trip_ok
        return data
