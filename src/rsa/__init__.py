"""RSA driver — генерация ключей из малых простых и цикл шифрования.

Тонкий слой над арифметическим ядром src.core.math:
- Таблица малых простых и случайный выбор P, Q
- Вывод N, Phi(N), e, d
- Шифрование / расшифрование целочисленных сообщений
"""

from .cipher import (
    CiphertextOutOfRange,
    PlaintextOutOfRange,
    decrypt,
    encrypt,
    prepare_plaintext,
    run_exchange,
)
from .keygen import (
    KeyGenConfig,
    KeyGenerationError,
    derive_key_pair,
    generate_key_pair,
    select_public_exponent,
)
from .primes import SMALL_PRIMES, pick_prime

__all__ = [
    "SMALL_PRIMES",
    "pick_prime",
    "KeyGenConfig",
    "KeyGenerationError",
    "select_public_exponent",
    "derive_key_pair",
    "generate_key_pair",
    "PlaintextOutOfRange",
    "CiphertextOutOfRange",
    "prepare_plaintext",
    "encrypt",
    "decrypt",
    "run_exchange",
]
