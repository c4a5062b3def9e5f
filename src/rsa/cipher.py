"""
Cipher — шифрование и расшифрование целочисленных сообщений

    C  = M^e mod N
    M' = C^d mod N

Без padding: это учебная схема (textbook RSA).
"""

import logging

from src.core.domain.keys import RSAExchange, RSAKeyPair, RSAPrivateKey, RSAPublicKey
from src.core.math.integer_utils import require_int
from src.core.math.mod_pow import mod_pow
from src.rsa.keygen import KeyGenConfig

logger = logging.getLogger(__name__)


class PlaintextOutOfRange(ValueError):
    """Открытый текст вне [0, N) при выключенном reduce_plaintext."""

    def __init__(self, message: int, n: int):
        self.message = message
        self.n = n
        super().__init__(f"Plaintext {message} out of range: expected 0 <= M < {n}")


class CiphertextOutOfRange(ValueError):
    """Шифртекст вне [0, N)."""

    def __init__(self, ciphertext: int, n: int):
        self.ciphertext = ciphertext
        self.n = n
        super().__init__(f"Ciphertext {ciphertext} out of range: expected 0 <= C < {n}")


def prepare_plaintext(message: int, n: int, reduce: bool = True) -> int:
    """
    Приведение открытого текста к [0, N).

    Args:
        message: Открытый текст
        n: Модуль N
        reduce: True → M mod N, False → PlaintextOutOfRange вне диапазона
    """
    require_int(message, "message")
    if 0 <= message < n:
        return message
    if not reduce:
        raise PlaintextOutOfRange(message, n)
    reduced = message % n
    logger.debug("Reduced plaintext %d modulo n=%d to %d", message, n, reduced)
    return reduced


def encrypt(
    message: int,
    public_key: RSAPublicKey,
    config: KeyGenConfig | None = None,
) -> int:
    """Шифрование: C = M^e mod N."""
    config = config or KeyGenConfig()
    m = prepare_plaintext(message, public_key.n, config.reduce_plaintext)
    return mod_pow(m, public_key.e, public_key.n, config.int_kind, config.overflow_policy)


def decrypt(
    ciphertext: int,
    private_key: RSAPrivateKey,
    config: KeyGenConfig | None = None,
) -> int:
    """
    Расшифрование: M' = C^d mod N.

    Raises:
        CiphertextOutOfRange: Если C вне [0, N)
    """
    config = config or KeyGenConfig()
    require_int(ciphertext, "ciphertext")
    if not 0 <= ciphertext < private_key.n:
        raise CiphertextOutOfRange(ciphertext, private_key.n)
    return mod_pow(
        ciphertext, private_key.d, private_key.n, config.int_kind, config.overflow_policy
    )


def run_exchange(
    message: int,
    key_pair: RSAKeyPair,
    config: KeyGenConfig | None = None,
) -> RSAExchange:
    """
    Полный цикл: приведение M, шифрование, расшифрование.

    Returns:
        RSAExchange с plaintext (уже приведённым), ciphertext и recovered
    """
    config = config or KeyGenConfig()
    plaintext = prepare_plaintext(message, key_pair.n, config.reduce_plaintext)
    ciphertext = encrypt(plaintext, key_pair.public_key(), config)
    recovered = decrypt(ciphertext, key_pair.private_key(), config)

    if recovered != plaintext:
        logger.warning(
            "Round trip mismatch for n=%d: plaintext=%d recovered=%d",
            key_pair.n,
            plaintext,
            recovered,
        )

    return RSAExchange(
        n=key_pair.n,
        e=key_pair.e,
        d=key_pair.d,
        plaintext=plaintext,
        ciphertext=ciphertext,
        recovered=recovered,
    )
