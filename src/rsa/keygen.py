"""
Key Generation — вывод ключевой пары RSA из двух простых

Порядок:
1. Выбор P, Q (из таблицы SMALL_PRIMES или заданы явно)
2. N = P * Q, Phi(N) = (P - 1) * (Q - 1)
3. Публичная экспонента e: нечётный кандидат, шаг +2 до is_coprime(e, Phi)
4. Приватная экспонента d = mod_inverse(e, Phi)

Все промежуточные значения вычисляются в KeyGenConfig.int_kind,
по умолчанию UINT32.
"""

import logging
import random
from dataclasses import dataclass

from src.core.domain.int_kind import UINT32, IntKind, OverflowPolicy
from src.core.domain.keys import RSAKeyPair
from src.core.math.gcd import gcd, is_coprime
from src.core.math.integer_utils import narrow, require_int
from src.core.math.mod_inverse import mod_inverse
from src.rsa.primes import SMALL_PRIMES, pick_prime

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass(frozen=True)
class KeyGenConfig:
    """Конфигурация генерации ключей и цикла шифрования."""

    # Целочисленный тип вычислений (None → int без ограничений)
    int_kind: IntKind | None = UINT32
    overflow_policy: OverflowPolicy = OverflowPolicy.RAISE

    # Таблица простых для generate_key_pair
    primes: tuple[int, ...] = SMALL_PRIMES
    # P == Q даёт неверную Phi(N) для N = P^2
    require_distinct_primes: bool = True

    # Выбор публичной экспоненты
    min_public_exponent: int = 3
    max_exponent_attempts: int = 10_000

    # Открытый текст вне [0, N): True → M mod N, False → PlaintextOutOfRange
    reduce_plaintext: bool = True


# =============================================================================
# EXCEPTIONS
# =============================================================================


class KeyGenerationError(ValueError):
    """Невозможно вывести согласованную ключевую пару из входных параметров."""

    pass


# =============================================================================
# KEY DERIVATION
# =============================================================================


def select_public_exponent(
    phi: int,
    start: int,
    config: KeyGenConfig | None = None,
) -> int:
    """
    Выбор публичной экспоненты, взаимно простой с Phi(N).

    Кандидат = max(start, min_public_exponent), приведённый к нечётному;
    далее шаг +2, пока gcd(e, phi) != 1.

    Args:
        phi: Функция Эйлера Phi(N) (> 0)
        start: Начальный кандидат (обычно случайный в [0, phi))
        config: Конфигурация (по умолчанию KeyGenConfig())

    Returns:
        Нечётная e >= min_public_exponent, gcd(e, phi) == 1

    Raises:
        KeyGenerationError: Если phi <= 0 или подходящая e не найдена
            за max_exponent_attempts шагов
    """
    config = config or KeyGenConfig()
    require_int(phi, "phi")
    require_int(start, "start")
    if phi <= 0:
        raise KeyGenerationError(f"phi must be positive, got {phi}")

    kind, policy = config.int_kind, config.overflow_policy
    e = max(start, config.min_public_exponent) | 1

    for _ in range(config.max_exponent_attempts):
        if is_coprime(e, phi, kind, policy):
            return e
        e = narrow(e + 2, kind, policy)

    raise KeyGenerationError(
        f"No public exponent coprime with phi={phi} found after "
        f"{config.max_exponent_attempts} attempts from start={start}"
    )


def derive_key_pair(
    p: int,
    q: int,
    e: int | None = None,
    rng: random.Random | None = None,
    config: KeyGenConfig | None = None,
) -> RSAKeyPair:
    """
    Вывод ключевой пары из двух простых.

    Простота P и Q не проверяется: это ответственность вызывающего.

    Args:
        p: Первый простой множитель (> 1)
        q: Второй простой множитель (> 1)
        e: Публичная экспонента; None → случайный нечётный кандидат из rng
        rng: Источник случайности для выбора e (по умолчанию random.Random())
        config: Конфигурация (по умолчанию KeyGenConfig())

    Returns:
        RSAKeyPair с проверенной согласованностью

    Raises:
        KeyGenerationError: Некорректные P/Q или e не взаимно проста с Phi(N)
        IntegerOverflowError: N или Phi(N) не помещаются в int_kind (RAISE)
    """
    config = config or KeyGenConfig()
    kind, policy = config.int_kind, config.overflow_policy

    require_int(p, "p")
    require_int(q, "q")
    if p < 2 or q < 2:
        raise KeyGenerationError(f"prime factors must be >= 2, got p={p}, q={q}")
    if config.require_distinct_primes and p == q:
        raise KeyGenerationError(f"prime factors must be distinct, got p=q={p}")

    n = narrow(p * q, kind, policy)
    phi = narrow((p - 1) * (q - 1), kind, policy)
    logger.debug("Derived modulus n=%d and totient phi=%d from p=%d, q=%d", n, phi, p, q)

    if e is None:
        rng = rng or random.Random()
        e = select_public_exponent(phi, rng.randrange(phi), config)
    else:
        require_int(e, "e")
        if e <= 0:
            raise KeyGenerationError(f"public exponent must be positive, got {e}")
        common = gcd(e, phi, kind, policy)
        if common != 1:
            raise KeyGenerationError(
                f"public exponent e={e} is not coprime with phi={phi} (gcd={common})"
            )

    d = mod_inverse(e, phi, kind, policy)
    logger.debug("Selected public exponent e=%d, private exponent d=%d", e, d)

    return RSAKeyPair(p=p, q=q, n=n, phi=phi, e=e, d=d)


def generate_key_pair(
    rng: random.Random | None = None,
    config: KeyGenConfig | None = None,
) -> RSAKeyPair:
    """
    Генерация ключевой пары из таблицы простых.

    Args:
        rng: Источник случайности (по умолчанию random.Random()).
            Фиксированный seed даёт воспроизводимые ключи.
        config: Конфигурация (по умолчанию KeyGenConfig())

    Raises:
        KeyGenerationError: Если в таблице недостаточно различных простых
    """
    config = config or KeyGenConfig()
    rng = rng or random.Random()

    if config.require_distinct_primes and len(set(config.primes)) < 2:
        raise KeyGenerationError("prime table must contain at least two distinct primes")

    p = pick_prime(rng, config.primes)
    q = pick_prime(rng, config.primes)
    while config.require_distinct_primes and q == p:
        q = pick_prime(rng, config.primes)

    logger.debug("Picked primes p=%d, q=%d", p, q)
    return derive_key_pair(p, q, rng=rng, config=config)
