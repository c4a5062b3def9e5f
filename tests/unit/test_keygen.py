"""
Тесты для генерации ключей RSA

Покрытие:
- Выбор публичной экспоненты (шаг +2 до взаимной простоты)
- Вывод ключевой пары из заданных P, Q
- Генерация из таблицы малых простых, воспроизводимость по seed
- Ошибки конфигурации и переполнение IntKind
"""

import random

import pytest

from src.core.domain.int_kind import UINT32
from src.core.math.gcd import gcd
from src.core.math.integer_utils import IntegerOverflowError
from src.rsa.keygen import (
    KeyGenConfig,
    KeyGenerationError,
    derive_key_pair,
    generate_key_pair,
    select_public_exponent,
)
from src.rsa.primes import SMALL_PRIMES, pick_prime


# =============================================================================
# ТЕСТЫ: таблица простых
# =============================================================================


class TestSmallPrimes:
    def test_table(self):
        assert len(SMALL_PRIMES) == 54
        assert SMALL_PRIMES[0] == 2
        assert SMALL_PRIMES[-1] == 251
        assert list(SMALL_PRIMES) == sorted(set(SMALL_PRIMES))

    def test_all_entries_prime(self):
        for p in SMALL_PRIMES:
            assert all(p % k for k in range(2, p))

    def test_pick_prime(self):
        rng = random.Random(1)
        for _ in range(20):
            assert pick_prime(rng) in SMALL_PRIMES

    def test_pick_prime_empty_table(self):
        with pytest.raises(ValueError, match="empty"):
            pick_prime(random.Random(1), ())


# =============================================================================
# ТЕСТЫ: публичная экспонента
# =============================================================================


class TestSelectPublicExponent:
    def test_steps_to_first_coprime(self):
        # 3120 = 2^4 * 3 * 5 * 13: 3 и 5 отбрасываются
        assert select_public_exponent(3120, 0) == 7
        assert select_public_exponent(3120, 16) == 17

    def test_even_start_made_odd(self):
        assert select_public_exponent(3120, 10) == 11

    def test_minimum_exponent(self):
        assert select_public_exponent(2, 0) == 3
        config = KeyGenConfig(min_public_exponent=1)
        assert select_public_exponent(2, 0, config) == 1

    def test_attempts_exhausted(self):
        config = KeyGenConfig(max_exponent_attempts=1)
        with pytest.raises(KeyGenerationError, match="after 1 attempts"):
            select_public_exponent(3120, 2, config)

    def test_non_positive_phi(self):
        with pytest.raises(KeyGenerationError):
            select_public_exponent(0, 3)


# =============================================================================
# ТЕСТЫ: вывод ключевой пары
# =============================================================================


class TestDeriveKeyPair:
    def test_textbook_key(self):
        key_pair = derive_key_pair(61, 53, e=17)
        assert key_pair.n == 3233
        assert key_pair.phi == 3120
        assert key_pair.e == 17
        assert key_pair.d == 2753

    def test_random_exponent(self):
        key_pair = derive_key_pair(61, 53, rng=random.Random(7))
        assert key_pair.e % 2 == 1
        assert key_pair.e >= 3
        assert gcd(key_pair.e, key_pair.phi) == 1
        assert (key_pair.e * key_pair.d) % key_pair.phi == 1

    def test_exponent_not_coprime(self):
        with pytest.raises(KeyGenerationError, match="not coprime"):
            derive_key_pair(61, 53, e=3)

    def test_non_positive_exponent(self):
        with pytest.raises(KeyGenerationError):
            derive_key_pair(61, 53, e=0)

    def test_factor_too_small(self):
        with pytest.raises(KeyGenerationError, match=">= 2"):
            derive_key_pair(1, 53, e=17)

    def test_equal_primes_rejected(self):
        with pytest.raises(KeyGenerationError, match="distinct"):
            derive_key_pair(5, 5, e=3)

    def test_equal_primes_allowed_by_config(self):
        config = KeyGenConfig(require_distinct_primes=False)
        key_pair = derive_key_pair(5, 5, e=3, config=config)
        assert key_pair.n == 25
        assert key_pair.phi == 16
        assert key_pair.d == 11

    def test_modulus_overflow(self):
        with pytest.raises(IntegerOverflowError):
            derive_key_pair(999983, 1000003, e=65537)

    def test_unbounded_kind(self):
        config = KeyGenConfig(int_kind=None)
        key_pair = derive_key_pair(999983, 1000003, e=65537, config=config)
        assert key_pair.n == 999983 * 1000003


# =============================================================================
# ТЕСТЫ: генерация из таблицы
# =============================================================================


class TestGenerateKeyPair:
    def test_reproducible_with_seed(self):
        first = generate_key_pair(random.Random(42))
        second = generate_key_pair(random.Random(42))
        assert first == second

    def test_factors_from_table_and_distinct(self):
        for seed in range(100):
            key_pair = generate_key_pair(random.Random(seed))
            assert key_pair.p in SMALL_PRIMES
            assert key_pair.q in SMALL_PRIMES
            assert key_pair.p != key_pair.q
            assert UINT32.contains(key_pair.n)

    def test_two_prime_table(self):
        config = KeyGenConfig(primes=(5, 7))
        key_pair = generate_key_pair(random.Random(3), config)
        assert {key_pair.p, key_pair.q} == {5, 7}

    def test_table_too_small(self):
        with pytest.raises(KeyGenerationError, match="two distinct primes"):
            generate_key_pair(random.Random(3), KeyGenConfig(primes=(7,)))

    def test_default_rng(self):
        key_pair = generate_key_pair()
        assert (key_pair.e * key_pair.d) % key_pair.phi == 1 % key_pair.phi
