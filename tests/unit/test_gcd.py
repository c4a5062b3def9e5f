"""
Тесты для GCD Engine

Проверяемые инварианты:
1. gcd(a, b) >= 0
2. gcd(a, b) == gcd(b, a)
3. Совпадение с эталонным math.gcd
4. is_coprime ⇔ gcd == 1
"""

import math

import pytest

from src.core.domain.int_kind import INT8, UINT8, UINT32, OverflowPolicy
from src.core.math.gcd import gcd, is_coprime
from src.core.math.integer_utils import IntegerOverflowError


class TestGcd:
    """Тесты gcd"""

    def test_known_values(self) -> None:
        assert gcd(3120, 17) == 1
        assert gcd(12, 18) == 6
        assert gcd(18, 12) == 6
        assert gcd(17, 17) == 17
        assert gcd(1, 999) == 1

    def test_negative_operands(self) -> None:
        assert gcd(-12, 18) == 6
        assert gcd(12, -18) == 6
        assert gcd(-12, -18) == 6

    def test_zero_operands(self) -> None:
        assert gcd(0, 5) == 5
        assert gcd(5, 0) == 5
        assert gcd(0, -5) == 5

    def test_degenerate_zero_zero(self) -> None:
        assert gcd(0, 0) == 0

    def test_symmetric_and_non_negative(self) -> None:
        for a in range(-30, 31):
            for b in range(-30, 31):
                result = gcd(a, b)
                assert result == gcd(b, a)
                assert result >= 0
                assert result == math.gcd(a, b)

    def test_large_operands(self) -> None:
        a = 2**89 - 1
        b = 3**50
        assert gcd(a * 6, b * 6) == math.gcd(a * 6, b * 6)

    def test_with_kind(self) -> None:
        assert gcd(48, 18, UINT32) == 6
        assert gcd(-48, 18, INT8) == 6

    def test_unsigned_kind_negative_operand_raises(self) -> None:
        """Отрицательный операнд не помещается в unsigned тип"""
        with pytest.raises(IntegerOverflowError, match="does not fit uint32"):
            gcd(-4, 6, UINT32)
        with pytest.raises(IntegerOverflowError, match="does not fit uint8"):
            gcd(6, -4, UINT8)

    def test_unsigned_kind_negative_operand_wraps(self) -> None:
        """WRAP: -1 в uint8 это 255, gcd(255, 6) == 3"""
        assert gcd(-1, 6, UINT8, OverflowPolicy.WRAP) == 3
        result = gcd(-4, 6, UINT32, OverflowPolicy.WRAP)
        assert result == math.gcd(2**32 - 4, 6)
        assert result >= 0

    def test_operand_wider_than_kind(self) -> None:
        with pytest.raises(IntegerOverflowError):
            gcd(1000, 600, UINT8)
        assert gcd(1000, 600, UINT8, OverflowPolicy.WRAP) == math.gcd(1000 % 256, 600 % 256)

    def test_signed_min_value_overflow(self) -> None:
        with pytest.raises(IntegerOverflowError):
            gcd(INT8.min_value, 2, INT8)

    def test_signed_min_value_wrap(self) -> None:
        """При WRAP |min_value| остаётся отрицательным, как в нативной арифметике"""
        result = gcd(INT8.min_value, 2, INT8, OverflowPolicy.WRAP)
        assert abs(result) == 2

    def test_non_integer_rejected(self) -> None:
        with pytest.raises(TypeError):
            gcd(1.0, 2)

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError, match="must be an integer"):
            gcd(True, False)


class TestIsCoprime:
    def test_coprime(self) -> None:
        assert is_coprime(17, 3120)
        assert is_coprime(3120, 17)
        assert is_coprime(1, 1)
        assert is_coprime(0, 1)
        assert is_coprime(-9, 28)

    def test_not_coprime(self) -> None:
        assert not is_coprime(4, 2)
        assert not is_coprime(3, 3120)
        assert not is_coprime(0, 0)
        assert not is_coprime(0, 5)
