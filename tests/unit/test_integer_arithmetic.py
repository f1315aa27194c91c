"""
Тесты для модуля Integer Arithmetic

Проверяет:
1. НОД/НОК по абсолютным значениям
2. Канонизацию пары (знак, сокращение, ноль)
3. Truncating division (в отличие от floor division)
4. Границы int32
"""

import pytest

from fractionlib.config import INT32_MAX, INT32_MIN
from fractionlib.core.math import (
    check_int32,
    fits_int32,
    gcd,
    lcm,
    reduce_pair,
    sign,
    trunc_divmod,
)
from fractionlib.errors import FractionOverflowError, ZeroDenominatorError

# =============================================================================
# НОД / НОК
# =============================================================================


class TestGcdLcm:
    """Тесты для gcd и lcm"""

    def test_gcd_basic(self) -> None:
        assert gcd(6, 8) == 2
        assert gcd(7, 13) == 1
        assert gcd(12, 12) == 12

    def test_gcd_uses_absolute_values(self) -> None:
        """Знаки аргументов не влияют на результат"""
        assert gcd(-6, 8) == 2
        assert gcd(6, -8) == 2
        assert gcd(-6, -8) == 2

    def test_gcd_with_zero(self) -> None:
        """gcd(0, n) = |n|, gcd(0, 0) = 0"""
        assert gcd(0, 5) == 5
        assert gcd(0, -5) == 5
        assert gcd(0, 0) == 0

    def test_lcm_basic(self) -> None:
        assert lcm(3, 4) == 12
        assert lcm(4, 6) == 12
        assert lcm(5, 5) == 5

    def test_lcm_never_negative(self) -> None:
        assert lcm(-4, 6) == 12

    def test_lcm_with_zero(self) -> None:
        assert lcm(0, 6) == 0

    def test_sign(self) -> None:
        assert sign(-7) == -1
        assert sign(0) == 0
        assert sign(42) == 1


# =============================================================================
# КАНОНИЧЕСКИЙ ВИД
# =============================================================================


class TestReducePair:
    """Тесты для reduce_pair"""

    @pytest.mark.parametrize(
        "numerator, denominator, expected",
        [
            (6, 8, (3, 4)),
            (3, 4, (3, 4)),
            (-6, 8, (-3, 4)),
            (6, -8, (-3, 4)),
            (-6, -8, (3, 4)),
            (0, 5, (0, 1)),
            (0, -5, (0, 1)),
            (10, 5, (2, 1)),
        ],
    )
    def test_reduction(self, numerator: int, denominator: int, expected: tuple[int, int]) -> None:
        assert reduce_pair(numerator, denominator) == expected

    def test_zero_denominator_raises(self) -> None:
        with pytest.raises(ZeroDenominatorError):
            reduce_pair(1, 0)

        with pytest.raises(ZeroDenominatorError):
            reduce_pair(0, 0)

    def test_zero_denominator_is_value_error(self) -> None:
        """ZeroDenominatorError совместим с ValueError"""
        with pytest.raises(ValueError):
            reduce_pair(1, 0)


# =============================================================================
# TRUNCATING DIVISION
# =============================================================================


class TestTruncDivmod:
    """Тесты для trunc_divmod"""

    @pytest.mark.parametrize(
        "dividend, divisor, expected",
        [
            (7, 4, (1, 3)),
            (-7, 4, (-1, -3)),
            (7, -4, (-1, 3)),
            (-7, -4, (1, -3)),
            (8, 4, (2, 0)),
            (3, 4, (0, 3)),
            (-3, 4, (0, -3)),
            (0, 4, (0, 0)),
        ],
    )
    def test_rounds_toward_zero(self, dividend: int, divisor: int, expected: tuple[int, int]) -> None:
        assert trunc_divmod(dividend, divisor) == expected

    def test_identity(self) -> None:
        """dividend == q * divisor + r и |r| < |divisor|"""
        for dividend in range(-20, 21):
            for divisor in (-7, -3, -1, 1, 2, 5):
                quotient, remainder = trunc_divmod(dividend, divisor)
                assert quotient * divisor + remainder == dividend
                assert abs(remainder) < abs(divisor)
                assert remainder == 0 or (remainder > 0) == (dividend > 0)

    def test_differs_from_floor_division(self) -> None:
        assert divmod(-7, 4) == (-2, 1)
        assert trunc_divmod(-7, 4) == (-1, -3)

    def test_zero_divisor_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            trunc_divmod(1, 0)


# =============================================================================
# INT32
# =============================================================================


class TestInt32Bounds:
    """Тесты для fits_int32 и check_int32"""

    def test_bounds(self) -> None:
        assert fits_int32(INT32_MIN)
        assert fits_int32(INT32_MAX)
        assert not fits_int32(INT32_MIN - 1)
        assert not fits_int32(INT32_MAX + 1)

    def test_check_returns_value(self) -> None:
        assert check_int32(42, "numerator") == 42

    def test_check_raises_overflow(self) -> None:
        with pytest.raises(FractionOverflowError, match="numerator"):
            check_int32(INT32_MAX + 1, "numerator")

        with pytest.raises(OverflowError):
            check_int32(INT32_MIN - 1, "whole")
