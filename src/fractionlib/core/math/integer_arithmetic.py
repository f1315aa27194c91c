"""
Integer Arithmetic — целочисленные примитивы для рациональных чисел

Модуль содержит операции, на которых построены Fraction и MixedNumber:
- НОД/НОК по абсолютным значениям
- Приведение пары (числитель, знаменатель) к каноническому виду
- Деление и остаток с усечением к нулю (truncating semantics)
- Проверка 32-битного диапазона

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd/lcm работают с абсолютными значениями и никогда не отрицательны
2. reduce_pair: знак переносится в числитель, знаменатель > 0, НОД = 1
3. trunc_divmod: частное округляется к нулю, остаток имеет знак делимого
4. Значение вне [INT32_MIN, INT32_MAX] не проходит check_int32
"""

import math

from fractionlib.config import INT32_MAX, INT32_MIN
from fractionlib.errors import FractionOverflowError, ZeroDenominatorError

# =============================================================================
# НОД / НОК
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель по абсолютным значениям.

    gcd(0, n) = |n|; gcd(0, 0) = 0 (нулевой случай обрабатывает reduce_pair).

    Examples:
        >>> gcd(6, 8)
        2
        >>> gcd(-6, 8)
        2
        >>> gcd(0, 5)
        5
    """
    return math.gcd(abs(a), abs(b))


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное: |a * b| / gcd(a, b).

    Args:
        a: Первое значение (обычно знаменатель, > 0)
        b: Второе значение (обычно знаменатель, > 0)

    Returns:
        НОК >= 0; 0 если хотя бы один аргумент равен 0

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(3, 4)
        12
    """
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


def sign(value: int) -> int:
    """Знак целого: -1, 0 или +1."""
    return (value > 0) - (value < 0)


# =============================================================================
# КАНОНИЧЕСКИЙ ВИД
# =============================================================================


def reduce_pair(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Приведение пары к каноническому виду.

    sign = sign(numerator) * sign(denominator)
    result = (sign * |numerator| / g, |denominator| / g), g = gcd(|n|, |d|)

    Нулевой числитель всегда даёт (0, 1).

    Args:
        numerator: Числитель (любой знак)
        denominator: Знаменатель (любой знак, != 0)

    Returns:
        Кортеж (numerator, denominator) в несократимом виде, denominator > 0

    Raises:
        ZeroDenominatorError: Если denominator == 0

    Examples:
        >>> reduce_pair(6, 8)
        (3, 4)
        >>> reduce_pair(3, -4)
        (-3, 4)
        >>> reduce_pair(0, -7)
        (0, 1)
    """
    if denominator == 0:
        raise ZeroDenominatorError("Denominator cannot be zero")

    if numerator == 0:
        return 0, 1

    common = gcd(numerator, denominator)
    result_sign = sign(numerator) * sign(denominator)

    return result_sign * abs(numerator) // common, abs(denominator) // common


# =============================================================================
# TRUNCATING DIVISION
# =============================================================================


def trunc_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """
    Деление с усечением к нулю.

    Отличается от встроенного divmod (floor semantics) для отрицательных
    значений: trunc_divmod(-7, 4) == (-1, -3), тогда как divmod(-7, 4) == (-2, 1).

    Args:
        dividend: Делимое
        divisor: Делитель (!= 0)

    Returns:
        Кортеж (quotient, remainder): dividend == quotient * divisor + remainder,
        |remainder| < |divisor|, remainder имеет знак dividend

    Raises:
        ZeroDivisionError: Если divisor == 0

    Examples:
        >>> trunc_divmod(7, 4)
        (1, 3)
        >>> trunc_divmod(-7, 4)
        (-1, -3)
    """
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")

    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient

    return quotient, dividend - quotient * divisor


# =============================================================================
# FIXED-WIDTH ПРОВЕРКИ
# =============================================================================


def fits_int32(value: int) -> bool:
    """True если value в диапазоне [INT32_MIN, INT32_MAX]."""
    return INT32_MIN <= value <= INT32_MAX


def check_int32(value: int, name: str) -> int:
    """
    Валидация, что значение помещается в знаковое 32-битное целое.

    Args:
        value: Проверяемое значение
        name: Имя поля (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        FractionOverflowError: Если value вне [INT32_MIN, INT32_MAX]
    """
    if not fits_int32(value):
        raise FractionOverflowError(
            f"{name} {value} is outside the 32-bit range [{INT32_MIN}, {INT32_MAX}]"
        )
    return value
