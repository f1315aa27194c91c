"""
Core math modules для fractionlib

Целочисленные примитивы: НОД/НОК, канонизация пары, truncating division.
"""

from fractionlib.core.math.integer_arithmetic import (
    check_int32,
    fits_int32,
    gcd,
    lcm,
    reduce_pair,
    sign,
    trunc_divmod,
)

__all__ = [
    # НОД / НОК
    "gcd",
    "lcm",
    "sign",
    # Канонический вид
    "reduce_pair",
    # Truncating division
    "trunc_divmod",
    # Fixed-width проверки
    "fits_int32",
    "check_int32",
]
