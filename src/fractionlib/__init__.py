"""
fractionlib — неизменяемые дроби и смешанные числа

Fraction: рациональное число в каноническом виде (НОД = 1, знаменатель > 0).
MixedNumber: целая часть + дробь; вся арифметика через Fraction.
"""

# Domain models
from fractionlib.core.domain import (
    FRACTION_ONE,
    FRACTION_ZERO,
    MIXED_ZERO,
    Fraction,
    MixedNumber,
)

# Errors
from fractionlib.errors import (
    FractionError,
    FractionFormatError,
    FractionOverflowError,
    FractionZeroDivisionError,
    ZeroDenominatorError,
    ZeroReciprocalError,
)

__version__ = "0.1.0"

__all__ = [
    # Domain — Types
    "Fraction",
    "MixedNumber",
    # Domain — Constants
    "FRACTION_ZERO",
    "FRACTION_ONE",
    "MIXED_ZERO",
    # Errors
    "FractionError",
    "ZeroDenominatorError",
    "FractionZeroDivisionError",
    "ZeroReciprocalError",
    "FractionFormatError",
    "FractionOverflowError",
]
