"""
Domain models and value objects.

Contains the immutable numeric value types: Fraction and MixedNumber.
"""

from fractionlib.core.domain.fraction import FRACTION_ONE, FRACTION_ZERO, Fraction
from fractionlib.core.domain.mixed_number import MIXED_ZERO, MixedNumber

__all__ = [
    # Fraction model
    "Fraction",
    "FRACTION_ZERO",
    "FRACTION_ONE",
    # MixedNumber model
    "MixedNumber",
    "MIXED_ZERO",
]
