"""
Configuration — фиксированные параметры fractionlib

Все значения задаются на уровне модуля (Final) и не меняются в runtime.

Числитель и знаменатель хранятся как знаковые 32-битные целые:
промежуточные вычисления выполняются точно (Python int), но каноническое
значение, которое сохраняется в модели, обязано попадать в диапазон
[INT32_MIN, INT32_MAX]. Иначе -> FractionOverflowError.
"""

from typing import Final

# =============================================================================
# FIXED-WIDTH INTEGER BOUNDS
# =============================================================================

# Минимальное значение поля (int32)
INT32_MIN: Final[int] = -(2**31)

# Максимальное значение поля (int32)
INT32_MAX: Final[int] = 2**31 - 1


# =============================================================================
# TEXT FORMAT
# =============================================================================

# Разделитель числителя и знаменателя: "3/4"
FRACTION_SEPARATOR: Final[str] = "/"

# Разделитель целой и дробной части смешанного числа: "2 3/4"
MIXED_SEPARATOR: Final[str] = " "
