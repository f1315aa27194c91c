"""
Fraction — Рациональное число в каноническом виде

Immutable Pydantic модель знакового рационального числа.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(|numerator|, denominator) == 1; ноль хранится как 0/1
2. Знак несёт только numerator; denominator всегда > 0
3. Каждая операция создаёт новый экземпляр (frozen=True)
4. Каноническое значение помещается в int32, иначе FractionOverflowError

АРИФМЕТИКА:
    a/b + c/d = (a * (L/b) + c * (L/d)) / L,   L = lcm(b, d)
    a/b * c/d = (a * c) / (b * d)
    a/b / c/d = (a * d) / (b * c)
    сравнение: a * d  vs  c * b  (точная арифметика Python int)
"""

from decimal import Decimal
from typing import Any, Final

from pydantic import BaseModel, Field, model_validator

from fractionlib.config import FRACTION_SEPARATOR, INT32_MAX, INT32_MIN
from fractionlib.core.math.integer_arithmetic import (
    check_int32,
    lcm,
    reduce_pair,
    sign,
)
from fractionlib.core.parsing import parse_int32, require_text
from fractionlib.errors import (
    FractionFormatError,
    FractionZeroDivisionError,
    ZeroDenominatorError,
    ZeroReciprocalError,
)


def is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel):
    """
    Рациональное число numerator/denominator.

    Конструируется позиционно: Fraction(6, 8) -> 3/4, Fraction(5) -> 5/1.
    Арифметические операторы и сравнения принимают Fraction или int.

    Равенство и hash — по полям (numerator, denominator). Так как оба
    экземпляра канонические, это совпадает с равенством значений.
    """

    numerator: int = Field(
        ..., ge=INT32_MIN, le=INT32_MAX, description="Числитель (несёт знак)"
    )
    denominator: int = Field(
        ..., gt=0, le=INT32_MAX, description="Знаменатель (всегда > 0)"
    )

    model_config = {"frozen": True, "strict": True}  # Immutable

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        if is_plain_int(numerator) and is_plain_int(denominator):
            numerator, denominator = reduce_pair(numerator, denominator)
            check_int32(numerator, "numerator")
            check_int32(denominator, "denominator")
        super().__init__(numerator=numerator, denominator=denominator)

    @model_validator(mode="before")
    @classmethod
    def normalize_fields(cls, data: Any) -> Any:
        """
        Канонизация при model_validate({...}).

        Нулевой знаменатель и значения вне int32 здесь не обрабатываются:
        их отклоняют ограничения полей (ValidationError).
        """
        if not isinstance(data, dict):
            return data

        numerator = data.get("numerator")
        denominator = data.get("denominator")
        if is_plain_int(numerator) and is_plain_int(denominator) and denominator != 0:
            numerator, denominator = reduce_pair(numerator, denominator)
            return {**data, "numerator": numerator, "denominator": denominator}
        return data

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "Fraction":
        """Целое число как дробь value/1."""
        return cls(value, 1)

    @classmethod
    def zero(cls) -> "Fraction":
        return cls(0, 1)

    @classmethod
    def one(cls) -> "Fraction":
        return cls(1, 1)

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.numerator == 0

    @property
    def is_positive(self) -> bool:
        return self.numerator > 0

    @property
    def is_negative(self) -> bool:
        return self.numerator < 0

    def __bool__(self) -> bool:
        return not self.is_zero

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Fraction":
        other_fraction = _coerce(other)
        if other_fraction is None:
            return NotImplemented
        common = lcm(self.denominator, other_fraction.denominator)
        numerator = self.numerator * (common // self.denominator) + other_fraction.numerator * (
            common // other_fraction.denominator
        )
        return Fraction(numerator, common)

    def __radd__(self, other: Any) -> "Fraction":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "Fraction":
        other_fraction = _coerce(other)
        if other_fraction is None:
            return NotImplemented
        common = lcm(self.denominator, other_fraction.denominator)
        numerator = self.numerator * (common // self.denominator) - other_fraction.numerator * (
            common // other_fraction.denominator
        )
        return Fraction(numerator, common)

    def __rsub__(self, other: Any) -> "Fraction":
        other_fraction = _coerce(other)
        if other_fraction is None:
            return NotImplemented
        return other_fraction.__sub__(self)

    def __mul__(self, other: Any) -> "Fraction":
        other_fraction = _coerce(other)
        if other_fraction is None:
            return NotImplemented
        return Fraction(
            self.numerator * other_fraction.numerator,
            self.denominator * other_fraction.denominator,
        )

    def __rmul__(self, other: Any) -> "Fraction":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "Fraction":
        """
        Деление.

        Raises:
            FractionZeroDivisionError: Если делитель равен нулю
        """
        other_fraction = _coerce(other)
        if other_fraction is None:
            return NotImplemented
        if other_fraction.is_zero:
            raise FractionZeroDivisionError("Cannot divide by zero fraction")
        return Fraction(
            self.numerator * other_fraction.denominator,
            self.denominator * other_fraction.numerator,
        )

    def __rtruediv__(self, other: Any) -> "Fraction":
        other_fraction = _coerce(other)
        if other_fraction is None:
            return NotImplemented
        return other_fraction.__truediv__(self)

    def __neg__(self) -> "Fraction":
        return Fraction(-self.numerator, self.denominator)

    def __pos__(self) -> "Fraction":
        return self

    def __abs__(self) -> "Fraction":
        return Fraction(abs(self.numerator), self.denominator)

    def abs(self) -> "Fraction":
        """Абсолютное значение |numerator|/denominator."""
        return self.__abs__()

    def reciprocal(self) -> "Fraction":
        """
        Обратная дробь denominator/numerator (знак переносится в числитель).

        Raises:
            ZeroReciprocalError: Если дробь равна нулю
        """
        if self.is_zero:
            raise ZeroReciprocalError("Cannot get reciprocal of zero")
        return Fraction(self.denominator, self.numerator)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(self, other: "Fraction | int") -> int:
        """
        Трёхзначное сравнение перекрёстным умножением.

        int сравнивается точно, без приведения к 32-битной Fraction.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        terms = _ratio_terms(other)
        if terms is None:
            raise TypeError(f"Cannot compare Fraction with {type(other).__name__}")
        other_numerator, other_denominator = terms
        left = self.numerator * other_denominator
        right = other_numerator * self.denominator
        return sign(left - right)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.numerator == other.numerator and self.denominator == other.denominator

    def __hash__(self) -> int:
        return hash((self.numerator, self.denominator))

    def __lt__(self, other: Any) -> bool:
        if _ratio_terms(other) is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        if _ratio_terms(other) is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if _ratio_terms(other) is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        if _ratio_terms(other) is None:
            return NotImplemented
        return self.compare(other) >= 0

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def to_float(self) -> float:
        """numerator / denominator (floating-point, возможна потеря точности)."""
        return self.numerator / self.denominator

    def __float__(self) -> float:
        return self.to_float()

    def to_decimal(self) -> Decimal:
        """Значение как Decimal (точность текущего decimal context)."""
        return Decimal(self.numerator) / Decimal(self.denominator)

    # -------------------------------------------------------------------------
    # Text
    # -------------------------------------------------------------------------

    def format(self) -> str:
        """'n' если знаменатель 1, иначе 'n/d'."""
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}{FRACTION_SEPARATOR}{self.denominator}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Fraction({self.numerator}, {self.denominator})"

    @classmethod
    def parse(cls, text: str) -> "Fraction":
        """
        Разбор строки 'n' или 'n/d'.

        Args:
            text: Строка вида "3/4", "-2/3", "5" (пробелы вокруг токенов допустимы)

        Returns:
            Каноническая дробь

        Raises:
            TypeError: Если text не str
            FractionFormatError: Если формат неверный
            ZeroDenominatorError: Если знаменатель равен 0 ("1/0")
            FractionOverflowError: Если каноническое значение вне int32

        Examples:
            >>> Fraction.parse("6/8")
            Fraction(3, 4)
            >>> Fraction.parse("7")
            Fraction(7, 1)
        """
        require_text(text)

        parts = text.split(FRACTION_SEPARATOR)
        if len(parts) == 1:
            whole = parse_int32(parts[0])
            if whole is not None:
                return cls(whole, 1)
        elif len(parts) == 2:
            numerator = parse_int32(parts[0])
            denominator = parse_int32(parts[1])
            if numerator is not None and denominator is not None:
                return cls(numerator, denominator)

        raise FractionFormatError(f"String '{text}' is not in a valid fraction format")

    @classmethod
    def try_parse(cls, text: Any) -> tuple[bool, "Fraction"]:
        """
        Разбор без исключений.

        Returns:
            (True, value) при успехе, (False, FRACTION_ZERO) при любой ошибке
        """
        try:
            return True, cls.parse(text)
        except Exception:
            return False, cls.zero()


def _ratio_terms(value: Any) -> tuple[int, int] | None:
    """(numerator, denominator) для сравнения: Fraction, int как value/1 (без проверки int32)."""
    if isinstance(value, Fraction):
        return value.numerator, value.denominator
    if is_plain_int(value):
        return value, 1
    return None


def _coerce(value: Any) -> Fraction | None:
    """Fraction как есть, int -> value/1, прочее -> None."""
    if isinstance(value, Fraction):
        return value
    if is_plain_int(value):
        return Fraction.from_int(value)
    return None


# =============================================================================
# CONSTANTS
# =============================================================================

FRACTION_ZERO: Final[Fraction] = Fraction(0, 1)

FRACTION_ONE: Final[Fraction] = Fraction(1, 1)
