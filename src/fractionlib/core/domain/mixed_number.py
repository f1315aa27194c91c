"""
MixedNumber — Смешанное число (целая часть + дробь)

Immutable Pydantic модель смешанного числа whole + fn/fd.

Вся арифметика выполняется через Fraction:
    MixedNumber -> to_improper_fraction() -> операция Fraction -> from_fraction()
MixedNumber никогда не реализует дробную математику самостоятельно.

НОРМАЛИЗАЦИЯ (при каждом конструировании):
    canon = Fraction(fn, fd)
    whole_final = whole + trunc(canon.numerator / canon.denominator)
    fn_final    = canon.numerator rem canon.denominator   (знак делимого)
    fd_final    = canon.denominator

ВАЖНО: знак дробной части НЕ приводится к знаку whole.
MixedNumber(-2, 3, 4) хранит whole=-2, fn=3 и означает -2*4 + 3 = -5/4.
Истинное значение всегда читается через to_improper_fraction().
Предикаты is_positive/is_negative смотрят на комбинацию whole и fn,
а не на истинное значение.
"""

from decimal import Decimal
from typing import Any, Final

from pydantic import BaseModel, Field, model_validator

from fractionlib.config import (
    FRACTION_SEPARATOR,
    INT32_MAX,
    INT32_MIN,
    MIXED_SEPARATOR,
)
from fractionlib.core.domain.fraction import Fraction, is_plain_int
from fractionlib.core.math.integer_arithmetic import (
    check_int32,
    fits_int32,
    reduce_pair,
    trunc_divmod,
)
from fractionlib.core.parsing import parse_int32, require_text
from fractionlib.errors import FractionFormatError


# =============================================================================
# MIXED NUMBER MODEL
# =============================================================================


class MixedNumber(BaseModel):
    """
    Смешанное число whole fn/fd.

    Конструируется позиционно: MixedNumber(1, 5, 3) -> 2 2/3.

    Равенство и hash — по полям (whole, fraction_numerator,
    fraction_denominator). Порядок (<, >, compare) — через improper fraction.
    """

    whole: int = Field(..., ge=INT32_MIN, le=INT32_MAX, description="Целая часть")
    fraction_numerator: int = Field(
        ..., ge=INT32_MIN, le=INT32_MAX, description="Числитель дробной части (|fn| < fd)"
    )
    fraction_denominator: int = Field(
        ..., gt=0, le=INT32_MAX, description="Знаменатель дробной части (> 0)"
    )

    model_config = {"frozen": True, "strict": True}  # Immutable

    def __init__(
        self,
        whole: int = 0,
        fraction_numerator: int = 0,
        fraction_denominator: int = 1,
    ) -> None:
        if all(is_plain_int(v) for v in (whole, fraction_numerator, fraction_denominator)):
            canon = Fraction(fraction_numerator, fraction_denominator)
            carried, fraction_numerator = trunc_divmod(canon.numerator, canon.denominator)
            whole = check_int32(whole + carried, "whole")
            fraction_denominator = canon.denominator
            check_int32(whole * fraction_denominator + fraction_numerator, "improper numerator")
        super().__init__(
            whole=whole,
            fraction_numerator=fraction_numerator,
            fraction_denominator=fraction_denominator,
        )

    @model_validator(mode="before")
    @classmethod
    def normalize_fields(cls, data: Any) -> Any:
        """Нормализация при model_validate({...}); ошибки диапазона — ValidationError."""
        if not isinstance(data, dict):
            return data

        whole = data.get("whole")
        numerator = data.get("fraction_numerator")
        denominator = data.get("fraction_denominator")
        if not all(is_plain_int(v) for v in (whole, numerator, denominator)) or denominator == 0:
            return data

        numerator, denominator = reduce_pair(numerator, denominator)
        carried, numerator = trunc_divmod(numerator, denominator)
        return {
            **data,
            "whole": whole + carried,
            "fraction_numerator": numerator,
            "fraction_denominator": denominator,
        }

    @model_validator(mode="after")
    def validate_improper_numerator(self) -> "MixedNumber":
        """whole * fd + fn должен помещаться в int32, иначе значение непригодно для арифметики."""
        improper = self.whole * self.fraction_denominator + self.fraction_numerator
        if not fits_int32(improper):
            raise ValueError(f"improper numerator {improper} is outside int32 range")
        return self

    # -------------------------------------------------------------------------
    # Factories & conversions
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "MixedNumber":
        return cls(value, 0, 1)

    @classmethod
    def zero(cls) -> "MixedNumber":
        return cls(0, 0, 1)

    @classmethod
    def from_fraction(cls, fraction: Fraction) -> "MixedNumber":
        """
        Выделение целой части из дроби (truncating division).

        Examples:
            >>> MixedNumber.from_fraction(Fraction(11, 4))
            MixedNumber(2, 3, 4)
            >>> MixedNumber.from_fraction(Fraction(-7, 4))
            MixedNumber(-1, -3, 4)
        """
        whole, remainder = trunc_divmod(fraction.numerator, fraction.denominator)
        return cls(whole, remainder, fraction.denominator)

    def to_improper_fraction(self) -> Fraction:
        """Истинное значение: (whole * fd + fn) / fd."""
        return Fraction(
            self.whole * self.fraction_denominator + self.fraction_numerator,
            self.fraction_denominator,
        )

    @property
    def fractional_part(self) -> Fraction:
        """Дробная часть как Fraction(fn, fd)."""
        return Fraction(self.fraction_numerator, self.fraction_denominator)

    def to_float(self) -> float:
        return self.to_improper_fraction().to_float()

    def __float__(self) -> float:
        return self.to_float()

    def to_decimal(self) -> Decimal:
        return self.to_improper_fraction().to_decimal()

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.whole == 0 and self.fraction_numerator == 0

    @property
    def is_positive(self) -> bool:
        """whole > 0, либо whole == 0 и fn > 0 (знак fn при whole != 0 не учитывается)."""
        return self.whole > 0 or (self.whole == 0 and self.fraction_numerator > 0)

    @property
    def is_negative(self) -> bool:
        return self.whole < 0 or (self.whole == 0 and self.fraction_numerator < 0)

    def __bool__(self) -> bool:
        return not self.is_zero

    # -------------------------------------------------------------------------
    # Arithmetic (через Fraction)
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "MixedNumber":
        other_mixed = _coerce(other)
        if other_mixed is None:
            return NotImplemented
        return MixedNumber.from_fraction(
            self.to_improper_fraction() + other_mixed.to_improper_fraction()
        )

    def __radd__(self, other: Any) -> "MixedNumber":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "MixedNumber":
        other_mixed = _coerce(other)
        if other_mixed is None:
            return NotImplemented
        return MixedNumber.from_fraction(
            self.to_improper_fraction() - other_mixed.to_improper_fraction()
        )

    def __rsub__(self, other: Any) -> "MixedNumber":
        other_mixed = _coerce(other)
        if other_mixed is None:
            return NotImplemented
        return other_mixed.__sub__(self)

    def __mul__(self, other: Any) -> "MixedNumber":
        other_mixed = _coerce(other)
        if other_mixed is None:
            return NotImplemented
        return MixedNumber.from_fraction(
            self.to_improper_fraction() * other_mixed.to_improper_fraction()
        )

    def __rmul__(self, other: Any) -> "MixedNumber":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "MixedNumber":
        """
        Деление.

        Raises:
            FractionZeroDivisionError: Если делитель равен нулю (из Fraction)
        """
        other_mixed = _coerce(other)
        if other_mixed is None:
            return NotImplemented
        return MixedNumber.from_fraction(
            self.to_improper_fraction() / other_mixed.to_improper_fraction()
        )

    def __rtruediv__(self, other: Any) -> "MixedNumber":
        other_mixed = _coerce(other)
        if other_mixed is None:
            return NotImplemented
        return other_mixed.__truediv__(self)

    def __neg__(self) -> "MixedNumber":
        # Поля отрицаются напрямую, конструктор нормализует результат
        return MixedNumber(-self.whole, -self.fraction_numerator, self.fraction_denominator)

    def __pos__(self) -> "MixedNumber":
        return self

    def __abs__(self) -> "MixedNumber":
        return MixedNumber(
            abs(self.whole), abs(self.fraction_numerator), self.fraction_denominator
        )

    def abs(self) -> "MixedNumber":
        """|whole| |fn|/fd (поля по модулю)."""
        return self.__abs__()

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(self, other: "MixedNumber | Fraction | int") -> int:
        """
        Трёхзначное сравнение через improper fraction: -1, 0 или +1.

        int сравнивается точно, без приведения к 32-битному MixedNumber.
        """
        if isinstance(other, MixedNumber):
            other = other.to_improper_fraction()
        elif not (isinstance(other, Fraction) or is_plain_int(other)):
            raise TypeError(f"Cannot compare MixedNumber with {type(other).__name__}")
        return self.to_improper_fraction().compare(other)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MixedNumber):
            return NotImplemented
        return (
            self.whole == other.whole
            and self.fraction_numerator == other.fraction_numerator
            and self.fraction_denominator == other.fraction_denominator
        )

    def __hash__(self) -> int:
        return hash((self.whole, self.fraction_numerator, self.fraction_denominator))

    def __lt__(self, other: Any) -> bool:
        if not _is_comparable(other):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        if not _is_comparable(other):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not _is_comparable(other):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not _is_comparable(other):
            return NotImplemented
        return self.compare(other) >= 0

    # -------------------------------------------------------------------------
    # Text
    # -------------------------------------------------------------------------

    def format(self) -> str:
        """
        Текстовое представление.

        - fn == 0            -> "whole"
        - whole == 0         -> "fn/fd" (знак fn как есть)
        - иначе              -> "whole |fn|/fd" (знак передаёт whole)
        """
        if self.fraction_numerator == 0:
            return str(self.whole)

        if self.whole == 0:
            return f"{self.fraction_numerator}{FRACTION_SEPARATOR}{self.fraction_denominator}"

        return (
            f"{self.whole}{MIXED_SEPARATOR}"
            f"{abs(self.fraction_numerator)}{FRACTION_SEPARATOR}{self.fraction_denominator}"
        )

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return (
            f"MixedNumber({self.whole}, {self.fraction_numerator}, "
            f"{self.fraction_denominator})"
        )

    @classmethod
    def parse(cls, text: str) -> "MixedNumber":
        """
        Разбор строки "w", "n/d" или "w n/d".

        Знак числителя в "w n/d" сохраняется как указан: "-1 1/2" даёт
        whole=-1, fn=1 (значение -1/2).

        Raises:
            TypeError: Если text не str
            FractionFormatError: Если формат неверный
            ZeroDenominatorError: Если знаменатель равен 0
            FractionOverflowError: Если результат вне int32

        Examples:
            >>> MixedNumber.parse("7/4")
            MixedNumber(1, 3, 4)
            >>> MixedNumber.parse("2 3/4")
            MixedNumber(2, 3, 4)
        """
        require_text(text)
        text = text.strip()

        has_slash = FRACTION_SEPARATOR in text
        has_space = MIXED_SEPARATOR in text

        if has_slash and not has_space:
            return cls.from_fraction(Fraction.parse(text))

        if not has_slash and not has_space:
            whole = parse_int32(text)
            if whole is not None:
                return cls(whole, 0, 1)
            raise FractionFormatError(f"String '{text}' is not in a valid mixed number format")

        tokens = [t for t in text.split(MIXED_SEPARATOR) if t]
        if len(tokens) == 2:
            whole = parse_int32(tokens[0])
            fraction_parts = tokens[1].split(FRACTION_SEPARATOR)
            if whole is not None and len(fraction_parts) == 2:
                numerator = parse_int32(fraction_parts[0])
                denominator = parse_int32(fraction_parts[1])
                if numerator is not None and denominator is not None:
                    return cls(whole, numerator, denominator)

        raise FractionFormatError(f"String '{text}' is not in a valid mixed number format")

    @classmethod
    def try_parse(cls, text: Any) -> tuple[bool, "MixedNumber"]:
        """Разбор без исключений: (True, value) или (False, MIXED_ZERO)."""
        try:
            return True, cls.parse(text)
        except Exception:
            return False, cls.zero()


def _is_comparable(value: Any) -> bool:
    return isinstance(value, (MixedNumber, Fraction)) or is_plain_int(value)


def _coerce(value: Any) -> MixedNumber | None:
    """MixedNumber как есть, Fraction/int -> MixedNumber, прочее -> None."""
    if isinstance(value, MixedNumber):
        return value
    if isinstance(value, Fraction):
        return MixedNumber.from_fraction(value)
    if is_plain_int(value):
        return MixedNumber.from_int(value)
    return None


# =============================================================================
# CONSTANTS
# =============================================================================

MIXED_ZERO: Final[MixedNumber] = MixedNumber(0, 0, 1)
