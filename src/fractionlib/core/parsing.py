"""
Parsing — общая грамматика текстового формата

Целочисленный токен:
- необязательные пробелы по краям
- необязательный знак '+' или '-'
- только ASCII цифры (без '_', '.', экспоненты и non-ASCII цифр)
- значение в диапазоне int32

Используется Fraction.parse и MixedNumber.parse.
"""

import re
from typing import Any

from fractionlib.core.math.integer_arithmetic import fits_int32
from fractionlib.errors import FractionFormatError

_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


def parse_int32(token: str) -> int | None:
    """
    Разбор целочисленного токена.

    Args:
        token: Текст токена

    Returns:
        Значение int или None, если токен не является целым int32

    Examples:
        >>> parse_int32(" -12 ")
        -12
        >>> parse_int32("1.5") is None
        True
        >>> parse_int32("3000000000") is None
        True
    """
    stripped = token.strip()
    if not _INTEGER_TOKEN.fullmatch(stripped):
        return None

    value = int(stripped)
    if not fits_int32(value):
        return None
    return value


def require_text(text: Any) -> str:
    """
    Предварительная проверка входа parse.

    Raises:
        TypeError: Если text не str
        FractionFormatError: Если text пустой или состоит из пробелов
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    if not text.strip():
        raise FractionFormatError("Input string cannot be empty or whitespace")

    return text
