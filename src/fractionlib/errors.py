"""
Errors — иерархия исключений fractionlib

Каждый вид ошибки наследует FractionError (общая база библиотеки) и
встроенное исключение Python с той же семантикой, поэтому вызывающий код
может ловить либо конкретный тип, либо стандартный (ValueError,
ZeroDivisionError, ...).

Политика распространения:
- Все ошибки пробрасываются напрямую вызывающему коду
- Единственное место перехвата: try_parse (возвращает (False, zero))
- Ни одна операция не оставляет частично построенного значения
"""


class FractionError(Exception):
    """Базовое исключение fractionlib."""

    pass


class ZeroDenominatorError(FractionError, ValueError):
    """
    Знаменатель равен нулю при конструировании.

    Возникает в Fraction(n, 0), MixedNumber(w, n, 0) и при разборе "n/0".
    """

    pass


class FractionZeroDivisionError(FractionError, ZeroDivisionError):
    """Деление на нулевую дробь (или нулевое смешанное число)."""

    pass


class ZeroReciprocalError(FractionError, ArithmeticError):
    """Обратное значение для нуля не определено."""

    pass


class FractionFormatError(FractionError, ValueError):
    """Строка не соответствует формату дроби или смешанного числа."""

    pass


class FractionOverflowError(FractionError, OverflowError):
    """
    Каноническое значение не помещается в знаковое 32-битное целое.

    Промежуточные произведения вычисляются точно, проверяется только
    результат, который должен быть сохранён в модели.
    """

    pass
