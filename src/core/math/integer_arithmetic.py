"""
Integer Arithmetic — Floor-based integer primitives

Модуль содержит целочисленные примитивы для полей времени:
- Floor-деление и floor-остаток (знак остатка = знак делителя)
- Clamp в диапазон с поддержкой ±Infinity
- Проверка "integer or infinity" и приведение ToIntegerOrInfinity

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. floor_div округляет к -Infinity, НЕ к нулю
2. floor_mod(a, d) для d > 0 всегда в [0, d)
3. a == floor_div(a, d) * d + floor_mod(a, d) для любых целых a и d != 0
4. Все операции детерминированы и не имеют побочных эффектов
"""

import math
import re
from typing import Any, Final, Union

IntegerOrInfinity = Union[int, float]

# Десятичная запись числа: без "_", "0x", "inf" и "nan"
_DECIMAL_LITERAL: Final = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


# =============================================================================
# FLOOR ДЕЛЕНИЕ
# =============================================================================


def floor_div(dividend: int, divisor: int) -> int:
    """
    Целочисленное деление с округлением к -Infinity.

    Отличается от усечения (truncation) для отрицательных операндов:
    floor_div(-1, 1000) == -1, тогда как усечение дало бы 0.

    Args:
        dividend: Делимое (целое)
        divisor: Делитель (целое, != 0)

    Returns:
        floor(dividend / divisor)

    Raises:
        ZeroDivisionError: Если divisor == 0

    Examples:
        >>> floor_div(1500, 1000)
        1
        >>> floor_div(-1, 1000)
        -1
        >>> floor_div(-1000, 1000)
        -1
    """
    if divisor == 0:
        raise ZeroDivisionError("floor_div divisor must be non-zero")

    return dividend // divisor


def floor_mod(dividend: int, divisor: int) -> int:
    """
    Остаток от floor-деления.

    Знак результата совпадает со знаком делителя, поэтому для
    положительного делителя остаток всегда неотрицательный.

    Args:
        dividend: Делимое (целое)
        divisor: Делитель (целое, != 0)

    Returns:
        dividend - floor_div(dividend, divisor) * divisor

    Examples:
        >>> floor_mod(1500, 1000)
        500
        >>> floor_mod(-1, 24)
        23
        >>> floor_mod(-24, 24)
        0
    """
    if divisor == 0:
        raise ZeroDivisionError("floor_mod divisor must be non-zero")
    return dividend % divisor


def floor_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """
    Пара (floor_div, floor_mod) за один вызов.

    Returns:
        (quotient, remainder)
    """
    if divisor == 0:
        raise ZeroDivisionError("floor_divmod divisor must be non-zero")
    return divmod(dividend, divisor)


# =============================================================================
# CLAMP
# =============================================================================


def clamp(
    value: IntegerOrInfinity,
    min_value: IntegerOrInfinity,
    max_value: IntegerOrInfinity,
) -> IntegerOrInfinity:
    """
    Ограничение значения в диапазоне [min_value, max_value].

    ±Infinity насыщается к соответствующей границе.

    Args:
        value: Исходное значение (целое или ±Infinity)
        min_value: Нижняя граница
        max_value: Верхняя граница

    Returns:
        Значение, ограниченное диапазоном

    Raises:
        ValueError: Если min_value > max_value

    Examples:
        >>> clamp(30, 0, 23)
        23
        >>> clamp(-5, 0, 59)
        0
        >>> clamp(float("inf"), 0, 999)
        999
    """
    if min_value > max_value:
        raise ValueError(f"min_value {min_value} must be <= max_value {max_value}")

    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


# =============================================================================
# INTEGER OR INFINITY
# =============================================================================


def is_integer_or_infinity(value: Any) -> bool:
    """
    Проверка, является ли значение целым числом или ±Infinity.

    bool не считается числом. NaN не является ни целым, ни бесконечностью.

    Examples:
        >>> is_integer_or_infinity(5)
        True
        >>> is_integer_or_infinity(5.0)
        True
        >>> is_integer_or_infinity(float("-inf"))
        True
        >>> is_integer_or_infinity(5.5)
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        if math.isinf(value):
            return True
        return math.isfinite(value) and value.is_integer()
    return False


def _to_number(value: Any) -> float:
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if text in ("Infinity", "+Infinity"):
            return math.inf
        if text == "-Infinity":
            return -math.inf
        if not _DECIMAL_LITERAL.fullmatch(text):
            return math.nan
        return float(text)

    raise TypeError(f"Cannot convert {type(value).__name__} to a number")


def to_integer_or_infinity(value: Any) -> IntegerOrInfinity:
    """
    Приведение произвольного значения к целому или ±Infinity.

    Правила:
    - bool → 0 / 1
    - int → без изменений
    - float: NaN → 0, ±Infinity → без изменений, иначе усечение к нулю
    - str: пробелы отбрасываются, пустая строка → 0, "Infinity"/"-Infinity"
      → ±Infinity, числовая строка → как float, иначе NaN → 0
    - всё остальное → TypeError

    Args:
        value: Исходное значение

    Returns:
        int или ±math.inf

    Raises:
        TypeError: Если значение не приводится к числу

    Examples:
        >>> to_integer_or_infinity(12.9)
        12
        >>> to_integer_or_infinity(-12.9)
        -12
        >>> to_integer_or_infinity("7")
        7
        >>> to_integer_or_infinity(float("nan"))
        0
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value

    number = value if isinstance(value, float) else _to_number(value)

    if math.isnan(number):
        return 0
    if math.isinf(number):
        return number
    return math.trunc(number)
