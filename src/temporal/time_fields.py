"""Операции над полями времени суток: проверка, clamp, балансировка.

- is_valid_time: все шесть полей в каноническом диапазоне
- constrain_time: независимый clamp каждого поля, без переноса
- balance_time: перенос переполнения снизу вверх, вплоть до дней

Балансировка использует floor-деление и floor-остаток: все поля кроме days
всегда неотрицательны, знак переполнения целиком уходит в days.
"""

import logging

from src.core.domain.time_record import (
    HOURS_PER_DAY,
    MICROSECONDS_PER_MILLISECOND,
    MILLISECONDS_PER_SECOND,
    MINUTES_PER_HOUR,
    NANOSECONDS_PER_MICROSECOND,
    SECONDS_PER_MINUTE,
    TIME_FIELD_RANGES,
    DaysAndTime,
    TemporalTime,
)
from src.core.math.integer_arithmetic import IntegerOrInfinity, clamp, floor_divmod

logger = logging.getLogger(__name__)


def is_valid_time(
    hour: IntegerOrInfinity,
    minute: IntegerOrInfinity,
    second: IntegerOrInfinity,
    millisecond: IntegerOrInfinity,
    microsecond: IntegerOrInfinity,
    nanosecond: IntegerOrInfinity,
) -> bool:
    """Проверка, что все поля в каноническом диапазоне.

    Поля должны быть целыми или ±Infinity (контракт вызывающего кода).
    Отрицательные значения также считаются невалидными.

    Returns:
        True если hour∈[0,23], minute,second∈[0,59], остальные∈[0,999]
    """
    fields = (hour, minute, second, millisecond, microsecond, nanosecond)
    for value, maximum in zip(fields, TIME_FIELD_RANGES.values()):
        if value > maximum:
            return False
        if value < 0:
            return False
    return True


def constrain_time(
    hour: IntegerOrInfinity,
    minute: IntegerOrInfinity,
    second: IntegerOrInfinity,
    millisecond: IntegerOrInfinity,
    microsecond: IntegerOrInfinity,
    nanosecond: IntegerOrInfinity,
) -> TemporalTime:
    """Clamp каждого поля в [0, max] независимо от остальных.

    Переполнение одного поля не переносится в соседние.

    Examples:
        >>> constrain_time(30, -5, 999, 2000, 5, 5)
        TemporalTime(hour=23, minute=0, second=59, millisecond=999, microsecond=5, nanosecond=5)
    """
    fields = (hour, minute, second, millisecond, microsecond, nanosecond)
    return TemporalTime(
        *(
            clamp(value, 0, maximum)
            for value, maximum in zip(fields, TIME_FIELD_RANGES.values())
        )
    )


def balance_time(
    hour: int,
    minute: int,
    second: int,
    millisecond: int,
    microsecond: int,
    nanosecond: int,
) -> DaysAndTime:
    """Нормализация произвольных целых полей в канонический диапазон + days.

    Порядок переноса: ns → µs → ms → s → min → h → days.
    Каждый шаг: floor-деление и floor-остаток.

    Инвариант: DaysAndTime.total_nanoseconds() == сумма наносекунд входа.

    Examples:
        >>> balance_time(0, 0, 0, 0, 0, 1500)
        DaysAndTime(days=0, hour=0, minute=0, second=0, millisecond=0, microsecond=1, nanosecond=500)
        >>> balance_time(-1, 0, 0, 0, 0, 0)
        DaysAndTime(days=-1, hour=23, minute=0, second=0, millisecond=0, microsecond=0, nanosecond=0)
    """
    carry, nanosecond = floor_divmod(nanosecond, NANOSECONDS_PER_MICROSECOND)
    microsecond += carry

    carry, microsecond = floor_divmod(microsecond, MICROSECONDS_PER_MILLISECOND)
    millisecond += carry

    carry, millisecond = floor_divmod(millisecond, MILLISECONDS_PER_SECOND)
    second += carry

    carry, second = floor_divmod(second, SECONDS_PER_MINUTE)
    minute += carry

    carry, minute = floor_divmod(minute, MINUTES_PER_HOUR)
    hour += carry

    days, hour = floor_divmod(hour, HOURS_PER_DAY)

    if days:
        logger.debug("balance_time carried %d day(s)", days)

    return DaysAndTime(
        days=days,
        hour=hour,
        minute=minute,
        second=second,
        millisecond=millisecond,
        microsecond=microsecond,
        nanosecond=nanosecond,
    )
