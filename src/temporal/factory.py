"""Time Value Factory — создание PlainTime из валидированных полей.

Порядок:
1. Проверка полей (is_valid_time) → TemporalRangeError
2. Календарь: переданный явно, иначе calendar_provider.default_calendar()
3. Конструирование через new_target (по умолчанию PlainTime)
"""

import logging
from typing import Any, Callable, Optional

from src.core.domain.calendar import CalendarProvider, ISO8601CalendarProvider
from src.core.domain.plain_time import PlainTime
from src.temporal.errors import TemporalRangeError
from src.temporal.time_fields import is_valid_time

logger = logging.getLogger(__name__)


def create_temporal_time(
    hour: int,
    minute: int,
    second: int,
    millisecond: int,
    microsecond: int,
    nanosecond: int,
    *,
    calendar: Any = None,
    calendar_provider: Optional[CalendarProvider] = None,
    new_target: Optional[Callable[..., PlainTime]] = None,
) -> PlainTime:
    """Создание неизменяемого PlainTime.

    Args:
        hour..nanosecond: целые поля времени
        calendar: календарь; если None, берётся у calendar_provider
        calendar_provider: поставщик календаря по умолчанию
            (если не задан, то ISO8601CalendarProvider)
        new_target: конструктор результата; не интерпретируется, только
            вызывается с полями (по умолчанию PlainTime)

    Returns:
        PlainTime с полями, равными входным

    Raises:
        TemporalRangeError: если поля вне диапазона (календарь не запрашивается)
    """
    if not is_valid_time(hour, minute, second, millisecond, microsecond, nanosecond):
        raise TemporalRangeError()

    if calendar is None:
        provider = calendar_provider or ISO8601CalendarProvider()
        calendar = provider.default_calendar()

    constructor = new_target or PlainTime
    plain_time = constructor(
        iso_hour=hour,
        iso_minute=minute,
        iso_second=second,
        iso_millisecond=millisecond,
        iso_microsecond=microsecond,
        iso_nanosecond=nanosecond,
        calendar=calendar,
    )

    logger.debug("Created %s with calendar %s", type(plain_time).__name__, calendar)
    return plain_time
