"""
Domain models and value objects.

Contains the time-of-day records (TemporalTime, DaysAndTime), the PlainTime
value model and the calendar collaborators.
"""

from src.core.domain.calendar import (
    ISO8601_CALENDAR_ID,
    Calendar,
    CalendarProvider,
    ISO8601Calendar,
    ISO8601CalendarProvider,
)
from src.core.domain.plain_time import PlainTime
from src.core.domain.time_record import (
    NANOSECONDS_PER_DAY,
    NANOSECONDS_PER_HOUR,
    NANOSECONDS_PER_MICROSECOND,
    NANOSECONDS_PER_MILLISECOND,
    NANOSECONDS_PER_MINUTE,
    NANOSECONDS_PER_SECOND,
    TEMPORAL_TIME_LIKE_PROPERTIES,
    TIME_FIELD_RANGES,
    DaysAndTime,
    TemporalTime,
)

__all__ = [
    # Time records
    "NANOSECONDS_PER_DAY",
    "NANOSECONDS_PER_HOUR",
    "NANOSECONDS_PER_MINUTE",
    "NANOSECONDS_PER_SECOND",
    "NANOSECONDS_PER_MILLISECOND",
    "NANOSECONDS_PER_MICROSECOND",
    "TIME_FIELD_RANGES",
    "TEMPORAL_TIME_LIKE_PROPERTIES",
    "TemporalTime",
    "DaysAndTime",
    # Calendar
    "ISO8601_CALENDAR_ID",
    "Calendar",
    "CalendarProvider",
    "ISO8601Calendar",
    "ISO8601CalendarProvider",
    # PlainTime model
    "PlainTime",
]
