"""
TimeRecord — Записи полей времени суток

Записи для промежуточных значений времени:
- TemporalTime: шесть полей hour..nanosecond (могут временно выходить за диапазон)
- DaysAndTime: TemporalTime + перенос дней после балансировки

Записи неизменяемые (NamedTuple) и сравниваются как обычные кортежи.
"""

from typing import Final, NamedTuple

from src.core.math.integer_arithmetic import IntegerOrInfinity


# =============================================================================
# ДИАПАЗОНЫ ПОЛЕЙ
# =============================================================================

HOURS_PER_DAY: Final[int] = 24
MINUTES_PER_HOUR: Final[int] = 60
SECONDS_PER_MINUTE: Final[int] = 60
MILLISECONDS_PER_SECOND: Final[int] = 1000
MICROSECONDS_PER_MILLISECOND: Final[int] = 1000
NANOSECONDS_PER_MICROSECOND: Final[int] = 1000

NANOSECONDS_PER_MILLISECOND: Final[int] = (
    MICROSECONDS_PER_MILLISECOND * NANOSECONDS_PER_MICROSECOND
)
NANOSECONDS_PER_SECOND: Final[int] = MILLISECONDS_PER_SECOND * NANOSECONDS_PER_MILLISECOND
NANOSECONDS_PER_MINUTE: Final[int] = SECONDS_PER_MINUTE * NANOSECONDS_PER_SECOND
NANOSECONDS_PER_HOUR: Final[int] = MINUTES_PER_HOUR * NANOSECONDS_PER_MINUTE
NANOSECONDS_PER_DAY: Final[int] = HOURS_PER_DAY * NANOSECONDS_PER_HOUR

# Канонические максимумы (минимум всегда 0), в порядке точности
TIME_FIELD_RANGES: Final[dict[str, int]] = {
    "hour": HOURS_PER_DAY - 1,
    "minute": MINUTES_PER_HOUR - 1,
    "second": SECONDS_PER_MINUTE - 1,
    "millisecond": MILLISECONDS_PER_SECOND - 1,
    "microsecond": MICROSECONDS_PER_MILLISECOND - 1,
    "nanosecond": NANOSECONDS_PER_MICROSECOND - 1,
}

# Порядок чтения свойств time-like объекта (алфавитный, НЕ порядок точности).
# Чтение свойства может иметь наблюдаемые побочные эффекты, порядок фиксирован.
TEMPORAL_TIME_LIKE_PROPERTIES: Final[tuple[str, ...]] = (
    "hour",
    "microsecond",
    "millisecond",
    "minute",
    "nanosecond",
    "second",
)


# =============================================================================
# RECORDS
# =============================================================================


class TemporalTime(NamedTuple):
    """Шесть полей времени суток в порядке точности."""

    hour: IntegerOrInfinity
    minute: IntegerOrInfinity
    second: IntegerOrInfinity
    millisecond: IntegerOrInfinity
    microsecond: IntegerOrInfinity
    nanosecond: IntegerOrInfinity

    def total_nanoseconds(self) -> int:
        """
        Количество наносекунд, заданное полями (от полуночи).

        Поля не обязаны быть в каноническом диапазоне, но должны быть конечными.

        Raises:
            ValueError: Если какое-либо поле бесконечно
        """
        for name, value in zip(self._fields, self):
            if value in (float("inf"), float("-inf")):
                raise ValueError(f"{name} must be finite, got {value}")

        return (
            int(self.hour) * NANOSECONDS_PER_HOUR
            + int(self.minute) * NANOSECONDS_PER_MINUTE
            + int(self.second) * NANOSECONDS_PER_SECOND
            + int(self.millisecond) * NANOSECONDS_PER_MILLISECOND
            + int(self.microsecond) * NANOSECONDS_PER_MICROSECOND
            + int(self.nanosecond)
        )


class DaysAndTime(NamedTuple):
    """
    Результат балансировки: перенос дней и время в каноническом диапазоне.

    days может быть отрицательным и не ограничен по модулю.
    """

    days: int
    hour: int
    minute: int
    second: int
    millisecond: int
    microsecond: int
    nanosecond: int

    @property
    def time(self) -> TemporalTime:
        """Время без переноса дней."""
        return TemporalTime(*self[1:])

    def total_nanoseconds(self) -> int:
        """Полное количество наносекунд, включая перенос дней."""
        return self.days * NANOSECONDS_PER_DAY + self.time.total_nanoseconds()
