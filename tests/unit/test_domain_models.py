"""
Тесты для доменных моделей: TemporalTime, DaysAndTime, PlainTime, Calendar

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Immutability (frozen=True)
3. Связь PlainTime с записью TemporalTime
4. Вспомогательные расчёты (total_nanoseconds)
"""

import math

import pytest
from pydantic import ValidationError

from src.core.domain import (
    NANOSECONDS_PER_DAY,
    TEMPORAL_TIME_LIKE_PROPERTIES,
    TIME_FIELD_RANGES,
    Calendar,
    DaysAndTime,
    ISO8601Calendar,
    ISO8601CalendarProvider,
    PlainTime,
    TemporalTime,
)


# =============================================================================
# RECORDS
# =============================================================================


class TestTemporalTime:
    """Тесты для записи TemporalTime"""

    def test_equals_plain_tuple(self) -> None:
        assert TemporalTime(1, 2, 3, 4, 5, 6) == (1, 2, 3, 4, 5, 6)

    def test_total_nanoseconds(self) -> None:
        assert TemporalTime(0, 0, 0, 0, 0, 0).total_nanoseconds() == 0
        assert TemporalTime(23, 59, 59, 999, 999, 999).total_nanoseconds() == NANOSECONDS_PER_DAY - 1
        assert TemporalTime(0, 0, 1, 0, 0, 0).total_nanoseconds() == 1_000_000_000

    def test_total_nanoseconds_infinite_raises(self) -> None:
        with pytest.raises(ValueError, match="second must be finite"):
            TemporalTime(0, 0, math.inf, 0, 0, 0).total_nanoseconds()

    def test_immutable(self) -> None:
        record = TemporalTime(1, 2, 3, 4, 5, 6)
        with pytest.raises(AttributeError):
            record.hour = 5  # type: ignore[misc]


class TestDaysAndTime:
    """Тесты для записи DaysAndTime"""

    def test_total_nanoseconds_includes_days(self) -> None:
        value = DaysAndTime(days=-1, hour=23, minute=0, second=0, millisecond=0, microsecond=0, nanosecond=0)
        assert value.total_nanoseconds() == -NANOSECONDS_PER_DAY + 23 * 3_600_000_000_000

    def test_time_drops_days(self) -> None:
        assert DaysAndTime(5, 1, 2, 3, 4, 5, 6).time == (1, 2, 3, 4, 5, 6)


class TestFieldTables:
    """Тесты для таблиц полей"""

    def test_ranges(self) -> None:
        assert TIME_FIELD_RANGES == {
            "hour": 23,
            "minute": 59,
            "second": 59,
            "millisecond": 999,
            "microsecond": 999,
            "nanosecond": 999,
        }

    def test_property_order_is_alphabetical(self) -> None:
        assert list(TEMPORAL_TIME_LIKE_PROPERTIES) == sorted(TIME_FIELD_RANGES)


# =============================================================================
# CALENDAR
# =============================================================================


class TestCalendar:
    """Тесты для ISO8601Calendar"""

    def test_default_identifier(self) -> None:
        calendar = ISO8601Calendar()
        assert calendar.identifier == "iso8601"
        assert str(calendar) == "iso8601"

    def test_satisfies_protocol(self) -> None:
        assert isinstance(ISO8601Calendar(), Calendar)

    def test_provider_returns_same_instance(self) -> None:
        provider = ISO8601CalendarProvider()
        assert provider.default_calendar() is provider.default_calendar()

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            ISO8601Calendar().identifier = "gregory"  # type: ignore[misc]


# =============================================================================
# PLAIN TIME
# =============================================================================


class TestPlainTime:
    """Тесты для модели PlainTime"""

    @pytest.fixture
    def plain_time(self) -> PlainTime:
        return PlainTime(
            iso_hour=12,
            iso_minute=30,
            iso_second=45,
            iso_millisecond=123,
            iso_microsecond=456,
            iso_nanosecond=789,
            calendar=ISO8601Calendar(),
        )

    def test_time_record(self, plain_time) -> None:
        assert plain_time.time_record == TemporalTime(12, 30, 45, 123, 456, 789)

    def test_total_nanoseconds(self, plain_time) -> None:
        assert plain_time.total_nanoseconds() == plain_time.time_record.total_nanoseconds()

    def test_immutable(self, plain_time) -> None:
        """PlainTime должен быть immutable (frozen=True)"""
        with pytest.raises(ValidationError):
            plain_time.iso_hour = 13  # type: ignore[misc]

    @pytest.mark.parametrize(
        "field,value",
        [
            ("iso_hour", 24),
            ("iso_minute", 60),
            ("iso_second", -1),
            ("iso_millisecond", 1000),
            ("iso_microsecond", 1000),
            ("iso_nanosecond", 1000),
        ],
    )
    def test_direct_construction_validates_ranges(self, plain_time, field, value) -> None:
        data = plain_time.model_dump()
        data[field] = value
        data["calendar"] = plain_time.calendar
        with pytest.raises(ValidationError):
            PlainTime(**data)

    def test_json_serialization(self, plain_time) -> None:
        data = plain_time.model_dump(mode="json")
        assert data["iso_hour"] == 12
        assert data["iso_nanosecond"] == 789
        assert data["calendar"] == {"identifier": "iso8601"}
