"""
Calendar — Коллабораторы календаря

Значение времени только ссылается на календарь и никогда его не изменяет.
Календарная система сама по себе внешняя: здесь определены только узкие
интерфейсы и ISO 8601 календарь по умолчанию.
"""

from typing import Final, Protocol, runtime_checkable

from pydantic import BaseModel, Field

ISO8601_CALENDAR_ID: Final[str] = "iso8601"


@runtime_checkable
class Calendar(Protocol):
    """Календарь; требуется только идентификатор."""

    @property
    def identifier(self) -> str: ...


class CalendarProvider(Protocol):
    """Поставщик календаря по умолчанию."""

    def default_calendar(self) -> Calendar: ...


class ISO8601Calendar(BaseModel):
    """
    ISO 8601 календарь.

    Immutable модель (frozen=True).
    """

    identifier: str = Field(
        default=ISO8601_CALENDAR_ID, min_length=1, description="Идентификатор календаря"
    )

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return self.identifier


class ISO8601CalendarProvider:
    """Всегда возвращает один и тот же экземпляр ISO8601Calendar."""

    def __init__(self, calendar: ISO8601Calendar | None = None):
        self._calendar = calendar or ISO8601Calendar()

    def default_calendar(self) -> ISO8601Calendar:
        return self._calendar
