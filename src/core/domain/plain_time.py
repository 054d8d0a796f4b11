"""
PlainTime — Модель времени суток без даты и часового пояса

Immutable Pydantic модель: шесть валидированных полей ISO времени и ссылка
на календарь. Календарь не принадлежит модели и никогда ей не изменяется.

Создаётся через create_temporal_time (src.temporal.factory), который выполняет
проверку полей и выбор календаря по умолчанию.
"""

from typing import Any

from pydantic import BaseModel, Field

from .time_record import TemporalTime


class PlainTime(BaseModel):
    """
    Время суток: hour..nanosecond + календарь.

    Immutable модель (frozen=True). Все изменения должны создавать новый экземпляр.
    """

    iso_hour: int = Field(..., ge=0, le=23, description="Час [0, 23]")
    iso_minute: int = Field(..., ge=0, le=59, description="Минута [0, 59]")
    iso_second: int = Field(..., ge=0, le=59, description="Секунда [0, 59]")
    iso_millisecond: int = Field(..., ge=0, le=999, description="Миллисекунда [0, 999]")
    iso_microsecond: int = Field(..., ge=0, le=999, description="Микросекунда [0, 999]")
    iso_nanosecond: int = Field(..., ge=0, le=999, description="Наносекунда [0, 999]")

    # Внешний объект: только ссылка, без валидации и копирования
    calendar: Any = Field(..., description="Календарь (non-owning reference)")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    def time_record(self) -> TemporalTime:
        """Поля времени как запись TemporalTime."""
        return TemporalTime(
            self.iso_hour,
            self.iso_minute,
            self.iso_second,
            self.iso_millisecond,
            self.iso_microsecond,
            self.iso_nanosecond,
        )

    def total_nanoseconds(self) -> int:
        """Наносекунды от полуночи."""
        return self.time_record.total_nanoseconds()
