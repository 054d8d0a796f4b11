"""Overflow Regulation — политика обработки полей вне диапазона.

- Overflow.CONSTRAIN: clamp каждого поля (constrain_time)
- Overflow.REJECT: проверка (is_valid_time), при ошибке TemporalRangeError

Любое другое значение политики в regulate_time является дефектом вызывающего кода
(TemporalContractViolation). Значение из пользовательского options-словаря
проверяется раньше, в RegulationConfig.from_mapping, и даёт TemporalRangeError.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union

from src.core.domain.time_record import TemporalTime
from src.core.math.integer_arithmetic import IntegerOrInfinity
from src.temporal.errors import TemporalContractViolation, TemporalRangeError
from src.temporal.time_fields import constrain_time, is_valid_time

logger = logging.getLogger(__name__)


class Overflow(str, Enum):
    """Политика переполнения."""

    CONSTRAIN = "constrain"
    REJECT = "reject"


@dataclass(frozen=True)
class RegulationConfig:
    """Конфигурация регулятора.

    overflow: политика переполнения (default: CONSTRAIN)
    """

    overflow: Overflow = Overflow.CONSTRAIN

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None) -> "RegulationConfig":
        """Чтение конфигурации из options-словаря.

        Args:
            options: словарь с необязательным ключом "overflow"

        Raises:
            TemporalRangeError: если значение overflow не распознано
        """
        if not options or options.get("overflow") is None:
            return cls()

        raw = options["overflow"]
        try:
            overflow = Overflow(raw)
        except ValueError:
            raise TemporalRangeError(
                f"{raw!r} is not a valid value for option overflow"
            ) from None
        return cls(overflow=overflow)


def regulate_time(
    hour: IntegerOrInfinity,
    minute: IntegerOrInfinity,
    second: IntegerOrInfinity,
    millisecond: IntegerOrInfinity,
    microsecond: IntegerOrInfinity,
    nanosecond: IntegerOrInfinity,
    overflow: Union[Overflow, str],
) -> TemporalTime:
    """Применение политики переполнения к шести полям.

    Args:
        hour..nanosecond: поля (целые или ±Infinity)
        overflow: Overflow или его строковое значение

    Returns:
        TemporalTime (clamped для CONSTRAIN, без изменений для REJECT)

    Raises:
        TemporalRangeError: REJECT и поля невалидны
        TemporalContractViolation: нераспознанная политика
    """
    if overflow == Overflow.CONSTRAIN:
        return constrain_time(hour, minute, second, millisecond, microsecond, nanosecond)

    if overflow == Overflow.REJECT:
        if not is_valid_time(hour, minute, second, millisecond, microsecond, nanosecond):
            logger.warning(
                "Rejected time %s:%s:%s.%s.%s.%s",
                hour, minute, second, millisecond, microsecond, nanosecond,
            )
            raise TemporalRangeError()
        return TemporalTime(hour, minute, second, millisecond, microsecond, nanosecond)

    logger.critical("Unreachable overflow policy: %r", overflow)
    raise TemporalContractViolation(f"overflow must be 'constrain' or 'reject', got {overflow!r}")


class TimeRegulator:
    """Регулятор с фиксированной конфигурацией.

    Использование:
        regulator = TimeRegulator(RegulationConfig(overflow=Overflow.REJECT))
        record = regulator.regulate(to_temporal_time_record(source))
    """

    def __init__(self, config: RegulationConfig | None = None):
        self.config = config or RegulationConfig()

    def regulate(self, record: TemporalTime) -> TemporalTime:
        return regulate_time(*record, overflow=self.config.overflow)
