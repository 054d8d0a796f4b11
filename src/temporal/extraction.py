"""Field Extractor — чтение полей времени из time-like объекта.

Свойства читаются в фиксированном порядке TEMPORAL_TIME_LIKE_PROPERTIES
(hour, microsecond, millisecond, minute, nanosecond, second). Чтение свойства
может выполнять внешнюю логику с побочными эффектами, поэтому:
- каждое свойство читается ровно один раз
- при первом отсутствующем свойстве чтение прекращается
- порядок не зависит от порядка ключей исходного объекта
"""

import logging
from typing import Any, Callable, Mapping, Optional, Protocol

from src.core.domain.time_record import (
    TEMPORAL_TIME_LIKE_PROPERTIES,
    TemporalTime,
)
from src.core.math.integer_arithmetic import IntegerOrInfinity, to_integer_or_infinity
from src.temporal.errors import MissingRequiredPropertyError

logger = logging.getLogger(__name__)


class FieldSource(Protocol):
    """Источник именованных свойств: None означает отсутствие (undefined)."""

    def get(self, name: str) -> Optional[Any]: ...


class MappingFieldSource:
    """Адаптер для словаря."""

    def __init__(self, mapping: Mapping[str, Any]):
        self._mapping = mapping

    def get(self, name: str) -> Optional[Any]:
        return self._mapping.get(name)


class AttributeFieldSource:
    """Адаптер для произвольного объекта: свойства = атрибуты.

    Отсутствующий атрибут даёт None. AttributeError из getter-а объявленного
    свойства пробрасывается без изменений.
    """

    def __init__(self, obj: Any):
        self._obj = obj

    def get(self, name: str) -> Optional[Any]:
        try:
            return getattr(self._obj, name)
        except AttributeError:
            if self._declares(name):
                raise
            return None

    def _declares(self, name: str) -> bool:
        return hasattr(type(self._obj), name) or name in getattr(self._obj, "__dict__", {})


def to_temporal_time_record(
    source: FieldSource,
    to_integer: Callable[[Any], IntegerOrInfinity] = to_integer_or_infinity,
) -> TemporalTime:
    """Чтение шести обязательных полей времени.

    Args:
        source: источник свойств
        to_integer: приведение значения к целому или ±Infinity
            (ошибки приведения пробрасываются как есть)

    Returns:
        TemporalTime с приведёнными (но не проверенными) значениями

    Raises:
        MissingRequiredPropertyError: первое отсутствующее свойство
    """
    values: dict[str, IntegerOrInfinity] = {}

    for name in TEMPORAL_TIME_LIKE_PROPERTIES:
        value = source.get(name)
        if value is None:
            logger.debug("Time-like object is missing %s", name)
            raise MissingRequiredPropertyError(name)
        values[name] = to_integer(value)

    return TemporalTime(**values)
