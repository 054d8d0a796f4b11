"""Temporal — операции над временем суток (PlainTime).

- Проверка, clamp и балансировка полей времени
- Политика переполнения (constrain / reject)
- Создание PlainTime с календарём по умолчанию
- Чтение полей из time-like объекта в фиксированном порядке
"""

from .errors import (
    MissingRequiredPropertyError,
    TemporalContractViolation,
    TemporalError,
    TemporalRangeError,
)
from .extraction import (
    AttributeFieldSource,
    FieldSource,
    MappingFieldSource,
    to_temporal_time_record,
)
from .factory import create_temporal_time
from .regulation import Overflow, RegulationConfig, TimeRegulator, regulate_time
from .time_fields import balance_time, constrain_time, is_valid_time

__all__ = [
    # Errors
    "TemporalError",
    "TemporalRangeError",
    "MissingRequiredPropertyError",
    "TemporalContractViolation",
    # Field operations
    "is_valid_time",
    "constrain_time",
    "balance_time",
    # Regulation
    "Overflow",
    "RegulationConfig",
    "TimeRegulator",
    "regulate_time",
    # Factory
    "create_temporal_time",
    # Extraction
    "FieldSource",
    "MappingFieldSource",
    "AttributeFieldSource",
    "to_temporal_time_record",
]
