"""
Core math modules

Целочисленные примитивы для полей времени: floor-деление, clamp, приведение.
"""

from src.core.math.integer_arithmetic import (
    IntegerOrInfinity,
    clamp,
    floor_div,
    floor_divmod,
    floor_mod,
    is_integer_or_infinity,
    to_integer_or_infinity,
)

__all__ = [
    # Types
    "IntegerOrInfinity",
    # Floor division
    "floor_div",
    "floor_mod",
    "floor_divmod",
    # Utilities
    "clamp",
    # Integer or infinity
    "is_integer_or_infinity",
    "to_integer_or_infinity",
]
