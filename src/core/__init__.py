"""
Core domain models and integer primitives.

This module contains the foundational building blocks of the time-of-day
value type that are independent of the host object model.
"""
