"""
Test suite for the PlainTime core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
