"""
Test suite for the unit converter

Contains:
- tests/unit/          : Unit tests for registry, converters, formatter, facade
"""
