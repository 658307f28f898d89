"""
Test suite for int2048

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
