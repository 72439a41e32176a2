"""
Test suite for dimcalc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
