"""
Test suite for peano

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
