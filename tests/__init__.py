"""
Test suite for radix-calc

Contains:
- tests/unit/          : Unit tests for the core and the console front-end
"""
