"""
Core radix arithmetic: value objects, conversion primitives, and contracts.

This module contains the building blocks that are independent of the
console front-end.
"""
