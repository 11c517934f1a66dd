"""
Domain models and value objects.

Contains the RadixInteger value object.
"""

from src.core.domain.radix_integer import RadixInteger

__all__ = [
    "RadixInteger",
]
