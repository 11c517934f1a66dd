"""
Core math modules для radix-calc

Примитивы позиционных систем счисления и native-арифметики.
"""

from src.core.math.radix_conversion import (
    # Constants
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    NATIVE_INT_BITS,
    NATIVE_INT_MAX,
    NATIVE_INT_MIN,
    # Alphabet codec
    char_to_digit,
    digit_to_char,
    # String <-> digits
    parse_digits,
    render_digits,
    # Native integer
    digits_to_native,
    native_to_digits,
    truncating_div,
    truncating_mod,
    validate_base,
    wrap_native,
)

__all__ = [
    # Constants
    "DIGIT_ALPHABET",
    "MAX_BASE",
    "MIN_BASE",
    "NATIVE_INT_BITS",
    "NATIVE_INT_MAX",
    "NATIVE_INT_MIN",
    # Alphabet codec
    "char_to_digit",
    "digit_to_char",
    # String <-> digits
    "parse_digits",
    "render_digits",
    # Native integer
    "digits_to_native",
    "native_to_digits",
    "truncating_div",
    "truncating_mod",
    "validate_base",
    "wrap_native",
]
