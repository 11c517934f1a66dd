"""
Тесты для Radix Conversion — примитивы систем счисления

Проверяемые инварианты:
1. Кодек алфавита 0-9, A-Z (без учёта регистра)
2. Парсер: MSB-first на входе → LSB-first на выходе
3. Σ digit[i] * base^i с 32-битным wraparound
4. Повторное деление: (0,) для нуля, NegativeValue для отрицательных
5. Деление с усечением к нулю
"""

import pytest

from src.core.errors import (
    DigitOutOfRange,
    DivisionByZero,
    InvalidBase,
    InvalidDigitChar,
    NegativeValue,
    RadixError,
)
from src.core.math.radix_conversion import (
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    NATIVE_INT_MAX,
    NATIVE_INT_MIN,
    char_to_digit,
    digit_to_char,
    digits_to_native,
    native_to_digits,
    parse_digits,
    render_digits,
    truncating_div,
    truncating_mod,
    validate_base,
    wrap_native,
)


# =============================================================================
# ТЕСТЫ: Основание
# =============================================================================


class TestValidateBase:
    """Тесты validate_base: диапазон [2, 36]."""

    def test_bounds_accepted(self):
        assert validate_base(MIN_BASE) == 2
        assert validate_base(MAX_BASE) == 36
        assert validate_base(10) == 10

    def test_out_of_range_rejected(self):
        for base in (-1, 0, 1, 37, 100):
            with pytest.raises(InvalidBase, match="between 2 and 36"):
                validate_base(base)

    def test_non_integer_rejected(self):
        """bool и float не считаются основанием."""
        for base in (True, 10.0, "10"):
            with pytest.raises(InvalidBase, match="integer"):
                validate_base(base)


# =============================================================================
# ТЕСТЫ: Кодек алфавита
# =============================================================================


class TestAlphabetCodec:
    """Тесты char_to_digit / digit_to_char."""

    def test_decimal_digits(self):
        assert [char_to_digit(c) for c in "0123456789"] == list(range(10))

    def test_letters_case_insensitive(self):
        assert char_to_digit("A") == 10
        assert char_to_digit("a") == 10
        assert char_to_digit("Z") == 35
        assert char_to_digit("z") == 35

    def test_invalid_characters(self):
        for char in ("!", " ", "-", ".", "٣", "ß"):
            with pytest.raises(InvalidDigitChar):
                char_to_digit(char)

    def test_non_ascii_letters_with_ascii_uppercase(self):
        """'ı' и 'ſ' в верхнем регистре дают 'I' и 'S', но разрядами не являются."""
        for char in ("\u0131", "\u017f", "\u212a"):
            with pytest.raises(InvalidDigitChar):
                char_to_digit(char)
        with pytest.raises(InvalidDigitChar):
            parse_digits("1\u0131", 36)

    def test_digit_to_char_uppercase(self):
        assert digit_to_char(0) == "0"
        assert digit_to_char(9) == "9"
        assert digit_to_char(10) == "A"
        assert digit_to_char(35) == "Z"
        assert "".join(digit_to_char(d) for d in range(36)) == DIGIT_ALPHABET

    def test_digit_to_char_out_of_alphabet(self):
        with pytest.raises(DigitOutOfRange):
            digit_to_char(36)
        with pytest.raises(DigitOutOfRange):
            digit_to_char(-1)


# =============================================================================
# ТЕСТЫ: Строка ↔ разряды
# =============================================================================


class TestParseDigits:
    """Тесты parse_digits: разбор и порядок хранения."""

    def test_stored_least_significant_first(self):
        assert parse_digits("1A", 16) == (10, 1)
        assert parse_digits("123", 10) == (3, 2, 1)

    def test_zero_is_single_digit(self):
        assert parse_digits("0", 2) == (0,)

    def test_leading_zeros_kept(self):
        assert parse_digits("007", 8) == (7, 0, 0)

    def test_lowercase_input(self):
        assert parse_digits("ff", 16) == parse_digits("FF", 16)

    def test_digit_out_of_range(self):
        """'G' = 16 недопустим в base 16, '2' недопустим в base 2."""
        with pytest.raises(DigitOutOfRange, match="base 16"):
            parse_digits("G", 16)
        with pytest.raises(DigitOutOfRange, match="base 2"):
            parse_digits("2", 2)

    def test_invalid_character(self):
        with pytest.raises(InvalidDigitChar, match="'-'"):
            parse_digits("-5", 10)

    def test_empty_string(self):
        with pytest.raises(InvalidDigitChar, match="empty"):
            parse_digits("", 10)

    def test_invalid_base_checked_first(self):
        with pytest.raises(InvalidBase):
            parse_digits("1", 1)


class TestRenderDigits:
    """Тесты render_digits."""

    def test_most_significant_first(self):
        assert render_digits((10, 1)) == "1A"
        assert render_digits((0,)) == "0"

    def test_no_leading_zero_suppression(self):
        assert render_digits((7, 0, 0)) == "007"

    def test_round_trip_normalizes_case(self):
        for text, base in (("1a2b", 16), ("zz", 36), ("101", 2), ("777", 8)):
            assert render_digits(parse_digits(text, base)) == text.upper()


# =============================================================================
# ТЕСТЫ: Native-целое
# =============================================================================


class TestWrapNative:
    """Тесты wrap_native: signed 32-bit wraparound."""

    def test_in_range_unchanged(self):
        assert wrap_native(0) == 0
        assert wrap_native(NATIVE_INT_MAX) == NATIVE_INT_MAX
        assert wrap_native(NATIVE_INT_MIN) == NATIVE_INT_MIN
        assert wrap_native(-1) == -1

    def test_overflow_wraps(self):
        assert wrap_native(NATIVE_INT_MAX + 1) == NATIVE_INT_MIN
        assert wrap_native(2**32) == 0
        assert wrap_native(2**32 + 5) == 5
        assert wrap_native(NATIVE_INT_MIN - 1) == NATIVE_INT_MAX


class TestDigitsToNative:
    """Тесты digits_to_native: позиционные веса."""

    def test_positional_weights(self):
        assert digits_to_native((15, 15), 16) == 255
        assert digits_to_native((1, 0, 1), 2) == 5
        assert digits_to_native((0,), 36) == 0
        assert digits_to_native((35, 35), 36) == 35 * 36 + 35

    def test_largest_positive(self):
        assert digits_to_native(parse_digits("7FFFFFFF", 16), 16) == NATIVE_INT_MAX

    def test_overflow_is_unchecked(self):
        """Переполнение не обнаруживается: значение заворачивается."""
        assert digits_to_native(parse_digits("80000000", 16), 16) == NATIVE_INT_MIN
        assert digits_to_native(parse_digits("FFFFFFFF", 16), 16) == -1
        assert digits_to_native(parse_digits("100000000", 16), 16) == 0


class TestNativeToDigits:
    """Тесты native_to_digits: повторное деление."""

    def test_zero(self):
        assert native_to_digits(0, 2) == (0,)
        assert native_to_digits(0, 36) == (0,)

    def test_conversion(self):
        assert native_to_digits(255, 16) == (15, 15)
        assert native_to_digits(5, 2) == (1, 0, 1)
        assert native_to_digits(36, 36) == (0, 1)

    def test_round_trip(self):
        for value in (1, 7, 255, 1000, 65535, NATIVE_INT_MAX):
            for base in (2, 10, 16, 36):
                assert digits_to_native(native_to_digits(value, base), base) == value

    def test_negative_rejected(self):
        with pytest.raises(NegativeValue, match="-1"):
            native_to_digits(-1, 10)

    def test_invalid_base(self):
        with pytest.raises(InvalidBase):
            native_to_digits(10, 37)


# =============================================================================
# ТЕСТЫ: Деление с усечением к нулю
# =============================================================================


class TestTruncatingDivision:
    """Тесты truncating_div / truncating_mod."""

    def test_non_negative_operands(self):
        assert truncating_div(17, 5) == 3
        assert truncating_mod(17, 5) == 2
        assert truncating_div(4, 5) == 0
        assert truncating_mod(4, 5) == 4

    def test_truncates_toward_zero(self):
        """В отличие от Python `//`, округление к нулю."""
        assert truncating_div(-7, 2) == -3
        assert truncating_mod(-7, 2) == -1
        assert truncating_div(7, -2) == -3
        assert truncating_mod(7, -2) == 1

    def test_min_by_minus_one_wraps(self):
        assert truncating_div(NATIVE_INT_MIN, -1) == NATIVE_INT_MIN
        assert truncating_mod(NATIVE_INT_MIN, -1) == 0

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZero):
            truncating_div(1, 0)
        with pytest.raises(DivisionByZero):
            truncating_mod(1, 0)

    def test_division_by_zero_is_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            truncating_div(1, 0)


class TestErrorHierarchy:
    """Все виды ошибок — RadixError (ValueError) с атрибутом kind."""

    def test_kind_names(self):
        for error_cls in (
            InvalidBase,
            InvalidDigitChar,
            DigitOutOfRange,
            DivisionByZero,
            NegativeValue,
        ):
            exc = error_cls("boom")
            assert isinstance(exc, RadixError)
            assert isinstance(exc, ValueError)
            assert exc.kind == error_cls.__name__
