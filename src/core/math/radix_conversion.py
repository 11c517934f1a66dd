"""
Radix Conversion — Позиционные системы счисления 2..36

Чистые функции без состояния:
- Кодек алфавита: '0'-'9' → 0-9, 'A'-'Z' (без учёта регистра) → 10-35
- Парсер строки разрядов (MSB-first на входе, LSB-first на выходе)
- Суммирование позиционных весов Σ d[i] * base^i
- Перевод native-целого в разряды (повторное деление с остатком)
- Эмуляция знакового 32-битного native-целого с wraparound

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Разряды хранятся младшим разрядом первым (индекс 0 = вес base^0)
2. Последовательность разрядов непуста; ноль представлен как (0,)
3. Каждый разряд в диапазоне [0, base)
4. Native-арифметика ограничена 32 битами; переполнение не проверяется,
   значение молча заворачивается (wraparound), как в исходной платформе
5. Отрицательные native-значения не переводятся в разряды (NegativeValue)
"""

from typing import Final, Sequence

from src.core.errors import (
    DigitOutOfRange,
    DivisionByZero,
    InvalidBase,
    InvalidDigitChar,
    NegativeValue,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = 36

# Алфавит разрядов; индекс символа = значение разряда
DIGIT_ALPHABET: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Ширина native-целого (signed)
NATIVE_INT_BITS: Final[int] = 32
NATIVE_INT_MIN: Final[int] = -(1 << (NATIVE_INT_BITS - 1))
NATIVE_INT_MAX: Final[int] = (1 << (NATIVE_INT_BITS - 1)) - 1

_NATIVE_MODULUS: Final[int] = 1 << NATIVE_INT_BITS


# =============================================================================
# ВАЛИДАЦИЯ ОСНОВАНИЯ
# =============================================================================


def validate_base(base: int) -> int:
    """
    Проверка основания системы счисления.

    Args:
        base: Основание (целое)

    Returns:
        base без изменений

    Raises:
        InvalidBase: если base не int или вне [MIN_BASE, MAX_BASE]
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(f"Base must be an integer, got {base!r}")
    if base < MIN_BASE or base > MAX_BASE:
        raise InvalidBase(f"Base must be between {MIN_BASE} and {MAX_BASE}, got {base}")
    return base


# =============================================================================
# КОДЕК АЛФАВИТА
# =============================================================================


def char_to_digit(char: str) -> int:
    """
    Символ → значение разряда.

    Args:
        char: Один символ '0'-'9', 'A'-'Z' или 'a'-'z'

    Returns:
        Значение разряда 0..35

    Raises:
        InvalidDigitChar: если символ вне алфавита

    Examples:
        >>> char_to_digit("7")
        7
        >>> char_to_digit("f")
        15
    """
    # Только ASCII: 'ı'.upper() == 'I', 'ſ'.upper() == 'S'
    if len(char) == 1 and char.isascii():
        if "0" <= char <= "9":
            return ord(char) - ord("0")
        upper = char.upper()
        if "A" <= upper <= "Z":
            return ord(upper) - ord("A") + 10
    raise InvalidDigitChar(f"Invalid digit character: {char!r}")


def digit_to_char(digit: int) -> str:
    """Значение разряда 0..35 → символ алфавита (верхний регистр)."""
    if digit < 0 or digit >= len(DIGIT_ALPHABET):
        raise DigitOutOfRange(f"Digit {digit} has no symbol in the 0-9A-Z alphabet")
    return DIGIT_ALPHABET[digit]


# =============================================================================
# СТРОКА ↔ РАЗРЯДЫ
# =============================================================================


def parse_digits(text: str, base: int) -> tuple[int, ...]:
    """
    Разбор строки разрядов в заданном основании.

    Строка читается в обычной позиционной записи (старший разряд первым).
    Значения собираются в порядке ввода, проверяются и разворачиваются
    один раз, чтобы получить хранимый порядок (младший разряд первым).

    Args:
        text: Непустая строка символов алфавита
        base: Основание 2..36

    Returns:
        Кортеж разрядов, младший разряд первым

    Raises:
        InvalidBase: основание вне диапазона
        InvalidDigitChar: пустая строка или символ вне алфавита
        DigitOutOfRange: значение разряда >= base

    Examples:
        >>> parse_digits("1A", 16)
        (10, 1)
    """
    validate_base(base)
    if not text:
        raise InvalidDigitChar("Digit string must not be empty")

    msb_first = []
    for char in text:
        digit = char_to_digit(char)
        if digit >= base:
            raise DigitOutOfRange(f"Digit {digit} ({char!r}) is not valid for base {base}")
        msb_first.append(digit)

    return tuple(reversed(msb_first))


def render_digits(digits: Sequence[int]) -> str:
    """
    Разряды (младший первым) → строка (старший первым).

    Ведущие нули не подавляются: (0,) → "0", (7, 0, 0) → "007".
    """
    return "".join(digit_to_char(d) for d in reversed(digits))


# =============================================================================
# NATIVE-ЦЕЛОЕ
# =============================================================================


def wrap_native(value: int) -> int:
    """
    Приведение к знаковому NATIVE_INT_BITS-битному целому (wraparound).

    Examples:
        >>> wrap_native(2**31)
        -2147483648
        >>> wrap_native(-1)
        -1
    """
    return ((value - NATIVE_INT_MIN) % _NATIVE_MODULUS) + NATIVE_INT_MIN


def digits_to_native(digits: Sequence[int], base: int) -> int:
    """
    Σ digit[i] * base^i по хранимому порядку (младший разряд первым).

    Аккумулятор и степень ведут себя как native-целое: при переполнении
    значение заворачивается без ошибки.

    Args:
        digits: Разряды, младший первым
        base: Основание

    Returns:
        Native-значение (signed, NATIVE_INT_BITS бит)
    """
    result = 0
    power = 1
    for digit in digits:
        result = wrap_native(result + digit * power)
        power = wrap_native(power * base)
    return result


def native_to_digits(value: int, base: int) -> tuple[int, ...]:
    """
    Перевод native-целого в разряды повторным делением с остатком.

    Алгоритм: value == 0 → (0,); иначе берём value mod base как очередной
    разряд и value ← value div base, пока value != 0. Порядок естественно
    получается младшим разрядом первым.

    Args:
        value: Неотрицательное целое
        base: Целевое основание 2..36

    Returns:
        Кортеж разрядов, младший разряд первым

    Raises:
        InvalidBase: основание вне диапазона
        NegativeValue: value < 0

    Examples:
        >>> native_to_digits(255, 16)
        (15, 15)
        >>> native_to_digits(0, 2)
        (0,)
    """
    validate_base(base)
    if value < 0:
        raise NegativeValue(f"Cannot represent negative value {value} in base {base}")
    if value == 0:
        return (0,)

    digits = []
    while value > 0:
        value, remainder = divmod(value, base)
        digits.append(remainder)
    return tuple(digits)


# =============================================================================
# ЦЕЛОЧИСЛЕННОЕ ДЕЛЕНИЕ (усечение к нулю)
# =============================================================================


def _truncated_quotient(dividend: int, divisor: int) -> int:
    if divisor == 0:
        raise DivisionByZero(f"Cannot divide {dividend} by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient


def truncating_div(dividend: int, divisor: int) -> int:
    """
    Целочисленное деление с усечением к нулю (семантика native-платформы).

    Python `//` округляет к минус бесконечности; для неотрицательных операндов
    результаты совпадают, но после wraparound операнд может стать отрицательным.

    Raises:
        DivisionByZero: divisor == 0
    """
    return wrap_native(_truncated_quotient(dividend, divisor))


def truncating_mod(dividend: int, divisor: int) -> int:
    """
    Остаток от деления с усечением к нулю: знак остатка совпадает со знаком делимого.

    Raises:
        DivisionByZero: divisor == 0
    """
    return wrap_native(dividend - divisor * _truncated_quotient(dividend, divisor))
