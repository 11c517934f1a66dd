"""
RadixInteger — Неотрицательное целое в системе счисления 2..36

Immutable Pydantic модель: основание + разряды (младший разряд первым).

Два пути создания:
- RadixInteger.parse("1F", 16) — разбор строки разрядов
- RadixInteger.from_native(31, 16) — перевод native-целого

Арифметика (+ - * / %) требует одинаковых оснований и выполняется через
native-целое: op(a.to_native(), b.to_native()) → from_native(result, a.base).
Сравнения и равенство работают по native-значению, основание не учитывается.
"""

import operator
from typing import Callable

from pydantic import BaseModel, Field, field_validator

from src.core.errors import MismatchedBase
from src.core.math.radix_conversion import (
    MAX_BASE,
    MIN_BASE,
    digits_to_native,
    native_to_digits,
    parse_digits,
    render_digits,
    truncating_div,
    truncating_mod,
    wrap_native,
)


class RadixInteger(BaseModel):
    """
    Целое число в фиксированной системе счисления.

    Immutable модель (frozen=True): все операции возвращают новый экземпляр.
    Идентичность определяется только native-значением, поэтому
    parse("FF", 16) == parse("255", 10) и их hash совпадает.
    """

    base: int = Field(..., ge=MIN_BASE, le=MAX_BASE, description="Основание системы счисления")
    digits: tuple[int, ...] = Field(
        ..., min_length=1, description="Разряды, младший разряд первым"
    )

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digit_range(cls, v: tuple[int, ...], info) -> tuple[int, ...]:
        """Каждый разряд в диапазоне [0, base)."""
        if "base" in info.data:
            base = info.data["base"]
            for digit in v:
                if digit < 0 or digit >= base:
                    raise ValueError(f"digit {digit} is not valid for base {base}")
        return v

    # -------------------------------------------------------------------------
    # Создание
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str, base: int) -> "RadixInteger":
        """
        Разбор строки в обычной записи (старший разряд первым).

        Raises:
            InvalidBase, InvalidDigitChar, DigitOutOfRange
        """
        return cls(base=base, digits=parse_digits(text, base))

    @classmethod
    def from_native(cls, value: int, base: int) -> "RadixInteger":
        """
        Перевод native-целого в заданное основание.

        Raises:
            InvalidBase: основание вне [2, 36]
            NegativeValue: value < 0
        """
        return cls(base=base, digits=native_to_digits(value, base))

    def convert(self, target_base: int) -> "RadixInteger":
        """То же значение в другой системе счисления."""
        return RadixInteger.from_native(self.to_native(), target_base)

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    def render(self) -> str:
        """Строка, старший разряд первым, буквы в верхнем регистре."""
        return render_digits(self.digits)

    def to_native(self) -> int:
        """Σ digit[i] * base^i; переполнение 32 бит не проверяется."""
        return digits_to_native(self.digits, self.base)

    def __str__(self) -> str:
        return self.render()

    def __int__(self) -> int:
        return self.to_native()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _combine(
        self, other: "RadixInteger", op: Callable[[int, int], int], symbol: str
    ) -> "RadixInteger":
        if self.base != other.base:
            raise MismatchedBase(
                f"Operands of '{symbol}' must share a base, got {self.base} and {other.base}"
            )
        result = wrap_native(op(self.to_native(), other.to_native()))
        return RadixInteger.from_native(result, self.base)

    def add(self, other: "RadixInteger") -> "RadixInteger":
        return self._combine(other, operator.add, "+")

    def subtract(self, other: "RadixInteger") -> "RadixInteger":
        """Вычитание; отрицательный результат → NegativeValue."""
        return self._combine(other, operator.sub, "-")

    def multiply(self, other: "RadixInteger") -> "RadixInteger":
        return self._combine(other, operator.mul, "*")

    def divide(self, other: "RadixInteger") -> "RadixInteger":
        """Целочисленное деление с усечением к нулю; делитель 0 → DivisionByZero."""
        return self._combine(other, truncating_div, "/")

    def modulo(self, other: "RadixInteger") -> "RadixInteger":
        """Остаток от деления; делитель 0 → DivisionByZero."""
        return self._combine(other, truncating_mod, "%")

    def __add__(self, other: object) -> "RadixInteger":
        if not isinstance(other, RadixInteger):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "RadixInteger":
        if not isinstance(other, RadixInteger):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "RadixInteger":
        if not isinstance(other, RadixInteger):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> "RadixInteger":
        if not isinstance(other, RadixInteger):
            return NotImplemented
        return self.divide(other)

    __floordiv__ = __truediv__

    def __mod__(self, other: object) -> "RadixInteger":
        if not isinstance(other, RadixInteger):
            return NotImplemented
        return self.modulo(other)

    # -------------------------------------------------------------------------
    # Сравнения (по native-значению, основание не важно)
    # -------------------------------------------------------------------------

    def compare(self, other: "RadixInteger") -> int:
        """
        Трёхзначное сравнение native-значений.

        Returns:
            -1 если self < other, 0 если равны, 1 если self > other
        """
        a, b = self.to_native(), other.to_native()
        return (a > b) - (a < b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RadixInteger):
            return NotImplemented
        return self.to_native() == other.to_native()

    def __hash__(self) -> int:
        return hash(self.to_native())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RadixInteger):
            return NotImplemented
        return self.to_native() < other.to_native()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, RadixInteger):
            return NotImplemented
        return self.to_native() <= other.to_native()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RadixInteger):
            return NotImplemented
        return self.to_native() > other.to_native()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, RadixInteger):
            return NotImplemented
        return self.to_native() >= other.to_native()
