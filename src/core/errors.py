"""
Errors — Иерархия ошибок валидации radix-чисел

Все ошибки являются ошибками пользовательского ввода:
- не повторяются (retry бессмысленен)
- не фатальны для процесса (CLI перехватывает и печатает сообщение)
- поднимаются синхронно в точке обнаружения

Атрибут `kind` содержит имя вида ошибки для машинно-читаемых отчётов.
"""


class RadixError(ValueError):
    """Базовая ошибка radix-арифметики."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class InvalidBase(RadixError):
    """Основание вне диапазона [2, 36] или не целое число."""


class InvalidDigitChar(RadixError):
    """Символ не входит в алфавит 0-9, A-Z (без учёта регистра)."""


class DigitOutOfRange(RadixError):
    """Значение разряда >= основания."""


class MismatchedBase(RadixError):
    """Бинарная операция над числами в разных системах счисления."""


class DivisionByZero(RadixError, ZeroDivisionError):
    """Деление или остаток от деления на ноль."""


class NegativeValue(RadixError):
    """
    Отрицательное native-значение там, где допустимы только неотрицательные.

    Возникает при from_native(v < 0) и при вычитании с отрицательным результатом.
    """
