"""Two-operand calculator session shared by the text and JSON front-ends."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator

from pydantic import BaseModel, Field

from src.core.domain import RadixInteger
from src.core.errors import InvalidBase, RadixError

logger = logging.getLogger(__name__)

REPORT_SCHEMA_VERSION = "1"

_BASE_INPUT = re.compile(r"[+-]?[0-9]+")

ResultValue = bool | int | str

# key, text template, computation over (num1, num2)
_STEPS: tuple[tuple[str, str, Callable[[RadixInteger, RadixInteger], object]], ...] = (
    ("add", "num1 + num2 = {}", lambda a, b: a + b),
    ("subtract", "num1 - num2 = {}", lambda a, b: a - b),
    ("multiply", "num1 * num2 = {}", lambda a, b: a * b),
    ("divide", "num1 / num2 = {}", lambda a, b: a / b),
    ("modulo", "num1 % num2 = {}", lambda a, b: a % b),
    ("greater", "num1 > num2? {}", lambda a, b: a > b),
    ("num1_decimal", "num1 in decimal: {}", lambda a, b: a.to_native()),
    ("num2_decimal", "num2 in decimal: {}", lambda a, b: b.to_native()),
)


class OperandView(BaseModel):
    text: str
    base: int
    decimal: int

    model_config = {"frozen": True}

    @classmethod
    def of(cls, value: RadixInteger) -> OperandView:
        return cls(text=value.render(), base=value.base, decimal=value.to_native())


class ResultEntry(BaseModel):
    key: str
    line: str
    value: ResultValue

    model_config = {"frozen": True}


class ErrorInfo(BaseModel):
    kind: str
    message: str

    model_config = {"frozen": True}

    @classmethod
    def of(cls, exc: RadixError) -> ErrorInfo:
        return cls(kind=exc.kind, message=str(exc))


class SessionReport(BaseModel):
    """Everything a session printed, in order, plus the error that ended it."""

    schema_version: str = REPORT_SCHEMA_VERSION
    first: OperandView | None = None
    second: OperandView | None = None
    converted_second: bool = False
    results: tuple[ResultEntry, ...] = Field(default_factory=tuple)
    error: ErrorInfo | None = None

    model_config = {"frozen": True}


def read_base(raw: str) -> int:
    """Parse a base typed by the user; anything but an integer is InvalidBase.

    Only an optional sign and ASCII digits are accepted: no underscores,
    no non-ASCII decimal digits.
    """

    text = raw.strip()
    if not _BASE_INPUT.fullmatch(text):
        raise InvalidBase(f"Base must be an integer, got {text!r}")
    return int(text)


def prepare_operands(
    first_text: str, first_base: str, second_text: str, second_base: str
) -> tuple[RadixInteger, RadixInteger, bool]:
    """Parse both operands and bring the second into the first one's base.

    Returns the two operands and whether the second one was converted.
    """

    num1 = RadixInteger.parse(first_text.strip(), read_base(first_base))
    num2 = RadixInteger.parse(second_text.strip(), read_base(second_base))
    if num1.base == num2.base:
        return num1, num2, False
    logger.debug("Converting %s from base %d to base %d", num2, num2.base, num1.base)
    return num1, num2.convert(num1.base), True


def format_value(value: object) -> ResultValue:
    if isinstance(value, RadixInteger):
        return value.render()
    if isinstance(value, (bool, int)):
        return value
    raise TypeError(f"Unsupported result type: {type(value).__name__}")


def iter_results(num1: RadixInteger, num2: RadixInteger) -> Iterator[ResultEntry]:
    """Compute results one by one; a RadixError stops the iteration where it occurs."""

    for key, template, compute in _STEPS:
        value = format_value(compute(num1, num2))
        yield ResultEntry(key=key, line=template.format(value), value=value)


def operands_line(num1: RadixInteger, num2: RadixInteger) -> str:
    return f"num1 = {num1}, num2 = {num2}"


def conversion_line(num2: RadixInteger) -> str:
    return f"Number 2 converted to base {num2.base}: {num2}"


def build_report(
    first_text: str, first_base: str, second_text: str, second_base: str
) -> SessionReport:
    """Run a whole session without I/O and collect it into a report."""

    first: OperandView | None = None
    second: OperandView | None = None
    converted = False
    results: list[ResultEntry] = []
    try:
        num1, num2, converted = prepare_operands(
            first_text, first_base, second_text, second_base
        )
        first, second = OperandView.of(num1), OperandView.of(num2)
        for entry in iter_results(num1, num2):
            results.append(entry)
    except RadixError as exc:
        logger.info("Session ended with %s: %s", exc.kind, exc)
        return SessionReport(
            first=first,
            second=second,
            converted_second=converted,
            results=tuple(results),
            error=ErrorInfo.of(exc),
        )
    return SessionReport(
        first=first, second=second, converted_second=converted, results=tuple(results)
    )


__all__ = [
    "ErrorInfo",
    "OperandView",
    "ResultEntry",
    "SessionReport",
    "build_report",
    "conversion_line",
    "iter_results",
    "operands_line",
    "prepare_operands",
    "read_base",
]
