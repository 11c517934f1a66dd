"""Typer CLI wiring the radix calculator session."""

from __future__ import annotations

import json
import logging
from typing import Optional

import typer

from src.core.contracts import validate_session_report
from src.core.domain import RadixInteger
from src.core.errors import RadixError

from .session import (
    build_report,
    conversion_line,
    iter_results,
    operands_line,
    prepare_operands,
    read_base,
)
from .settings import ConsoleSettings, configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(help="Radix integer calculator for bases 2-36")

FIRST_PROMPT = "Enter the first number"
SECOND_PROMPT = "Enter the second number"
BASE_PROMPT = "Enter its base (2-36)"


def _settings(ctx: typer.Context) -> ConsoleSettings:
    if isinstance(ctx.obj, ConsoleSettings):
        return ctx.obj
    return ConsoleSettings.from_env()


def _ask(value: Optional[str], label: str, *, err: bool) -> str:
    if value is not None:
        return value
    # Empty input is accepted and fails validation instead of re-prompting
    return typer.prompt(label, default="", show_default=False, err=err)


def _report_error(exc: RadixError) -> None:
    logger.info("Session ended with %s: %s", exc.kind, exc)
    typer.echo(f"Error: {exc}")


def _finish(ok: bool, strict: bool) -> None:
    if not ok and strict:
        raise typer.Exit(code=1)


def _run_text(first: str, first_base: str, second: str, second_base: str) -> bool:
    try:
        num1, num2, converted = prepare_operands(first, first_base, second, second_base)
        if converted:
            typer.echo(conversion_line(num2))
        typer.echo(operands_line(num1, num2))
        for entry in iter_results(num1, num2):
            typer.echo(entry.line)
    except RadixError as exc:
        _report_error(exc)
        return False
    return True


def _run_json(first: str, first_base: str, second: str, second_base: str) -> bool:
    report = build_report(first, first_base, second, second_base)
    payload = report.model_dump(mode="json")
    validate_session_report(payload)
    typer.echo(json.dumps(payload, indent=2))
    return report.error is None


def _run_session(
    settings: ConsoleSettings,
    *,
    first: Optional[str] = None,
    first_base: Optional[str] = None,
    second: Optional[str] = None,
    second_base: Optional[str] = None,
    json_output: Optional[bool] = None,
    strict: Optional[bool] = None,
) -> None:
    as_json = settings.json_output if json_output is None else json_output
    strict_exit = settings.strict_exit if strict is None else strict

    # Prompts go to stderr in JSON mode so stdout stays parseable
    first = _ask(first, FIRST_PROMPT, err=as_json)
    first_base = _ask(first_base, BASE_PROMPT, err=as_json)
    second = _ask(second, SECOND_PROMPT, err=as_json)
    second_base = _ask(second_base, BASE_PROMPT, err=as_json)

    runner = _run_json if as_json else _run_text
    _finish(runner(first, first_base, second, second_base), strict_exit)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (defaults to RADIX_LOG_LEVEL or WARNING)"
    ),
) -> None:
    """Run an interactive session when no command is given."""

    settings = ConsoleSettings.from_env()
    try:
        configure_logging(log_level or settings.log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        _run_session(settings)


@app.command("session")
def session(
    ctx: typer.Context,
    first: Optional[str] = typer.Option(None, "--first", help="First number"),
    first_base: Optional[str] = typer.Option(None, "--first-base", help="Base of the first number"),
    second: Optional[str] = typer.Option(None, "--second", help="Second number"),
    second_base: Optional[str] = typer.Option(
        None, "--second-base", help="Base of the second number"
    ),
    json_output: Optional[bool] = typer.Option(
        None, "--json/--text", help="Print a JSON report instead of text"
    ),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--no-strict", help="Exit with code 1 on validation errors"
    ),
) -> None:
    """Read two numbers and their bases, then print arithmetic and comparison results."""

    _run_session(
        _settings(ctx),
        first=first,
        first_base=first_base,
        second=second,
        second_base=second_base,
        json_output=json_output,
        strict=strict,
    )


@app.command("convert")
def convert(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Number to convert"),
    from_base: str = typer.Option(..., "--from", help="Base of VALUE"),
    to_base: str = typer.Option(..., "--to", help="Target base"),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--no-strict", help="Exit with code 1 on validation errors"
    ),
) -> None:
    """Print VALUE rewritten in another base."""

    settings = _settings(ctx)
    strict_exit = settings.strict_exit if strict is None else strict
    try:
        source = RadixInteger.parse(value.strip(), read_base(from_base))
        typer.echo(source.convert(read_base(to_base)).render())
    except RadixError as exc:
        _report_error(exc)
        _finish(False, strict_exit)
