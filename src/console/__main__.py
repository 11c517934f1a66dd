"""Executable entry point for `python -m src.console`."""

from __future__ import annotations

from .app import app


def main() -> None:  # pragma: no cover - thin wrapper
    app(prog_name="radix-calc")


if __name__ == "__main__":  # pragma: no cover - CLI entry
    main()
