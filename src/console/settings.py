"""Console configuration sourced from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"", "0", "false", "no"}


@dataclass(frozen=True)
class ConsoleSettings:
    """Immutable console settings.

    strict_exit: validation errors end the process with exit code 1
        instead of the reference behavior (always 0).
    json_output: print a machine-readable session report instead of text.
    """

    log_level: str = "WARNING"
    strict_exit: bool = False
    json_output: bool = False

    @classmethod
    def from_env(cls) -> ConsoleSettings:
        return cls(
            log_level=os.getenv("RADIX_LOG_LEVEL", cls.log_level).upper(),
            strict_exit=_env_bool("RADIX_STRICT_EXIT", cls.strict_exit),
            json_output=_env_bool("RADIX_JSON_OUTPUT", cls.json_output),
        )


def configure_logging(level: str) -> None:
    """Route log records to stderr at the requested level."""

    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(numeric)


__all__ = ["ConsoleSettings", "configure_logging"]
