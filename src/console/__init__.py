"""Console front-end: interactive two-number session and one-shot conversion."""

from .app import app
from .settings import ConsoleSettings

__all__ = ["ConsoleSettings", "app"]
