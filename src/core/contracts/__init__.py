"""
Contract Validation Module

Модуль для валидации JSON контрактов radix-calc.
"""

from .validators import (
    DEFAULT_SCHEMA_DIR,
    ContractValidator,
    SchemaLoader,
    SessionReportValidator,
    validate_session_report,
)

__all__ = [
    # Constants
    "DEFAULT_SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SessionReportValidator",
    # Functions
    "validate_session_report",
]
