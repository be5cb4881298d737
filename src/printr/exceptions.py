"""Unified exception hierarchy for printr.

All printr exceptions inherit from PrintrError, enabling:
- Catching all printr errors with `except PrintrError`
- Error context preservation via the `context` attribute
- Causality chains via `raise ... from e` patterns
"""

from typing import Any


class PrintrError(Exception):
    """Base exception for all printr errors.

    Args:
        message: Human-readable error description
        context: Optional dict of contextual information (printer, operation, etc.)
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}

    def __str__(self) -> str:
        base = super().__str__()
        if self.context:
            details = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{base} [{details}]"
        return base


class SpoolerError(PrintrError):
    """Raised when a call into the print spooler fails."""


class ConfigError(PrintrError):
    """Raised when configuration is invalid or cannot be loaded."""


class InputError(PrintrError):
    """Raised when an input file cannot be opened."""
