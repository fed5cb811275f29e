"""
Custom exceptions for the logging system.

Log calls never raise; these are only raised while building a configuration.
"""

from typing import Any


class SloganError(Exception):
    """Base exception for logging-related errors."""

    pass


class InvalidLevelError(SloganError):
    """Raised when a severity name or number cannot be resolved."""

    def __init__(self, level: Any) -> None:
        self.level = level
        super().__init__(f"Invalid log level: {level!r}")


class LogConfigurationError(SloganError):
    """Raised when a configuration source cannot be read or parsed."""

    pass
