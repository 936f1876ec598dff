"""Categorized error handling with actionable messages.

Provides structured error types with exit codes and recovery suggestions
for better user experience and scripting integration.
"""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar


class ExitCode(IntEnum):
    """Exit codes for scripting integration.

    Standard categories:
    - 0: Success
    - 1-9: Usage/config errors (user can fix)
    - 40-49: System errors
    """

    SUCCESS = 0

    # Usage/config errors (1-9)
    USAGE_ERROR = 1
    CONFIG_ERROR = 2
    INVALID_ARGUMENT = 4

    # System errors (40-49)
    SYSTEM_ERROR = 49


class EighthBarError(Exception):
    """Base exception for eighth-bar with structured error info.

    Attributes:
        message: Human-readable error message.
        code: Exit code for scripting.
        suggestion: Actionable recovery suggestion.
        details: Optional additional context.
    """

    code: ClassVar[ExitCode] = ExitCode.USAGE_ERROR
    suggestion: ClassVar[str] = ""

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: str | None = None,
    ):
        self.message = message
        self._suggestion = suggestion
        self.details = details
        super().__init__(message)

    def get_suggestion(self) -> str:
        """Get the recovery suggestion."""
        return self._suggestion or self.suggestion

    def format_full(self) -> str:
        """Format the complete error message with suggestion."""
        parts = [f"Error: {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        suggestion = self.get_suggestion()
        if suggestion:
            parts.append(f"Suggestion: {suggestion}")
        return "\n".join(parts)


# Input Errors


class InvalidValueError(EighthBarError):
    """Value and maximum do not describe a valid bar."""

    code = ExitCode.INVALID_ARGUMENT
    suggestion = "VALUE and MAX must be non-negative integers with VALUE <= MAX."


class InvalidWidthError(EighthBarError):
    """Requested width is not a usable column count."""

    code = ExitCode.INVALID_ARGUMENT
    suggestion = "Pass a non-negative --width; widths of 2 or less render nothing."


class InvalidColorError(EighthBarError):
    """Color token or output format is unknown."""

    code = ExitCode.INVALID_ARGUMENT
    suggestion = "Use 'auto', a color name such as 'green' or 'bright_blue', or '#rrggbb'."


# Config Errors


class ConfigError(EighthBarError):
    """Configuration file error."""

    code = ExitCode.CONFIG_ERROR
    suggestion = "Run 'eighth-bar --config reset' to reset configuration to defaults."


def format_error_for_user(error: Exception, verbose: bool = False) -> str:
    """Format any exception for user display.

    Args:
        error: Exception to format.
        verbose: If True, include details and suggestions.

    Returns:
        Formatted error message string.
    """
    if isinstance(error, EighthBarError):
        if verbose:
            return error.format_full()
        return f"Error: {error.message}"
    else:
        return f"Error: {error}"


def get_exit_code(error: Exception) -> int:
    """Get the exit code for an exception.

    Args:
        error: Exception to get code for.

    Returns:
        Integer exit code.
    """
    if isinstance(error, EighthBarError):
        return error.code
    elif isinstance(error, ValueError):
        return ExitCode.INVALID_ARGUMENT
    else:
        return ExitCode.SYSTEM_ERROR


__all__ = [
    # Exit codes
    "ExitCode",
    # Base error
    "EighthBarError",
    # Input errors
    "InvalidValueError",
    "InvalidWidthError",
    "InvalidColorError",
    # Config errors
    "ConfigError",
    # Utilities
    "format_error_for_user",
    "get_exit_code",
]
