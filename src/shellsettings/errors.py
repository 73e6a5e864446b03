"""Exception classes for the settings store.

This module defines a hierarchy of exception classes for handling
the error conditions that can occur while loading, mutating and
persisting the settings tree.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class SettingsError(Exception):
    """Base error raised by the settings store.

    Carries a short error code alongside the human-readable message
    so callers can branch on the kind of failure without string
    matching.
    """

    code: str = "settings"

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            path: Settings file involved in the failure, when known
        """
        super().__init__(f"[{self.code}] {message}")
        self.message: str = message
        self.path: Optional[Path] = path


class SettingsNotFoundError(SettingsError):
    """Raised when the settings file does not exist yet."""

    code = "not-found"


class SettingsIOError(SettingsError):
    """Raised when the settings file cannot be read or written."""

    code = "io"

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize with I/O error details.

        Args:
            message: Description of the failure
            path: Settings file involved in the failure
            original_error: The original exception that was caught
        """
        super().__init__(message, path)
        self.original_error = original_error


class SettingsParseError(SettingsIOError):
    """Raised when the settings file content is not a valid settings document."""

    code = "parse"


class SettingsUsageError(SettingsError):
    """Raised when the programmatic API is called with missing arguments."""

    code = "usage"
