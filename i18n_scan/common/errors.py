"""
i18n-scan exception hierarchy.

Provides a base exception class with user-facing messages and debug context,
plus specialized subclasses for configuration and locale-store failures.
"""

from __future__ import annotations

from typing import Any


class I18nScanError(Exception):
    """Base exception for i18n-scan errors.

    Attributes:
        user_message: Safe, user-facing error message.
        context: Dictionary of debug information.
    """

    def __init__(
        self,
        message: str,
        *,
        user_message: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.user_message = user_message or message
        self.context = context or {}


class ConfigError(I18nScanError):
    """Run configuration load/validation errors.

    Attributes:
        line: Line number (1-indexed) if available from the YAML parser.
        column: Column number (1-indexed) if available from the YAML parser.
    """

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        user_message: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        self.line = line
        self.column = column
        super().__init__(message, user_message=user_message, context=context)

    def __str__(self) -> str:
        if self.line is not None:
            loc = f"line {self.line}"
            if self.column is not None:
                loc += f", column {self.column}"
            return f"{super().__str__()} ({loc})"
        return super().__str__()


class LocaleParseError(I18nScanError):
    """Existing locale file is not a valid JSON object."""

    def __init__(self, message: str, *, path: str, context: dict[str, Any] | None = None):
        self.path = path
        super().__init__(message, context=context)


class LocaleWriteError(I18nScanError):
    """Locale file could not be written."""

    def __init__(self, message: str, *, path: str, context: dict[str, Any] | None = None):
        self.path = path
        super().__init__(message, context=context)
