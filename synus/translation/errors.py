"""
Error types raised by the translation pipeline.

Every failure the translate command can report to a user is a subclass of
TranslationError, so the command handler needs a single except clause per
kind and nothing provider-specific leaks out of the gateway.
"""

from __future__ import annotations

from typing import Literal


class TranslationError(Exception):
    """Base class for translation pipeline failures."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class InvalidLanguageCode(TranslationError):
    """
    A language code is not present in the language registry.

    Args:
        code: The code as the user typed it
        role: Which side of the request it was given for
    """

    def __init__(self, code: str, role: Literal["source", "target"]) -> None:
        self.code = code
        self.role = role
        super().__init__(f"Illegal {role} language code ({self.display_code})")

    @property
    def display_code(self) -> str:
        return self.code.upper()


class NoTranslatableTarget(TranslationError):
    """Neither query text nor a non-empty lookback message is available."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class TranslationFailed(TranslationError):
    """The translation provider call failed (transport or provider error)."""
