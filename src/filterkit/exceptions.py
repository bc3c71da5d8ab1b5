"""
Filter translation exception hierarchy with fuzzy-match suggestions.

All exceptions inherit from ``FilterKitError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class FilterKitError(Exception):
    """Base exception for all filterkit errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidInputError(FilterKitError, TypeError):
    """A helper received an argument of the wrong shape."""

    def __init__(self, message: str, argument: str | None = None) -> None:
        self.message = message
        self.argument = argument
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_INPUT",
            "message": self.message,
            "argument": self.argument,
        }


class MalformedFilterError(FilterKitError):
    """A filter descriptor is missing a required part or has an unusable value."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MALFORMED_FILTER",
            "message": self.message,
            "path": self.path,
        }


class UnsupportedConditionError(FilterKitError):
    """
    Condition tag outside the active mode's vocabulary.

    Provides fuzzy-matched suggestions for likely intended conditions.
    """

    def __init__(
        self,
        condition: str,
        mode: str,
        supported_conditions: list[str],
        path: str | None = None,
    ) -> None:
        self.condition = condition
        self.mode = mode
        self.supported_conditions = supported_conditions
        self.path = path
        self.suggestions = get_close_matches(
            condition, supported_conditions, n=3, cutoff=0.6
        )

        message = f"Unsupported condition for {mode} filters: '{condition}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_CONDITION",
            "condition": self.condition,
            "mode": self.mode,
            "path": self.path,
            "suggestions": self.suggestions,
            "supported_conditions": sorted(self.supported_conditions),
        }
