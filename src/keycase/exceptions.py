"""Exception hierarchy for keycase."""

from __future__ import annotations

from typing import Any


class KeyCaseError(Exception):
    """Base exception for all keycase errors."""


class InvalidInputError(KeyCaseError, TypeError):
    """A case converter was called with something other than a string.

    Attributes:
        value: The rejected argument.
    """

    def __init__(self, value: Any, message: str = "Input must be a string") -> None:
        super().__init__(f"{message}, got {type(value).__name__}")
        self.value = value


class NestingTooDeepError(KeyCaseError, RecursionError):
    """Input is nested deeper than the rekeyer is allowed to descend.

    Attributes:
        max_depth: The limit that was exceeded.
    """

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"Nesting exceeds maximum depth of {max_depth}")
        self.max_depth = max_depth
