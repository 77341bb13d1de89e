"""
Exceptions raised by the datatools core.

Each class subclasses the builtin that best describes the failure so callers
can catch either the precise type or the broad builtin family.
"""
from __future__ import annotations

from typing import Any


class NotNumericalError(TypeError):
    """Raised when a value that is not an integer or a real is coerced to a number."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Value {value!r} of type {type(value).__name__} is not a number; "
            "not all elements are numerical."
        )


class InsufficientDataError(ValueError):
    """Raised when a statistic is undefined for the data it was given."""


class ModeNotFoundError(LookupError):
    """Raised when no value of a series maps to a frequency."""
