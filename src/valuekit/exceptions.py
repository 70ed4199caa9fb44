"""Custom exception hierarchy for valuekit.

All exceptions raised by valuekit inherit from :class:`ValueKitError`
so that the CLI error boundary can render them uniformly.  Core
functions raise synchronously and never catch; the caller decides
whether to handle or propagate.

Hierarchy
---------
ValueKitError
├── InvalidRatingError      (also ``ValueError``)
├── UnsupportedValueError   (also ``TypeError``)
├── InvalidRecordError
├── InputError
└── EnvironmentError
"""

from __future__ import annotations

from typing import Any


class ValueKitError(Exception):
    """Base exception for all valuekit errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Validation ------------------------------------------------------------

class InvalidRatingError(ValueKitError, ValueError):
    """Raised when a rated item carries a rating outside the valid range."""

    def __init__(
        self,
        message: str,
        *,
        item: Any,
        valid_range: tuple[int, int],
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.item: Any = item
        """The first offending item, in input order."""

        self.valid_range: tuple[int, int] = valid_range
        """Inclusive ``(low, high)`` bounds the rating must lie within."""


class UnsupportedValueError(ValueKitError, TypeError):
    """Raised when a value's runtime kind is outside a function's domain."""


# --- Input handling --------------------------------------------------------

class InvalidRecordError(ValueKitError):
    """Raised when a raw record cannot be converted to a domain model."""


class InputError(ValueKitError):
    """Raised when CLI input cannot be read or decoded."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ValueKitError):
    """Raised when a required runtime dependency is not available."""
