"""Process exit codes returned by the ``valuekit`` command.

Every exit path in :mod:`valuekit.cli.app` uses one of these names.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command ran and printed its result."""

GENERAL_ERROR: int = 1
"""A :class:`~valuekit.exceptions.ValueKitError` was reported (bad input,
invalid rating, missing dependency)."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the error boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
