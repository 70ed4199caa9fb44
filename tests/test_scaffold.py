"""Smoke tests — verify package wiring.

These tests prove that:
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
* The CLI entry point routes with no command.
"""

from __future__ import annotations

import pytest

from valuekit import __version__
from valuekit.cli import exit_codes
from valuekit.cli.app import main
from valuekit.exceptions import (
    EnvironmentError,
    InputError,
    InvalidRatingError,
    InvalidRecordError,
    UnsupportedValueError,
    ValueKitError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InvalidRatingError,
            UnsupportedValueError,
            InvalidRecordError,
            InputError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[ValueKitError]
    ) -> None:
        assert issubclass(exc_class, ValueKitError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(ValueKitError, Exception)

    def test_invalid_rating_is_value_error(self) -> None:
        assert issubclass(InvalidRatingError, ValueError)

    def test_unsupported_value_is_type_error(self) -> None:
        assert issubclass(UnsupportedValueError, TypeError)

    def test_hint_is_stored(self) -> None:
        err = ValueKitError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = ValueKitError("boom")
        assert err.hint is None

    def test_invalid_rating_carries_context(self) -> None:
        err = InvalidRatingError("bad", item={"rating": 9}, valid_range=(0, 5))
        assert err.item == {"rating": 9}
        assert err.valid_range == (0, 5)
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI bootstrap
# ---------------------------------------------------------------------------

class TestCLIBootstrap:
    def test_no_args_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "usage: valuekit" in capsys.readouterr().out

    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out
