"""CLI application entry point and command routing for valuekit.

This module is the **sole error boundary** for the entire application.
It catches :class:`~valuekit.exceptions.ValueKitError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — every command decodes its input,
  delegates to one core function, and prints the result.
* Record inputs are JSON files (``-`` reads stdin); record outputs are
  JSON with camelCase keys.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable
from dataclasses import asdict
from pathlib import Path
from typing import Any

from valuekit.cli import exit_codes
from valuekit.cli.console import console, output, print_book_details
from valuekit.core.dedup import get_unique_values
from valuekit.core.filters import filter_active_users, filter_by_rating
from valuekit.core.formatting import format_value, get_length
from valuekit.core.models import Person
from valuekit.core.parsing import (
    parse_book,
    parse_product,
    parse_rated_item,
    parse_records,
    parse_user,
)
from valuekit.core.pricing import calculate_total_price
from valuekit.exceptions import InputError, ValueKitError
from valuekit.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser with one sub-command per
    utility."""
    parser = argparse.ArgumentParser(
        prog="valuekit",
        description="Stateless value formatting, filtering, and pricing utilities.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = parser.add_subparsers(dest="command", metavar="<command>")

    fmt = sub.add_parser("format", help="Upper-case text, x10 a number, or negate a boolean.")
    fmt.add_argument("value", help="A JSON scalar; anything else is taken as text.")

    length = sub.add_parser("length", help="Count characters of text or elements of a JSON array.")
    length.add_argument("value")

    person = sub.add_parser("person", help="Describe a person.")
    person.add_argument("name")
    person.add_argument("age", type=int)

    rated = sub.add_parser("top-rated", help="Validate ratings and keep items rated 4 or higher.")
    rated.add_argument("file", help="JSON array of {title, rating}; '-' for stdin.")

    users = sub.add_parser("active-users", help="Keep users whose isActive flag is set.")
    users.add_argument("file", help="JSON array of users; '-' for stdin.")

    unique = sub.add_parser("unique", help="Merge two JSON arrays, first occurrence wins.")
    unique.add_argument("first")
    unique.add_argument("second")

    total = sub.add_parser("total", help="Sum price x quantity net of discounts.")
    total.add_argument("file", help="JSON array of products; '-' for stdin.")

    book = sub.add_parser("book", help="Print a one-line book description.")
    book.add_argument("file", help="JSON object describing a book; '-' for stdin.")

    return parser


# ---------------------------------------------------------------------------
# Input / output helpers
# ---------------------------------------------------------------------------

def _read_json(source: str) -> Any:
    """Load JSON from a file path, or from stdin when *source* is ``-``."""
    try:
        if source == "-":
            text = sys.stdin.read()
        else:
            text = Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise InputError(
            f"Cannot read {source}: {exc.strerror or exc}",
        ) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise InputError(
            f"Malformed JSON in {source}: {exc.msg} (line {exc.lineno}).",
        ) from exc


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-standard JSON constant {token}")


def _decode_argument(text: str) -> Any:
    """JSON-decode a command-line argument, falling back to raw text.

    ``NaN`` and ``Infinity`` are not JSON and stay text.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return text


def _camel(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part.title() for part in rest)


def _to_json(record: Any) -> dict[str, Any]:
    return {_camel(key): value for key, value in asdict(record).items()}


def _emit(value: Any) -> None:
    output.print(json.dumps(value, ensure_ascii=False))


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_format(args: argparse.Namespace) -> int:
    _emit(format_value(_decode_argument(args.value)))
    return exit_codes.SUCCESS


def _handle_length(args: argparse.Namespace) -> int:
    decoded = _decode_argument(args.value)
    _emit(get_length(decoded if isinstance(decoded, list) else args.value))
    return exit_codes.SUCCESS


def _handle_person(args: argparse.Namespace) -> int:
    output.print(Person(name=args.name, age=args.age).get_details())
    return exit_codes.SUCCESS


def _handle_top_rated(args: argparse.Namespace) -> int:
    items = parse_records(_read_json(args.file), parse_rated_item)
    _emit([_to_json(item) for item in filter_by_rating(items)])
    return exit_codes.SUCCESS


def _handle_active_users(args: argparse.Namespace) -> int:
    users = parse_records(_read_json(args.file), parse_user)
    _emit([_to_json(user) for user in filter_active_users(users)])
    return exit_codes.SUCCESS


def _handle_unique(args: argparse.Namespace) -> int:
    first = parse_records(_read_json(args.first), _scalar_entry)
    second = parse_records(_read_json(args.second), _scalar_entry)
    _emit(get_unique_values(first, second))
    return exit_codes.SUCCESS


def _scalar_entry(raw: object) -> str | int | float:
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
        raise InputError(
            f"Unique values must be strings or numbers, got {json.dumps(raw)}.",
        )
    return raw


def _handle_total(args: argparse.Namespace) -> int:
    products = parse_records(_read_json(args.file), parse_product)
    _emit(calculate_total_price(products))
    return exit_codes.SUCCESS


def _handle_book(args: argparse.Namespace) -> int:
    print_book_details(parse_book(_read_json(args.file)))
    return exit_codes.SUCCESS


_HANDLERS: dict[str, Callable[[argparse.Namespace], int]] = {
    "format": _handle_format,
    "length": _handle_length,
    "person": _handle_person,
    "top-rated": _handle_top_rated,
    "active-users": _handle_active_users,
    "unique": _handle_unique,
    "total": _handle_total,
    "book": _handle_book,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the valuekit CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    return _HANDLERS[args.command](args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ValueKitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
