"""Raw-dict → domain-model parsers.

These converters turn decoded JSON objects into the frozen models of
:mod:`valuekit.core.models`.  Both the camelCase keys used by JSON
producers (``isActive``, ``publishedYear``) and snake_case keys are
accepted.

Guarantees
----------
* Pure — no I/O, deterministic, stateless.
* Only :class:`~valuekit.exceptions.InvalidRecordError` escapes.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TypeVar

from valuekit.core.models import Book, Person, Product, RatedItem, User
from valuekit.exceptions import InvalidRecordError

M = TypeVar("M")

_MISSING = object()


# ---------------------------------------------------------------------------
# Field access
# ---------------------------------------------------------------------------

def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


_CHECKS: dict[str, Callable[[object], bool]] = {
    "text": lambda value: isinstance(value, str),
    "number": _is_number,
    "integer": _is_integer,
    "boolean": lambda value: isinstance(value, bool),
}


def _check_kind(value: object, key: str, *, record: str, expect: str) -> Any:
    """Return *value* unchanged if it is of kind *expect*, else raise."""
    if not _CHECKS[expect](value):
        raise InvalidRecordError(
            f"{record} field '{key}' has wrong type: got {json.dumps(value)}.",
            hint=f"'{key}' must be {'an' if expect == 'integer' else 'a'} {expect}.",
        )
    return value


def _field(raw: dict[str, Any], *keys: str, record: str, expect: str) -> Any:
    """Return the first present key among *keys*, checked against *expect*."""
    for key in keys:
        value = raw.get(key, _MISSING)
        if value is not _MISSING:
            return _check_kind(value, key, record=record, expect=expect)
    raise InvalidRecordError(
        f"{record} record is missing field '{keys[0]}'.",
        hint=f"Got keys: {', '.join(sorted(raw)) or '(none)'}",
    )


def _require_mapping(raw: object, record: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise InvalidRecordError(
            f"{record} record must be a JSON object, got {type(raw).__name__}.",
        )
    return raw


# ---------------------------------------------------------------------------
# Per-model parsers
# ---------------------------------------------------------------------------

def parse_person(raw: object) -> Person:
    data = _require_mapping(raw, "Person")
    return Person(
        name=_field(data, "name", record="Person", expect="text"),
        age=_field(data, "age", record="Person", expect="integer"),
    )


def parse_rated_item(raw: object) -> RatedItem:
    data = _require_mapping(raw, "Rated item")
    return RatedItem(
        title=_field(data, "title", record="Rated item", expect="text"),
        rating=_field(data, "rating", record="Rated item", expect="number"),
    )


def parse_user(raw: object) -> User:
    data = _require_mapping(raw, "User")
    return User(
        id=_field(data, "id", record="User", expect="integer"),
        name=_field(data, "name", record="User", expect="text"),
        email=_field(data, "email", record="User", expect="text"),
        is_active=_field(
            data, "isActive", "is_active", record="User", expect="boolean",
        ),
    )


def parse_book(raw: object) -> Book:
    """Parse a book; ``isActive`` is accepted as an alias of ``isAvailable``."""
    data = _require_mapping(raw, "Book")
    return Book(
        title=_field(data, "title", record="Book", expect="text"),
        author=_field(data, "author", record="Book", expect="text"),
        published_year=_field(
            data, "publishedYear", "published_year", record="Book", expect="integer",
        ),
        is_available=_field(
            data, "isAvailable", "is_available", "isActive",
            record="Book", expect="boolean",
        ),
    )


def parse_product(raw: object) -> Product:
    """Parse a product; a missing or ``null`` discount becomes ``None``."""
    data = _require_mapping(raw, "Product")
    discount = data.get("discount")
    if discount is not None:
        _check_kind(discount, "discount", record="Product", expect="number")
    return Product(
        name=_field(data, "name", record="Product", expect="text"),
        price=_field(data, "price", record="Product", expect="number"),
        quantity=_field(data, "quantity", record="Product", expect="number"),
        discount=discount,
    )


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------

def parse_records(raw: object, parser: Callable[[object], M]) -> list[M]:
    """Apply *parser* to every entry of a decoded JSON array."""
    if not isinstance(raw, list):
        raise InvalidRecordError(
            f"Expected a JSON array, got {type(raw).__name__}.",
        )
    return [parser(entry) for entry in raw]
