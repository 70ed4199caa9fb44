"""Pure kind-dispatched formatting helpers.

Each function branches on the runtime kind of its argument with an
exhaustive ``match`` statement.  Inputs outside the documented domain
raise :class:`~valuekit.exceptions.UnsupportedValueError` rather than
falling through silently.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from valuekit.core.models import Book, Scalar
from valuekit.exceptions import UnsupportedValueError

T = TypeVar("T")


def format_value(value: Scalar) -> Scalar:
    """Transform a scalar according to its kind.

    * text    → upper-cased text
    * boolean → logical negation
    * number  → the number multiplied by 10

    ``bool`` is matched before ``int`` because it is an ``int`` subclass.
    """
    match value:
        case str():
            return value.upper()
        case bool():
            return not value
        case int() | float():
            return value * 10
        case _:
            raise UnsupportedValueError(
                f"Cannot format value of type {type(value).__name__}.",
                hint="Expected text, a number, or a boolean.",
            )


def get_length(value: str | Sequence[T]) -> int:
    """Return the character count of text or the element count of a list."""
    match value:
        case str():
            return len(value)
        case Sequence():
            return len(value)
        case _:
            raise UnsupportedValueError(
                f"Cannot measure length of type {type(value).__name__}.",
                hint="Expected text or a list.",
            )


def format_book_details(book: Book) -> str:
    """Render a one-line description of *book*."""
    available = "Yes" if book.is_available else "No"
    return (
        f"Title: {book.title}, Author: {book.author}, "
        f"Published: {book.published_year}, Available: {available}"
    )
