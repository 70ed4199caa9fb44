"""Domain models for valuekit.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and simple rendering.  They carry zero I/O
and zero dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

Number = int | float
"""A numeric scalar.  ``bool`` is excluded by convention."""

Scalar = str | int | float | bool
"""A single primitive value: text, number, or boolean."""


# ---------------------------------------------------------------------------
# Person
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Person:
    """A named person with an age.

    Instances are immutable; use :meth:`with_name` / :meth:`with_age`
    to derive a modified copy.
    """

    name: str
    age: int

    def get_details(self) -> str:
        """Render ``'Name: <name>, Age: <age>'`` including the quotes."""
        return f"'Name: {self.name}, Age: {self.age}'"

    def with_name(self, name: str) -> Person:
        return replace(self, name=name)

    def with_age(self, age: int) -> Person:
        return replace(self, age=age)


# ---------------------------------------------------------------------------
# Records consumed by the filters
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RatedItem:
    """A titled item with a numeric rating."""

    title: str
    """Human-readable title."""

    rating: float
    """Score expected to lie in ``[0, 5]``; not checked at construction."""


@dataclass(frozen=True, slots=True)
class User:
    """A user account record."""

    id: int
    name: str
    email: str
    is_active: bool


@dataclass(frozen=True, slots=True)
class Book:
    """A library book record."""

    title: str
    author: str
    published_year: int
    is_available: bool


# ---------------------------------------------------------------------------
# Pricing
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Product:
    """A line item with unit price, quantity, and optional discount."""

    name: str
    """Display name; does not affect pricing."""

    price: float
    """Unit price."""

    quantity: float
    """Number of units."""

    discount: float | None = None
    """Percentage discount (``0``–``100`` expected, not validated).

    ``None`` means no discount was given.
    """
