"""Core layer — pure value transformations and domain models.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from valuekit.core.dedup import get_unique_values
from valuekit.core.filters import filter_active_users, filter_by_rating
from valuekit.core.formatting import format_book_details, format_value, get_length
from valuekit.core.models import Book, Person, Product, RatedItem, User
from valuekit.core.pricing import calculate_total_price

__all__: list[str] = [
    "Book",
    "Person",
    "Product",
    "RatedItem",
    "User",
    "calculate_total_price",
    "filter_active_users",
    "filter_by_rating",
    "format_book_details",
    "format_value",
    "get_length",
    "get_unique_values",
]
