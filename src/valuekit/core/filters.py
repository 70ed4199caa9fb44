"""Pure record filtering logic.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.  Relative input order is always
preserved in the result.

:func:`filter_by_rating` runs in two strict phases:

1. **Validate** — every item is checked in input order; the first
   out-of-range rating aborts the call with no partial result.
2. **Filter** — keep only items rated at least :data:`MIN_TOP_RATING`.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import asdict

from valuekit.core.models import RatedItem, User
from valuekit.exceptions import InvalidRatingError

RATING_RANGE: tuple[int, int] = (0, 5)
"""Inclusive bounds every rating must lie within."""

MIN_TOP_RATING: int = 4
"""Lowest rating kept by :func:`filter_by_rating`."""


# ---------------------------------------------------------------------------
# Rated items
# ---------------------------------------------------------------------------

def _plain_number(value: object) -> object:
    """Render integral floats as ints, the way JavaScript prints numbers."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _serialize_item(item: RatedItem) -> str:
    """Compact JSON rendering of *item*, fields in declaration order."""
    fields = {key: _plain_number(value) for key, value in asdict(item).items()}
    return json.dumps(fields, separators=(",", ":"), ensure_ascii=False)


def validate_ratings(items: Sequence[RatedItem]) -> None:
    """Raise :class:`InvalidRatingError` for the first out-of-range item."""
    low, high = RATING_RANGE
    for item in items:
        if item.rating < low or item.rating > high:
            raise InvalidRatingError(
                f"Invalid input {_serialize_item(item)}. "
                f"Rating should be between {low} and {high}.",
                item=item,
                valid_range=RATING_RANGE,
            )


def filter_by_rating(items: Sequence[RatedItem]) -> list[RatedItem]:
    """Validate all *items*, then return those rated 4 or higher.

    Raises
    ------
    InvalidRatingError
        If any rating lies outside ``[0, 5]``.
    """
    validate_ratings(items)
    return [item for item in items if item.rating >= MIN_TOP_RATING]


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

def filter_active_users(users: Sequence[User]) -> list[User]:
    """Return only users flagged as active."""
    return [user for user in users if user.is_active]
