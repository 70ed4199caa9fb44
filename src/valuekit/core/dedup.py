"""Order-preserving deduplication across two sequences."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from itertools import chain
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def get_unique_values(first: Sequence[T], second: Sequence[T]) -> list[T]:
    """Merge *first* and *second*, keeping each value's first occurrence.

    Values from *first* come out in their original order, followed by
    values from *second* not already seen.  Membership is checked with a
    set, so equality is plain ``==`` (``1`` and ``"1"`` stay distinct).
    """
    seen: set[T] = set()
    result: list[T] = []
    for value in chain(first, second):
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result
