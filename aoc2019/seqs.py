"""Small helpers for parsing integers and working with sequences."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str) -> int:
    """Parse a strict decimal integer with an optional sign."""
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"Invalid number: {text!r}")
    return int(text)


def most_frequent(items: Iterable[H]) -> H | None:
    """Return the most common item, or None if there are none."""
    counts = Counter(items)
    if not counts:
        return None
    return max(counts, key=counts.__getitem__)


def least_frequent(items: Iterable[H]) -> H | None:
    """Return the least common item, or None if there are none."""
    counts = Counter(items)
    if not counts:
        return None
    return min(counts, key=counts.__getitem__)


def remove_all(items: Iterable[T], obj: Any) -> list[T]:
    """Return the items that are not equal to obj."""
    return [item for item in items if item != obj]


def remove_first(items: Iterable[T], obj: Any) -> list[T]:
    """Return the items without the first one equal to obj."""
    result: list[T] = []
    found = False
    for item in items:
        if not found and item == obj:
            found = True
        else:
            result.append(item)
    return result


def are_set_equal(first: Sequence[Any], second: Sequence[Any]) -> bool:
    """True if both sequences have the same length and contain each other's items."""
    if len(first) != len(second):
        return False
    return all(item in second for item in first) and all(item in first for item in second)