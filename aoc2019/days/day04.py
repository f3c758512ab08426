"""Counting passwords that fit the elves' rules."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from itertools import groupby

from ..seqs import parse_int
from .day01 import _run_day


def _non_decreasing(digits: str) -> bool:
    return all(a <= b for a, b in zip(digits, digits[1:]))


def is_valid(password: int) -> bool:
    """Digits never decrease and at least two adjacent digits match."""
    digits = str(password)
    return _non_decreasing(digits) and any(a == b for a, b in zip(digits, digits[1:]))


def is_valid_strict(password: int) -> bool:
    """Digits never decrease and some digit repeats in a run of exactly two."""
    digits = str(password)
    return _non_decreasing(digits) and any(
        len(list(run)) == 2 for _, run in groupby(digits)
    )


def _count(text: str, rule: Callable[[int], bool]) -> int:
    low, _, high = text.strip().partition("-")
    return sum(1 for n in range(parse_int(low), parse_int(high)) if rule(n))


def part1(text: str) -> int:
    """Number of valid passwords in the range low-high, high excluded."""
    return _count(text, is_valid)


def part2(text: str) -> int:
    """Number of strictly valid passwords in the range low-high, high excluded."""
    return _count(text, is_valid_strict)


def main(argv: Sequence[str] | None = None) -> int:
    return _run_day(__doc__, argv, part1, part2)


if __name__ == "__main__":
    raise SystemExit(main())