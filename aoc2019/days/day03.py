"""Crossed wires on a grid."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

from ..grid import Direction, Point
from ..seqs import parse_int

_DIRECTIONS = {
    "R": Direction.RIGHT,
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
}


def _parse_move(text: str) -> tuple[Direction, int]:
    try:
        direction = _DIRECTIONS[text[:1]]
    except KeyError:
        raise ValueError(f"Invalid direction: {text[:1]!r}") from None
    return direction, parse_int(text[1:])


def parse_wires(text: str) -> list[list[tuple[Direction, int]]]:
    """Parse one wire per line into (direction, distance) moves."""
    return [
        [_parse_move(field) for field in line.split(",")]
        for line in text.strip().split("\n")
    ]


def _walk(moves: list[tuple[Direction, int]]) -> Iterator[Point]:
    point = Point()
    for direction, amount in moves:
        for _ in range(amount):
            point = point.moved(direction)
            yield point


def part1(text: str) -> int:
    """Manhattan distance of the crossing closest to the origin."""
    first, second = parse_wires(text)[:2]
    visited = set(_walk(first))
    return min(point.manhattan() for point in _walk(second) if point in visited)


def part2(text: str) -> int:
    """Fewest combined steps the wires take to reach a crossing."""
    first, second = parse_wires(text)[:2]
    visited = set(_walk(first))
    steps = {
        point: dist
        for dist, point in enumerate(_walk(second), start=1)
        if point in visited
    }
    for dist, point in enumerate(_walk(first), start=1):
        if steps.get(point, 0) > 0:
            steps[point] += dist
    return min(steps.values())


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 3.")
    parser.add_argument("input", nargs="?", default="input.in")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print(f"Error reading file {args.input}:\n{exc}", file=sys.stderr)
        return 1
    print(part1(text))
    print(part2(text))
    return 0


if __name__ == "__main__":
    sys.exit(main())