"""Fuel requirements for spacecraft modules."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

from ..seqs import parse_int


def _run_day(
    description: str | None,
    argv: Sequence[str] | None,
    *solvers: Callable[[str], object],
) -> int:
    """Read the input file named on the command line and print each solver's answer."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("input", nargs="?", default="input.in")
    path = parser.parse_args(argv).input
    try:
        text = Path(path).read_text()
    except OSError as exc:
        print(f"Error reading file {path}:\n{exc}", file=sys.stderr)
        return 1
    for solve in solvers:
        print(solve(text))
    return 0


def _masses(text: str) -> Iterator[int]:
    return (parse_int(line) for line in text.strip().split("\n"))


def _fuel(mass: int) -> int:
    return mass // 3 - 2


def _total_fuel(mass: int) -> int:
    total = 0
    fuel = _fuel(mass)
    while fuel > 0:
        total += fuel
        fuel = _fuel(fuel)
    return total


def part1(text: str) -> int:
    """Fuel for the modules alone."""
    return sum(_fuel(mass) for mass in _masses(text))


def part2(text: str) -> int:
    """Fuel for the modules, counting the fuel needed to carry the fuel."""
    return sum(_total_fuel(mass) for mass in _masses(text))


def main(argv: Sequence[str] | None = None) -> int:
    return _run_day(__doc__, argv, part1, part2)


if __name__ == "__main__":
    raise SystemExit(main())