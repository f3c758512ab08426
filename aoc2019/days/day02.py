"""Restoring the gravity assist program."""

from __future__ import annotations

from collections.abc import Sequence

from ..intcode import IntcodeComputer, parse_program
from .day01 import _run_day

TARGET = 19690720


def _run(program: list[int], noun: int, verb: int) -> int:
    computer = IntcodeComputer(program)
    computer.set_noun_verb(noun, verb)
    computer.run()
    return computer.memory.get(0, 0)


def part1(text: str, noun: int = 12, verb: int = 2) -> int:
    """Value left at address 0 after running with the given noun and verb."""
    return _run(parse_program(text), noun, verb)


def part2(text: str) -> int:
    """100 * noun + verb for the pair that leaves the target at address 0."""
    program = parse_program(text)
    for noun in range(100):
        for verb in range(100):
            if _run(program, noun, verb) == TARGET:
                return 100 * noun + verb
    raise ValueError(f"no noun and verb produce {TARGET}")


def main(argv: Sequence[str] | None = None) -> int:
    return _run_day(__doc__, argv, part1, part2)


if __name__ == "__main__":
    raise SystemExit(main())