"""Amplifier chains driven by Intcode programs."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import permutations

from ..intcode import IntcodeComputer, IntcodeError, parse_program
from .day01 import _run_day


def _chain(program: list[int], phases: Sequence[int]) -> int:
    signal = 0
    for phase in phases:
        computer = IntcodeComputer(program)
        computer.add_inputs(phase, signal)
        output = computer.run()
        if output is None:
            raise IntcodeError("amplifier halted without output")
        signal = output
    return signal


def _feedback(program: list[int], phases: Sequence[int]) -> int:
    computers = []
    for phase in phases:
        computer = IntcodeComputer(program)
        computer.add_inputs(phase)
        computers.append(computer)

    signal = 0
    last_thrust = 0
    while True:
        for computer in computers:
            computer.add_inputs(signal)
            output = computer.run()
            if output is None:
                return last_thrust
            signal = output
        last_thrust = signal


def part1(text: str) -> int:
    """Highest thruster signal from a serial chain with phases 0 to 4."""
    program = parse_program(text)
    return max(0, *(_chain(program, p) for p in permutations(range(5))))


def part2(text: str) -> int:
    """Highest thruster signal from a feedback loop with phases 5 to 9."""
    program = parse_program(text)
    return max(0, *(_feedback(program, p) for p in permutations(range(5, 10))))


def main(argv: Sequence[str] | None = None) -> int:
    return _run_day(__doc__, argv, part1, part2)


if __name__ == "__main__":
    raise SystemExit(main())