"""Sensor boost: BOOST keycode and coordinates."""

from __future__ import annotations

from collections.abc import Sequence

from ..intcode import IntcodeComputer, IntcodeError, parse_program
from .day01 import _run_day

TEST_MODE = 1
SENSOR_BOOST_MODE = 2


def _first_output(text: str, mode: int) -> int:
    computer = IntcodeComputer(parse_program(text))
    computer.add_inputs(mode)
    output = computer.run()
    if output is None:
        raise IntcodeError("program halted without output")
    return output


def part1(text: str) -> int:
    """First output of the program run in test mode."""
    return _first_output(text, TEST_MODE)


def part2(text: str) -> int:
    """First output of the program run in sensor boost mode."""
    return _first_output(text, SENSOR_BOOST_MODE)


def main(argv: Sequence[str] | None = None) -> int:
    return _run_day(__doc__, argv, part1, part2)


if __name__ == "__main__":
    raise SystemExit(main())