"""Running the thermal environment supervision terminal diagnostics."""

from __future__ import annotations

from collections.abc import Sequence

from ..intcode import IntcodeComputer, IntcodeError, parse_program
from .day01 import _run_day

AIR_CONDITIONER_ID = 1
THERMAL_RADIATOR_ID = 5


def _diagnostic_code(text: str, system_id: int) -> int:
    computer = IntcodeComputer(parse_program(text))
    computer.add_inputs(system_id)
    outputs = computer.run_until_halt()
    if not outputs:
        raise IntcodeError("program produced no output")
    return outputs[-1]


def part1(text: str) -> int:
    """Diagnostic code for the air conditioner unit."""
    return _diagnostic_code(text, AIR_CONDITIONER_ID)


def part2(text: str) -> int:
    """Diagnostic code for the thermal radiator controller."""
    return _diagnostic_code(text, THERMAL_RADIATOR_ID)


def main(argv: Sequence[str] | None = None) -> int:
    return _run_day(__doc__, argv, part1, part2)


if __name__ == "__main__":
    raise SystemExit(main())