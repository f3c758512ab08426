"""An Intcode virtual machine with sparse memory and queued inputs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from .seqs import parse_int

_POSITION = 0
_IMMEDIATE = 1
_RELATIVE = 2
_HALT = 99


class IntcodeError(Exception):
    """Raised when an Intcode program cannot be executed."""


def parse_program(text: str) -> list[int]:
    """Parse a comma separated Intcode program."""
    return [parse_int(field) for field in text.strip().split(",")]


class IntcodeComputer:
    """Runs an Intcode program, pausing whenever it produces an output."""

    def __init__(self, program: Iterable[int]) -> None:
        self.memory: dict[int, int] = dict(enumerate(program))
        self.ip = 0
        self.relative_base = 0
        self.inputs: deque[int] = deque()
        self.halted = False

    def add_inputs(self, *args: int) -> None:
        """Queue values for the program's input instructions."""
        self.inputs.extend(args)

    def set_noun_verb(self, noun: int, verb: int) -> None:
        """Write the noun and verb into addresses 1 and 2."""
        if len(self.memory) < 3:
            raise IntcodeError(
                f"not enough room for noun and verb: length {len(self.memory)}"
            )
        self.memory[1] = noun
        self.memory[2] = verb

    def _read(self, address: int) -> int:
        return self.memory.get(address, 0)

    def _param(self, offset: int, mode: int) -> int:
        raw = self._read(self.ip + offset)
        if mode == _POSITION:
            return self._read(raw)
        if mode == _IMMEDIATE:
            return raw
        if mode == _RELATIVE:
            return self._read(raw + self.relative_base)
        raise IntcodeError(f"invalid parameter mode: {mode}")

    def _store(self, offset: int, mode: int, value: int) -> None:
        raw = self._read(self.ip + offset)
        if mode == _POSITION:
            address = raw
        elif mode == _RELATIVE:
            address = raw + self.relative_base
        else:
            raise IntcodeError(f"invalid parameter mode for storing: {mode}")
        if address < 0:
            raise IntcodeError(f"invalid memory address for storing: {address}")
        self.memory[address] = value

    def run(self) -> int | None:
        """Execute until the next output, which is returned, or until halt (None)."""
        while True:
            instruction = self._read(self.ip)
            opcode = instruction % 100
            m1 = instruction // 100 % 10
            m2 = instruction // 1000 % 10
            m3 = instruction // 10000 % 10
            match opcode:
                case 1:
                    self._store(3, m3, self._param(1, m1) + self._param(2, m2))
                    self.ip += 4
                case 2:
                    self._store(3, m3, self._param(1, m1) * self._param(2, m2))
                    self.ip += 4
                case 3:
                    if not self.inputs:
                        raise IntcodeError(f"no input available at position {self.ip}")
                    self._store(1, m1, self.inputs.popleft())
                    self.ip += 2
                case 4:
                    value = self._param(1, m1)
                    self.ip += 2
                    return value
                case 5:
                    if self._param(1, m1) != 0:
                        self.ip = self._param(2, m2)
                    else:
                        self.ip += 3
                case 6:
                    if self._param(1, m1) == 0:
                        self.ip = self._param(2, m2)
                    else:
                        self.ip += 3
                case 7:
                    self._store(3, m3, int(self._param(1, m1) < self._param(2, m2)))
                    self.ip += 4
                case 8:
                    self._store(3, m3, int(self._param(1, m1) == self._param(2, m2)))
                    self.ip += 4
                case 9:
                    self.relative_base += self._param(1, m1)
                    self.ip += 2
                case 99:
                    self.halted = True
                    return None
                case _:
                    raise IntcodeError(
                        f"invalid opcode {instruction} at position {self.ip}"
                    )

    def run_until_halt(self) -> list[int]:
        """Execute until the program halts and return every output."""
        outputs = []
        while (value := self.run()) is not None:
            outputs.append(value)
        return outputs