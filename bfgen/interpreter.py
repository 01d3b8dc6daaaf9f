"""Direct execution of brainfuck programs on a fixed-size tape."""

from __future__ import annotations

import sys
from typing import BinaryIO

MAX_BOXES = 1024
"""Number of cells available on the tape."""

PUTCHAR_FLUSHES = True
"""Whether output is flushed after every written byte."""

COMMANDS = "<>+-.,[]"


class Tape:
    """A row of byte cells with a movable pointer."""

    def __init__(self, size: int = MAX_BOXES) -> None:
        if size <= 0:
            raise ValueError("tape size must be positive")
        self.cells = bytearray(size)
        self.pointer = 0

    def _move(self, delta: int) -> None:
        target = self.pointer + delta
        if not 0 <= target < len(self.cells):
            raise IndexError(f"tape pointer moved out of range to {target}")
        self.pointer = target

    def _add(self, delta: int) -> None:
        self.cells[self.pointer] = (self.cells[self.pointer] + delta) % 256

    @property
    def _value(self) -> int:
        return self.cells[self.pointer]

    @_value.setter
    def _value(self, value: int) -> None:
        self.cells[self.pointer] = value


def _match_brackets(code: str) -> dict[int, int]:
    """Map each bracket position to its partner.

    A stray ']' is left out and is ignored when run; a '[' that is never
    closed jumps to the end of the program.
    """
    jumps: dict[int, int] = {}
    open_positions: list[int] = []
    for position, char in enumerate(code):
        if char == "[":
            open_positions.append(position)
        elif char == "]" and open_positions:
            start = open_positions.pop()
            jumps[start] = position
            jumps[position] = start
    for start in open_positions:
        jumps[start] = len(code)
    return jumps


def execute(
    code: str,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
    size: int = MAX_BOXES,
) -> Tape:
    """Run ``code``, reading from ``stdin`` and writing to ``stdout``.

    Returns the tape as it stands when the program ends. Reading past the
    end of input leaves the current cell unchanged.
    """
    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout.buffer

    tape = Tape(size)
    jumps = _match_brackets(code)
    position = 0
    while position < len(code):
        char = code[position]
        if char == ">":
            tape._move(1)
        elif char == "<":
            tape._move(-1)
        elif char == "+":
            tape._add(1)
        elif char == "-":
            tape._add(-1)
        elif char == ".":
            stdout.write(bytes((tape._value,)))
            if PUTCHAR_FLUSHES:
                stdout.flush()
        elif char == ",":
            data = stdin.read(1)
            if data:
                tape._value = data[0]
        elif char == "[":
            if tape._value == 0:
                position = jumps[position]
        elif char == "]":
            if position in jumps and tape._value != 0:
                position = jumps[position]
        position += 1
    return tape