"""A thousand-by-thousand grid of lights driven by rectangle instructions."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

import numpy as np

from advent.puzzle import ParseError, Puzzle, PuzzleError

DIMENSION = 1000

_U16_MAX = 0xFFFF

_INSTRUCTION = re.compile(
    r"(turn on|turn off|toggle)[ \t]+([0-9]+),([0-9]+) through ([0-9]+),([0-9]+)"
)


class Opcode(enum.Enum):
    """What an instruction does to the lights in its rectangle."""

    On = "turn on"
    Off = "turn off"
    Toggle = "toggle"


@dataclass(frozen=True)
class Instruction:
    """An operation over an inclusive rectangle of columns and rows."""

    cols: range
    rows: range
    insn: Opcode

    @classmethod
    def parse(cls, text: str) -> tuple[str, Instruction]:
        """Parse "<op> x1,y1 through x2,y2"."""
        match = _INSTRUCTION.match(text)
        if match is None:
            raise ParseError(f"expected an instruction at {text[:24]!r}")
        x1, y1, x2, y2 = (int(group) for group in match.groups()[1:])
        if max(x1, y1, x2, y2) > _U16_MAX:
            raise ParseError(f"co-ordinate out of range in {match.group()!r}")
        return text[match.end():], cls(range(x1, x2 + 1), range(y1, y2 + 1), Opcode(match.group(1)))

    def _region(self, grid: np.ndarray) -> np.ndarray:
        rows_on_grid = len(self.rows) > 0 and self.rows.start < DIMENSION
        if rows_on_grid and len(self.cols) > 0 and self.cols.stop > DIMENSION:
            raise PuzzleError(
                f"columns {self.cols.start}..={self.cols.stop - 1} fall outside the grid"
            )
        return grid[self.rows.start:self.rows.stop, self.cols.start:self.cols.stop]

    def digital(self, grid: np.ndarray) -> None:
        """Apply to a grid of on/off lights, in place."""
        region = self._region(grid)
        if self.insn is Opcode.On:
            region[...] = True
        elif self.insn is Opcode.Off:
            region[...] = False
        else:
            region ^= True

    def analog(self, grid: np.ndarray) -> None:
        """Apply to a grid of brightness levels, in place."""
        region = self._region(grid)
        if self.insn is Opcode.On:
            region += 1
        elif self.insn is Opcode.Off:
            region[region > 0] -= 1
        else:
            region += 2


class LightGrid(Puzzle):
    """A list of instructions and the grid they last drove."""

    def __init__(self, steps: list[Instruction]) -> None:
        self.steps = steps
        self.state = np.zeros((DIMENSION, DIMENSION), dtype=bool)

    @classmethod
    def parse(cls, text: str) -> tuple[str, LightGrid]:
        """Parse one instruction per line."""
        rest, first = Instruction.parse(text)
        steps = [first]
        while rest.startswith("\n"):
            try:
                after, step = Instruction.parse(rest[1:])
            except ParseError:
                break
            steps.append(step)
            rest = after
        return rest, cls(steps)

    def _is_digital(self) -> bool:
        return self.state.dtype == np.bool_

    def prepare_1(self) -> None:
        grid = np.zeros((DIMENSION, DIMENSION), dtype=bool)
        for step in self.steps:
            step.digital(grid)
        self.state = grid

    def part_1(self) -> int:
        """How many lights are on."""
        if not self._is_digital():
            raise PuzzleError("part 1 is a digital grid")
        return int(np.count_nonzero(self.state))

    def prepare_2(self) -> None:
        grid = np.zeros((DIMENSION, DIMENSION), dtype=np.int64)
        for step in self.steps:
            step.analog(grid)
        self.state = grid

    def part_2(self) -> int:
        """The total brightness."""
        if self._is_digital():
            raise PuzzleError("part 2 is an analog grid")
        return int(self.state.sum())