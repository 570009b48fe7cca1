"""Counting houses that receive presents while following directions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from advent.points import Cartesian2D
from advent.puzzle import ParseError, Puzzle
from advent.sparse import SparseGrid2D


class Step(enum.Enum):
    """One move on the grid, named by its arrow symbol."""

    North = "^"
    South = "v"
    East = ">"
    West = "<"

    def step(self, point: Cartesian2D) -> Cartesian2D:
        """The point one move away in this direction; north is +y."""
        if self is Step.North:
            return Cartesian2D(point.x, point.y + 1)
        if self is Step.South:
            return Cartesian2D(point.x, point.y - 1)
        if self is Step.East:
            return Cartesian2D(point.x + 1, point.y)
        return Cartesian2D(point.x - 1, point.y)

    @classmethod
    def parse(cls, text: str) -> tuple[str, Step]:
        """Parse one arrow symbol."""
        head = text[:1]
        if head not in _SYMBOLS:
            raise ParseError(f"expected one of ^v>< at {text[:16]!r}")
        return text[1:], cls(head)


_SYMBOLS = frozenset(step.value for step in Step)


def _increment(count: int) -> int:
    return count + 1


def _visited(grid: SparseGrid2D[int]) -> int:
    return sum(1 for _, count in grid.items() if count >= 1)


@dataclass
class Map(Puzzle):
    """A route of steps and the houses it visits."""

    steps: list[Step] = field(default_factory=list)
    grid: SparseGrid2D[int] = field(default_factory=SparseGrid2D)

    @classmethod
    def parse(cls, text: str) -> tuple[str, Map]:
        """Parse one or more arrow symbols."""
        rest, first = Step.parse(text)
        steps = [first]
        while rest[:1] in _SYMBOLS:
            rest, step = Step.parse(rest)
            steps.append(step)
        return rest, cls(steps)

    def part_1(self) -> int:
        """Houses visited by one traveller starting at the origin."""
        position = Cartesian2D.ZERO
        self.grid.insert(position, 1)
        for step in self.steps:
            position = step.step(position)
            self.grid.update_default(position, _increment)
        return _visited(self.grid)

    def prepare_2(self) -> None:
        self.grid.clear()

    def part_2(self) -> int:
        """Houses visited by two travellers taking alternate steps."""
        positions = [Cartesian2D.ZERO, Cartesian2D.ZERO]
        self.grid.insert(Cartesian2D.ZERO, 2)
        for turn, step in enumerate(self.steps):
            who = turn % 2
            positions[who] = step.step(positions[who])
            self.grid.update_default(positions[who], _increment)
        return _visited(self.grid)