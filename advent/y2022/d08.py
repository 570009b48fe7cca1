"""Counting trees visible from outside a grid, and the best scenic view."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from advent.puzzle import ParseError, Puzzle, PuzzleError

logger = logging.getLogger(__name__)


def _distance(trees, height: int) -> int:
    trees = list(trees)
    for distance, tree in enumerate(trees, start=1):
        if tree >= height:
            return distance
    return len(trees)


@dataclass
class Forest(Puzzle):
    """Tree heights as rows (west to east) and as columns (north to south)."""

    ew: list[list[int]] = field(default_factory=list)
    ns: list[list[int]] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> tuple[str, Forest]:
        """Read one row of digits per line."""
        ew: list[list[int]] = []
        ns: list[list[int]] = []
        for row, line in enumerate(text.splitlines()):
            if not line.isdigit() and line:
                raise ParseError(f"tree heights must be digits: {line!r}")
            rank = [int(char) for char in line]
            if row == 0:
                ns.extend([height] for height in rank)
            elif len(rank) > len(ns):
                raise ParseError(f"row {row} is longer than the first row")
            else:
                for column, height in zip(ns, rank):
                    column.append(height)
            ew.append(rank)
        return "", cls(ew, ns)

    def __len__(self) -> int:
        ew = sum(len(row) for row in self.ew)
        ns = sum(len(column) for column in self.ns)
        if ew != ns:
            raise PuzzleError(f"E/W {ew} count does not match N/S count {ns}")
        return ew

    def after_parse(self) -> None:
        logger.info("found trees: %d", len(self))

    def _interior(self):
        for row, rank in enumerate(self.ew):
            for col, height in enumerate(rank):
                file = self.ns[col]
                edge = col in (0, len(rank) - 1) or row in (0, len(file) - 1)
                yield edge, height, file[:row], rank[:col], rank[col + 1:], file[row + 1:]

    def count_visible(self) -> int:
        """Trees visible from at least one edge of the grid."""
        count = 0
        for edge, height, top, left, right, bottom in self._interior():
            hidden = all(
                any(tree >= height for tree in line) for line in (top, left, right, bottom)
            )
            if edge or not hidden:
                count += 1
        return count

    def view_score(self) -> int:
        """The highest product of viewing distances of any interior tree."""
        best = 0
        for edge, height, top, left, right, bottom in self._interior():
            if edge:
                continue
            score = (
                _distance(reversed(top), height)
                * _distance(reversed(left), height)
                * _distance(right, height)
                * _distance(bottom, height)
            )
            best = max(best, score)
        return best

    def part_1(self) -> int:
        return self.count_visible()

    def part_2(self) -> int:
        return self.view_score()