"""Following an elevator's instructions: "(" goes up a floor, ")" goes down one."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from advent.puzzle import ParseError, Puzzle, PuzzleError

logger = logging.getLogger(__name__)

_SEQUENCE = re.compile(r"[()]+\n")
_MOVES = {"(": 1, ")": -1}


@dataclass
class Elevator(Puzzle):
    """A sequence of floor changes."""

    sequence: str

    @classmethod
    def parse(cls, text: str) -> tuple[str, Elevator]:
        """Parse a line of parentheses ending in a newline."""
        match = _SEQUENCE.match(text)
        if match is None:
            raise ParseError(f"expected a line of parentheses at {text[:16]!r}")
        return text[match.end():], cls(match.group()[:-1])

    def _moves(self):
        for char in self.sequence:
            move = _MOVES.get(char)
            if move is None:
                logger.error("unexpected character in input: %r", char)
            yield char, move

    def part_1(self) -> int:
        """The floor reached at the end of the sequence."""
        if not self.sequence:
            raise PuzzleError("no characters in input")
        return sum(move or 0 for _, move in self._moves())

    def part_2(self) -> int:
        """The 1-based position of the first instruction reaching the basement."""
        current = 0
        for position, (_, move) in enumerate(self._moves(), start=1):
            if move is None:
                continue
            current += move
            if current == -1:
                return position
        raise PuzzleError("never reached the basement")