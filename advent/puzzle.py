"""The puzzle protocol, the solver harness and shared parsing helpers."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """Raised when puzzle input cannot be parsed."""


class PuzzleError(Exception):
    """Raised when a puzzle cannot be prepared or solved."""


class Puzzle(ABC):
    """A solver for a day's pair of puzzles."""

    @classmethod
    @abstractmethod
    def parse(cls, text: str) -> tuple[str, Puzzle]:
        """Parse input text, returning the unconsumed rest and a new solver."""

    def after_parse(self) -> None:
        """Additional processing after the text input has been parsed."""

    def prepare_1(self) -> None:
        """Prepare to run part 1."""

    def part_1(self) -> int:
        """Run the part 1 solver."""
        raise PuzzleError("have not yet solved part 1")

    def prepare_2(self) -> None:
        """Prepare to run part 2; by default this prepares part 1."""
        self.prepare_1()

    def part_2(self) -> int:
        """Run the part 2 solver."""
        raise PuzzleError("have not yet solved part 2")


Parser = Callable[[str], "tuple[str, Puzzle]"]


@dataclass(frozen=True, order=True)
class Solver:
    """An entry in the puzzle set: a year, a day and a parser producing a Puzzle."""

    year: int
    day: int
    func: Parser = field(compare=False)

    def solve(self, group: str, part_1: bool, part_2: bool) -> tuple[int | None, int | None]:
        """Load the named input group, parse it and run the requested parts."""
        text = self.load_input(group)
        logger.debug("loaded input")
        for line in text.splitlines()[:3]:
            logger.debug("input data: %s", line)

        try:
            rest, solver = self.func(text)
        except ParseError as err:
            raise ParseError(f"failed to parse input: {err}") from err
        if rest.strip():
            first = rest.splitlines()[0] if rest.splitlines() else ""
            logger.warning("unparsed input remaining: %s...", first)

        one = None
        if part_1:
            try:
                solver.prepare_1()
            except Exception as err:
                raise PuzzleError("could not prepare for part 1") from err
            try:
                one = solver.part_1()
            except Exception as err:
                raise PuzzleError("could not solve part 1") from err

        two = None
        if part_2:
            try:
                solver.prepare_2()
            except Exception as err:
                raise PuzzleError("could not prepare for part 2") from err
            try:
                two = solver.part_2()
            except Exception as err:
                raise PuzzleError("could not solve part 2") from err

        return one, two

    def load_input(self, group: str) -> str:
        """Read src/y<year>/d<day>/<group>.txt relative to the working directory."""
        path = Path.cwd() / "src" / f"y{self.year}" / f"d{self.day:02}" / f"{group}.txt"
        logger.debug("generated input path: %s", path)
        try:
            return path.read_text()
        except OSError as err:
            raise PuzzleError(f"could not read {path}") from err

    def parse(self, text: str) -> tuple[str, Puzzle]:
        """Parse the input into a solver."""
        return self.func(text)


def unify_ranges_inclusive(ranges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Join overlapping inclusive (start, end) ranges, sorted by start."""
    unified: list[tuple[int, int]] = []
    for start, end in sorted(ranges, key=lambda r: r[0]):
        if unified:
            prev_start, prev_end = unified[-1]
            if prev_end >= start:
                unified[-1] = (min(prev_start, start), max(prev_end, end))
                continue
        unified.append((start, end))
    return unified


_DIGITS = re.compile(r"[0-9]+")

_WORDS = ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def parse_number(text: str) -> tuple[str, int]:
    """Parse a leading run of decimal digits, returning the rest and the number."""
    match = _DIGITS.match(text)
    if match is None:
        raise ParseError(f"expected digits at {text[:16]!r}")
    return text[match.end():], int(match.group())


def written_number(text: str) -> tuple[str, int]:
    """Parse a leading spelled-out digit ("zero" to "nine")."""
    for value, word in enumerate(_WORDS):
        if text.startswith(word):
            return text[len(word):], value
    raise ParseError(f"expected a written number at {text[:16]!r}")