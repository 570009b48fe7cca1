"""Finding the items misplaced in rucksacks."""

from __future__ import annotations

import logging
import re
import string
from dataclasses import dataclass, field
from functools import reduce

from advent.puzzle import ParseError, Puzzle, PuzzleError

logger = logging.getLogger(__name__)

_LETTERS = re.compile(r"[A-Za-z]+")


def item_priority(char: str) -> int:
    """a to z are 1 to 26, A to Z are 27 to 52; anything else is 0."""
    if len(char) == 1 and "a" <= char <= "z":
        return 1 + ord(char) - ord("a")
    if len(char) == 1 and "A" <= char <= "Z":
        return 27 + ord(char) - ord("A")
    logger.error("unknown priority symbol: %r", char)
    return 0


def _priorities(text: str) -> frozenset[int]:
    return frozenset(item_priority(char) for char in text)


@dataclass(frozen=True)
class Backpack:
    """The item priorities in each of a rucksack's two compartments."""

    left: frozenset[int] = frozenset()
    right: frozenset[int] = frozenset()

    @classmethod
    def parse(cls, text: str) -> tuple[str, Backpack]:
        """Parse a run of letters, split evenly between the compartments."""
        match = _LETTERS.match(text)
        if match is None:
            raise ParseError(f"expected letters at {text[:16]!r}")
        line = match.group()
        if len(line) % 2 != 0:
            logger.error("must have even number of symbols: %s", line)
            raise ParseError(f"must have even number of symbols: {line!r}")
        half = len(line) // 2
        return text[match.end():], cls(_priorities(line[:half]), _priorities(line[half:]))


@dataclass
class Rucksacks(Puzzle):
    """The rucksacks of every elf, in order."""

    packs: list[Backpack] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> tuple[str, Rucksacks]:
        """Parse one rucksack per line."""
        rest, first = Backpack.parse(text)
        packs = [first]
        while rest.startswith("\n") and rest[1:2] and rest[1] in string.ascii_letters:
            rest, pack = Backpack.parse(rest[1:])
            packs.append(pack)
        return rest, cls(packs)

    def part_1(self) -> int:
        """The sum of the priority shared by both compartments of each rucksack."""
        total = 0
        for pack in self.packs:
            common = pack.left & pack.right
            if not common:
                logger.error("no common item: %r", pack)
                raise PuzzleError("no common item")
            total += min(common)
        return total

    def part_2(self) -> int:
        """The sum of the badge priority shared by each group of three rucksacks."""
        total = 0
        for group in zip(*[iter(self.packs)] * 3):
            common = reduce(
                lambda accum, items: accum & items,
                (pack.left | pack.right for pack in group),
            )
            if not common:
                logger.error("no common item in group")
                raise PuzzleError("no common item in group")
            total += min(common)
        return total