"""Counting the calories carried by each elf."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from advent.puzzle import ParseError, Puzzle, PuzzleError

_ENTRY = re.compile(r"[+-]?[0-9]+\n")
_I64 = range(-(2**63), 2**63)


def _group(text: str) -> tuple[str, int]:
    """Parse one or more newline-terminated numbers, returning their sum."""
    total = 0
    count = 0
    rest = text
    while (match := _ENTRY.match(rest)) is not None:
        value = int(match.group()[:-1])
        if value not in _I64:
            break
        total += value
        count += 1
        rest = rest[match.end():]
    if count == 0:
        raise ParseError(f"expected a number at {text[:16]!r}")
    return rest, total


@dataclass
class Commissary(Puzzle):
    """The total calories in each elf's pack."""

    packs: list[int] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> tuple[str, Commissary]:
        """Parse groups of numbers, one per line, separated by blank lines."""
        rest, first = _group(text)
        packs = [first]
        while rest.startswith("\n"):
            try:
                after, total = _group(rest[1:])
            except ParseError:
                break
            packs.append(total)
            rest = after
        return rest, cls(packs)

    def prepare_1(self) -> None:
        self.packs.sort(reverse=True)

    def part_1(self) -> int:
        """The largest pack."""
        if not self.packs:
            raise PuzzleError("cannot handle an empty group")
        return self.packs[0]

    def prepare_2(self) -> None:
        self.packs.sort(reverse=True)

    def part_2(self) -> int:
        """The sum of the three largest packs."""
        if len(self.packs) < 3:
            raise PuzzleError("cannot handle an empty group")
        return sum(self.packs[:3])