"""Counting overlapping section assignments."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from advent.puzzle import ParseError, Puzzle

_ASSIGNMENT = re.compile(r"([0-9]+)-([0-9]+),([0-9]+)-([0-9]+)")
_U64_MAX = 2**64 - 1


def _ends(sections: range) -> tuple[int, int]:
    return sections.start, sections.stop - 1


@dataclass(frozen=True, repr=False)
class Assignments:
    """A pair of inclusive section ranges."""

    left: range
    right: range

    @classmethod
    def parse(cls, text: str) -> tuple[str, Assignments]:
        """Parse "a-b,c-d"."""
        match = _ASSIGNMENT.match(text)
        if match is None:
            raise ParseError(f"expected an assignment pair at {text[:16]!r}")
        a, b, c, d = (int(group) for group in match.groups())
        if max(a, b, c, d) > _U64_MAX:
            raise ParseError(f"section number out of range in {match.group()!r}")
        return text[match.end():], cls(range(a, b + 1), range(c, d + 1))

    def describe(self, spaced: bool = False) -> str:
        """Render as "a..=b / c..=d", with spaces around "..=" if asked."""
        sep = " " if spaced else ""
        (lbgn, lend), (rbgn, rend) = _ends(self.left), _ends(self.right)
        return f"{lbgn}{sep}..={sep}{lend} / {rbgn}{sep}..={sep}{rend}"

    def __repr__(self) -> str:
        return self.describe(False)

    def _one_contains_other(self) -> bool:
        return all(r in self.left for r in _ends(self.right)) or all(
            l in self.right for l in _ends(self.left)
        )

    def _overlaps(self) -> bool:
        return any(r in self.left for r in _ends(self.right)) or any(
            l in self.right for l in _ends(self.left)
        )


@dataclass
class Camp(Puzzle):
    """The cleaning assignments of every pair of elves."""

    chores: list[Assignments] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> tuple[str, Camp]:
        """Parse one assignment pair per line."""
        rest, first = Assignments.parse(text)
        chores = [first]
        while rest.startswith("\n"):
            try:
                after, pair = Assignments.parse(rest[1:])
            except ParseError:
                break
            chores.append(pair)
            rest = after
        return rest, cls(chores)

    def part_1(self) -> int:
        """Pairs in which one range fully contains the other."""
        return sum(1 for pair in self.chores if pair._one_contains_other())

    def part_2(self) -> int:
        """Pairs whose ranges overlap at all."""
        return sum(1 for pair in self.chores if pair._overlaps())