"""Games of cubes drawn from a bag."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field

from advent.puzzle import ParseError, Puzzle, parse_number

_SPACE = re.compile(r"[ \t]+")
_U8_MAX = 0xFF
_I32_MAX = 2**31 - 1


class Color(enum.Enum):
    """A cube colour."""

    Red = "red"
    Blue = "blue"
    Green = "green"


@dataclass(frozen=True, order=True)
class Record:
    """Counts of cubes of each colour."""

    red: int = 0
    blue: int = 0
    green: int = 0

    @classmethod
    def parse(cls, text: str) -> tuple[str, Record]:
        """Parse "N colour, N colour, ..." after any leading whitespace."""
        rest, first = _count_color(text.lstrip())
        pairs = [first]
        while rest.startswith(", "):
            try:
                after, pair = _count_color(rest[2:])
            except ParseError:
                break
            pairs.append(pair)
            rest = after
        counts = {"red": 0, "blue": 0, "green": 0}
        for count, color in pairs:
            counts[color.value] = count
        return rest, cls(**counts)

    def _max(self, other: Record) -> Record:
        return Record(
            max(self.red, other.red), max(self.blue, other.blue), max(self.green, other.green)
        )


def _count_color(text: str) -> tuple[str, tuple[int, Color]]:
    rest, count = parse_number(text)
    if count > _I32_MAX:
        raise ParseError(f"count out of range at {text[:16]!r}")
    space = _SPACE.match(rest)
    if space is None:
        raise ParseError(f"expected whitespace at {rest[:16]!r}")
    rest = rest[space.end():]
    for color in Color:
        if rest.startswith(color.value):
            return rest[len(color.value):], (count, color)
    raise ParseError(f"expected a colour at {rest[:16]!r}")


_LIMIT = Record(red=12, blue=14, green=13)


def _game(text: str) -> tuple[str, tuple[int, Record]]:
    if not text.startswith("Game "):
        raise ParseError(f"expected a game at {text[:16]!r}")
    rest, ident = parse_number(text[5:])
    if ident > _U8_MAX:
        raise ParseError(f"game number out of range: {ident}")
    if not rest.startswith(": "):
        raise ParseError(f"expected ': ' at {rest[:16]!r}")
    rest, most = Record.parse(rest[2:])
    while rest.startswith("; "):
        try:
            after, record = Record.parse(rest[2:])
        except ParseError:
            break
        most = most._max(record)
        rest = after
    return rest, (ident, most)


@dataclass
class GameSet(Puzzle):
    """The most cubes of each colour seen in each game, keyed by game number."""

    games: dict[int, Record] = field(default_factory=dict)

    @classmethod
    def parse(cls, text: str) -> tuple[str, GameSet]:
        """Parse one game per line."""
        rest, first = _game(text)
        games = [first]
        while rest.startswith("\n"):
            try:
                after, game = _game(rest[1:])
            except ParseError:
                break
            games.append(game)
            rest = after
        return rest, cls(dict(sorted(dict(games).items())))

    def part_1(self) -> int:
        """The sum of the numbers of games possible with 12 red, 13 green, 14 blue."""
        return sum(
            ident
            for ident, record in self.games.items()
            if record.red <= _LIMIT.red
            and record.blue <= _LIMIT.blue
            and record.green <= _LIMIT.green
        )

    def part_2(self) -> int:
        """The sum of the powers of each game's minimal cube set."""
        return sum(record.red * record.blue * record.green for record in self.games.values())