"""Wrapping paper and ribbon needed for rectangular presents."""

from __future__ import annotations

from dataclasses import dataclass, field

from advent.puzzle import ParseError, Puzzle, parse_number


def _expect(text: str, token: str) -> str:
    if not text.startswith(token):
        raise ParseError(f"expected {token!r} at {text[:16]!r}")
    return text[len(token):]


@dataclass(frozen=True, order=True)
class Dim:
    """The length, width and height of one present."""

    x: int = 0
    y: int = 0
    z: int = 0

    def paper_needed(self) -> int:
        """Surface area plus the area of the smallest side."""
        xy = self.x * self.y
        yz = self.y * self.z
        zx = self.z * self.x
        return 2 * (xy + yz + zx) + min(xy, yz, zx)

    def ribbon_needed(self) -> int:
        """The smallest perimeter plus the volume for the bow."""
        perimeters = (2 * (self.x + self.y), 2 * (self.y + self.z), 2 * (self.z + self.x))
        return self.x * self.y * self.z + min(perimeters)

    @classmethod
    def parse(cls, text: str) -> tuple[str, Dim]:
        """Parse "LxWxH"."""
        rest, x = parse_number(text)
        rest, y = parse_number(_expect(rest, "x"))
        rest, z = parse_number(_expect(rest, "x"))
        return rest, cls(x, y, z)


@dataclass
class Dimensions(Puzzle):
    """A list of presents."""

    presents: list[Dim] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> tuple[str, Dimensions]:
        """Parse one present per line."""
        rest, first = Dim.parse(text)
        presents = [first]
        while rest.startswith("\n"):
            try:
                after, present = Dim.parse(rest[1:])
            except ParseError:
                break
            presents.append(present)
            rest = after
        return rest, cls(presents)

    def part_1(self) -> int:
        return sum(present.paper_needed() for present in self.presents)

    def part_2(self) -> int:
        return sum(present.ribbon_needed() for present in self.presents)