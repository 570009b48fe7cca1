"""Integral points in two and three dimensions, and compass directions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar, Iterator


@total_ordering
@dataclass(frozen=True)
class Cartesian2D:
    """An integral co-ordinate on a two-dimensional grid, ordered by y, then x."""

    x: int = 0
    y: int = 0

    ZERO: ClassVar[Cartesian2D]

    def _key(self) -> tuple[int, int]:
        return (self.y, self.x)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Cartesian2D):
            return NotImplemented
        return self._key() < other._key()

    def axial_distance(self, other: Cartesian2D) -> int:
        """The Manhattan distance between two points."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def nearby(self, radius: int, max_axial_distance: int) -> list[Cartesian2D]:
        """Points in the square of the given radius, excluding this one and any
        further away than the maximum axial distance."""
        out = []
        for dx in range(-radius, radius + 1):
            for dy in range(-radius, radius + 1):
                dist = abs(dx) + abs(dy)
                if dist == 0 or dist > max_axial_distance:
                    continue
                out.append(Cartesian2D(self.x + dx, self.y + dy))
        return out

    def make_3d(self, z: int) -> Cartesian3D:
        """Lift this point into a plane at height z."""
        return Cartesian3D(self.x, self.y, z)

    def min_unifying(self, other: Cartesian2D) -> Cartesian2D:
        """The point holding the smaller value of each axis."""
        return Cartesian2D(min(self.x, other.x), min(self.y, other.y))

    def max_unifying(self, other: Cartesian2D) -> Cartesian2D:
        """The point holding the larger value of each axis."""
        return Cartesian2D(max(self.x, other.x), max(self.y, other.y))

    def direct_neighbors(self) -> tuple[Cartesian2D, Cartesian2D, Cartesian2D, Cartesian2D]:
        """The four immediate neighbours, in north, south, west, east order."""
        return (
            self + Direction2D.North.unit(),
            self + Direction2D.South.unit(),
            self + Direction2D.West.unit(),
            self + Direction2D.East.unit(),
        )

    def abs_manhattan(self) -> int:
        """The Manhattan distance from the origin."""
        return abs(self.x) + abs(self.y)

    def __add__(self, other: Cartesian2D) -> Cartesian2D:
        if not isinstance(other, Cartesian2D):
            return NotImplemented
        return Cartesian2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Cartesian2D) -> Cartesian2D:
        if not isinstance(other, Cartesian2D):
            return NotImplemented
        return Cartesian2D(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> Cartesian2D:
        if not isinstance(factor, int):
            return NotImplemented
        return Cartesian2D(self.x * factor, self.y * factor)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


Cartesian2D.ZERO = Cartesian2D(0, 0)


@total_ordering
@dataclass(frozen=True)
class Cartesian3D:
    """An integral co-ordinate in a three-dimensional volume, ordered by z, y, then x."""

    x: int = 0
    y: int = 0
    z: int = 0

    ZERO: ClassVar[Cartesian3D]

    def _key(self) -> tuple[int, int, int]:
        return (self.z, self.y, self.x)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Cartesian3D):
            return NotImplemented
        return self._key() < other._key()

    def axial_distance(self, other: Cartesian3D) -> int:
        """The Manhattan distance between two points."""
        return abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)

    def nearby(self, radius: int, max_axial_distance: int) -> list[Cartesian3D]:
        """Points in the cube of the given radius, excluding this one and any
        further away than the maximum axial distance."""
        out = []
        span = range(-radius, radius + 1)
        for dx in span:
            for dy in span:
                for dz in span:
                    dist = abs(dx) + abs(dy) + abs(dz)
                    if dist == 0 or dist > max_axial_distance:
                        continue
                    out.append(Cartesian3D(self.x + dx, self.y + dy, self.z + dz))
        return out

    def make_2d(self) -> tuple[int, Cartesian2D]:
        """Split into the height and the point within that plane."""
        return self.z, Cartesian2D(self.x, self.y)

    def min_unifying(self, other: Cartesian3D) -> Cartesian3D:
        """The point holding the smaller value of each axis."""
        return Cartesian3D(min(self.x, other.x), min(self.y, other.y), min(self.z, other.z))

    def max_unifying(self, other: Cartesian3D) -> Cartesian3D:
        """The point holding the larger value of each axis."""
        return Cartesian3D(max(self.x, other.x), max(self.y, other.y), max(self.z, other.z))

    def __add__(self, other: Cartesian3D) -> Cartesian3D:
        if not isinstance(other, Cartesian3D):
            return NotImplemented
        return Cartesian3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Cartesian3D) -> Cartesian3D:
        if not isinstance(other, Cartesian3D):
            return NotImplemented
        return Cartesian3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


Cartesian3D.ZERO = Cartesian3D(0, 0, 0)


class Direction2D(enum.Enum):
    """A direction in a two-dimensional plane."""

    North = 0
    South = 1
    West = 2
    East = 3

    def unit(self) -> Cartesian2D:
        """The point one step from the origin in this direction.

        North and West are negative on their axes; South and East are positive.
        """
        return _UNITS[self]

    @classmethod
    def all(cls) -> tuple[Direction2D, Direction2D, Direction2D, Direction2D]:
        """Every direction, clockwise from north."""
        return (cls.North, cls.East, cls.South, cls.West)

    def turn_right(self) -> Direction2D:
        """The direction one step clockwise."""
        return _RIGHT_TURNS[self]

    def symbol(self, long: bool = False) -> str:
        """The direction's name, as one letter or written out."""
        return self.name if long else self.name[0]

    def __str__(self) -> str:
        return self.symbol(False)


_UNITS = {
    Direction2D.North: Cartesian2D(0, -1),
    Direction2D.South: Cartesian2D(0, 1),
    Direction2D.West: Cartesian2D(-1, 0),
    Direction2D.East: Cartesian2D(1, 0),
}

_RIGHT_TURNS = {
    Direction2D.North: Direction2D.East,
    Direction2D.East: Direction2D.South,
    Direction2D.South: Direction2D.West,
    Direction2D.West: Direction2D.North,
}


@dataclass
class DirectionSet2D:
    """A small set of directions stored as bit flags."""

    bits: int = 0

    def insert(self, direction: Direction2D) -> None:
        """Add a direction to the set."""
        self.bits |= 1 << direction.value

    def contains(self, direction: Direction2D) -> bool:
        """Test whether a direction is in the set."""
        return bool((self.bits >> direction.value) & 1)

    __contains__ = contains

    def contents(self) -> Iterator[Direction2D]:
        """Yield the directions in the set, clockwise from north."""
        return (d for d in Direction2D.all() if self.contains(d))

    def __or__(self, direction: Direction2D) -> DirectionSet2D:
        if not isinstance(direction, Direction2D):
            return NotImplemented
        out = DirectionSet2D(self.bits)
        out.insert(direction)
        return out

    def __ior__(self, direction: Direction2D) -> DirectionSet2D:
        if not isinstance(direction, Direction2D):
            return NotImplemented
        self.insert(direction)
        return self

    def __str__(self) -> str:
        return "".join(
            sym if self.contains(d) else " " for d, sym in zip(Direction2D.all(), "NSWE")
        )