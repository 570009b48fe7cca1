"""Plain-text rendering of two-dimensional grids with hexadecimal rulers."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from advent.points import Cartesian2D


@dataclass(frozen=True)
class Symbols:
    """Characters used to draw a table as text."""

    horiz: str
    vert: str
    plus: str
    cross: str
    swne: str
    nwse: str
    middle_dot: str
    horiz_dots: str
    vert_dots: str
    empty: str
    quarter_1: str
    quarter_2: str
    quarter_3: str
    full: str

    ASCII: ClassVar[Symbols]
    FANCY: ClassVar[Symbols]


Symbols.ASCII = Symbols(
    horiz="-",
    vert="|",
    plus="+",
    cross="X",
    swne="/",
    nwse="\\",
    middle_dot=".",
    horiz_dots="-",
    vert_dots="|",
    empty=" ",
    quarter_1="_",
    quarter_2="m",
    quarter_3="M",
    full="#",
)

Symbols.FANCY = Symbols(
    horiz="─",
    vert="│",
    plus="┼",
    cross="╳",
    swne="╱",
    nwse="╲",
    middle_dot="·",
    horiz_dots="╌",
    vert_dots="╎",
    empty=" ",
    quarter_1="░",
    quarter_2="▒",
    quarter_3="▓",
    full="█",
)


def _hex_digits(largest: int) -> int:
    if largest <= 1:
        return 0
    return math.ceil(math.log(largest, 16))


class DisplayGrid(ABC):
    """A grid that can draw itself as text, one character per cell."""

    @abstractmethod
    def bounds_inclusive(self) -> tuple[Cartesian2D, Cartesian2D] | None:
        """The minimum and maximum corners of the grid, or None when empty."""

    @abstractmethod
    def print_cell(self, symbols: Symbols, row: int, col: int, row_abs: int, col_abs: int) -> str:
        """The single character that draws one cell."""

    def render(self, fancy: bool = False) -> str:
        """Draw the grid with hexadecimal row and column rulers.

        Rows and columns are numbered from zero regardless of the grid's
        co-ordinates. Raises ValueError if the grid is too small for a ruler.
        """
        bounds = self.bounds_inclusive()
        if bounds is None:
            return ""
        low, high = bounds
        symbols = Symbols.FANCY if fancy else Symbols.ASCII
        row_max_abs = high.y - low.y
        col_max_abs = high.x - low.x
        digits = _hex_digits(max(row_max_abs, col_max_abs))
        if digits == 0:
            raise ValueError("grid must span more than two cells along an axis to render")

        ruler = [[] for _ in range(digits)]
        for col in range(col_max_abs + 1):
            mask = 0xF
            ruler[0].append(format(col & mask, "x"))
            for place in range(1, digits):
                if col & mask == 0:
                    ruler[place].append(format((col >> (4 * place)) & 0xF, "x"))
                else:
                    ruler[place].append(symbols.horiz_dots)
                mask = (mask << 4) | 0xF

        lines = []
        pad = " " * digits
        for line in reversed(ruler):
            lines.append(f"{pad}{symbols.vert}{''.join(line)}")
        lines.append(symbols.horiz * digits + symbols.plus + symbols.horiz * (col_max_abs + 1))

        for row_abs in range(row_max_abs + 1):
            row = low.y + row_abs
            mask = 0xF
            label = [format(row_abs & 0xF, "x")]
            for place in range(1, digits):
                mask |= 0xF
                if row_abs & mask == 0:
                    label.append(format((row_abs >> (4 * place)) & 0xF, "x"))
                else:
                    label.append(symbols.vert_dots)
                mask <<= 4
            cells = "".join(
                self.print_cell(symbols, row, low.x + col_abs, row_abs, col_abs)
                for col_abs in range(col_max_abs + 1)
            )
            lines.append("".join(reversed(label)) + symbols.vert + cells)

        return "".join(line + "\n" for line in lines)