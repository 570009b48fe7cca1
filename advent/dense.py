"""Densely filled two-dimensional grids.

Every cell within the bounds holds a value; there is no support for holes.
Use None as a value, or the sparse grid, where holes are needed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Iterator, TypeVar

from advent.display import DisplayGrid, Symbols
from advent.points import Cartesian2D
from advent.sparse import SparseGrid2D

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class Axis:
    """A half-open run of integers from bgn up to but not including end."""

    bgn: int = 0
    end: int = 0

    @classmethod
    def new_inclusive(cls, low: int, high: int) -> Axis:
        """An axis covering both ends, whichever order they are given in."""
        low, high = min(low, high), max(low, high)
        return cls(low, high + 1)

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.bgn, self.end))

    def __reversed__(self) -> Iterator[int]:
        return reversed(range(self.bgn, self.end))

    def __len__(self) -> int:
        return max(0, self.end - self.bgn)


@dataclass
class DenseGrid2D(DisplayGrid, Generic[T]):
    """A rectangular grid whose top-left cell sits at the origin.

    Cells that are falsy (the default value of the built-in types) draw as
    empty when rendered.
    """

    origin: Cartesian2D = Cartesian2D.ZERO
    table: list[list[T]] = field(default_factory=list)

    def set_origin(self, origin: Cartesian2D) -> None:
        """Move the grid so that its first cell sits at the given point."""
        self.origin = origin

    @classmethod
    def from_raw(cls, origin: Cartesian2D, table: list[list[T]]) -> DenseGrid2D[T]:
        """Wrap a list of equal-length rows. Raises ValueError if rows differ."""
        if table and any(len(row) != len(table[0]) for row in table):
            raise ValueError("Dense storage cannot be jagged")
        return cls(origin, table)

    @classmethod
    def from_sparse(
        cls,
        sparse: SparseGrid2D[T],
        default: Callable[[], T] = int,  # type: ignore[assignment]
    ) -> DenseGrid2D[T]:
        """Fill the sparse grid's bounding box, using default() for empty cells."""
        dims = sparse.dimensions()
        if dims is None:
            return cls()
        low, high = dims
        extent = high - low
        table = [[default() for _ in range(extent.x + 1)] for _ in range(extent.y + 1)]
        grid = cls(low, table)
        for point, value in sparse.items():
            grid[point] = value
        return grid

    def raw_data(self) -> list[list[T]]:
        """The underlying rows."""
        return self.table

    def clear(self) -> None:
        """Empty the grid and reset the origin."""
        self.origin = Cartesian2D.ZERO
        self.table = []

    def is_empty(self) -> bool:
        """Test whether the grid has no cells."""
        return all(not row for row in self.table)

    def dimensions(self) -> tuple[Cartesian2D, Cartesian2D] | None:
        """The minimum and maximum corners, or None if the grid has no cells."""
        if not self.table or not self.table[0]:
            return None
        rows = len(self.table) - 1
        cols = len(self.table[0]) - 1
        return self.origin, Cartesian2D(cols, rows) + self.origin

    def _locate(self, point: Cartesian2D) -> tuple[int, int] | None:
        shifted = point - self.origin
        if not 0 <= shifted.y < len(self.table):
            return None
        if not 0 <= shifted.x < len(self.table[shifted.y]):
            return None
        return shifted.y, shifted.x

    def in_bounds(self, point: Cartesian2D) -> bool:
        """Test whether a point names a cell of the grid."""
        if self.is_empty():
            return False
        return self._locate(point) is not None

    def get(self, point: Cartesian2D) -> T | None:
        """The value at a point, or None when it lies outside the grid."""
        found = self._locate(point)
        if found is None:
            return None
        row, col = found
        return self.table[row][col]

    def get_row(self, row: int) -> list[T] | None:
        """The cells of one row, or None when it lies outside the grid."""
        index = row - self.origin.y
        if not 0 <= index < len(self.table):
            return None
        return self.table[index]

    def items(self) -> Iterator[tuple[Cartesian2D, T]]:
        """Yield every (point, value), in row-major order."""
        width = len(self.table[0]) if self.table else 0
        rows = Axis(self.origin.y, self.origin.y + len(self.table))
        for y, cells in zip(rows, self.table):
            for x, value in zip(Axis(self.origin.x, self.origin.x + width), cells):
                yield Cartesian2D(x, y), value

    def __getitem__(self, point: Cartesian2D) -> T:
        found = self._locate(point)
        if found is None:
            raise IndexError(f"{point} is outside the grid")
        row, col = found
        return self.table[row][col]

    def __setitem__(self, point: Cartesian2D, value: T) -> None:
        found = self._locate(point)
        if found is None:
            raise IndexError(f"{point} is outside the grid")
        row, col = found
        self.table[row][col] = value

    def bounds_inclusive(self) -> tuple[Cartesian2D, Cartesian2D] | None:
        return self.dimensions()

    def print_cell(self, symbols: Symbols, row: int, col: int, row_abs: int, col_abs: int) -> str:
        return symbols.full if self.table[row_abs][col_abs] else symbols.empty

    def __str__(self) -> str:
        return self.render()