"""Sparsely populated two- and three-dimensional grids."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from advent.display import DisplayGrid, Symbols
from advent.points import Cartesian2D, Cartesian3D

T = TypeVar("T")


class SparseGrid2D(DisplayGrid, Generic[T]):
    """A two-dimensional grid storing values only at occupied points.

    The bounding box grows as points are inserted and is not shrunk by
    removals; it is only reset by clearing the grid.
    """

    def __init__(self) -> None:
        self._rows: dict[int, dict[int, T]] = {}
        self._bounds: tuple[Cartesian2D, Cartesian2D] | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseGrid2D):
            return NotImplemented
        return self._rows == other._rows and self._bounds == other._bounds

    def __repr__(self) -> str:
        entries = ", ".join(f"{point}: {value!r}" for point, value in self.items())
        return f"SparseGrid2D({{{entries}}})"

    @classmethod
    def from_items(cls, items: Iterable[tuple[Cartesian2D, T]]) -> SparseGrid2D[T]:
        """Build a grid from (point, value) pairs."""
        grid: SparseGrid2D[T] = cls()
        for point, value in items:
            grid.insert(point, value)
        return grid

    def raw_data(self) -> dict[int, dict[int, T]]:
        """The underlying storage: rows keyed by y, each keyed by x."""
        return self._rows

    def clear(self) -> None:
        """Remove every value and reset the bounds."""
        self._rows = {}
        self._bounds = None

    def is_empty(self) -> bool:
        """Test whether the grid holds no values."""
        return all(not row for row in self._rows.values())

    def __len__(self) -> int:
        return sum(len(row) for row in self._rows.values())

    def dimensions(self) -> tuple[Cartesian2D, Cartesian2D] | None:
        """The unified minimum and maximum corners of the stored points."""
        points = (point for point, _ in self.items())
        first = next(points, None)
        if first is None:
            return None
        low = high = first
        for point in points:
            low = low.min_unifying(point)
            high = high.max_unifying(point)
        return low, high

    def __contains__(self, point: object) -> bool:
        if not isinstance(point, Cartesian2D):
            return False
        row = self._rows.get(point.y)
        return row is not None and point.x in row

    def encloses(self, point: Cartesian2D) -> bool:
        """Test whether the point lies within the grid's bounding box."""
        if self._bounds is None:
            return False
        low, high = self._bounds
        return low.x <= point.x <= high.x and low.y <= point.y <= high.y

    def get(self, point: Cartesian2D) -> T | None:
        """The value at a point, or None."""
        row = self._rows.get(point.y)
        return None if row is None else row.get(point.x)

    def insert(self, point: Cartesian2D, value: T) -> None:
        """Store a value at a point unless one is already stored there."""
        self.get_or_insert_with(point, lambda: value)

    def remove(self, point: Cartesian2D) -> T | None:
        """Remove and return the value at a point, or None if there was none."""
        row = self._rows.get(point.y)
        if row is None:
            return None
        return row.pop(point.x, None)

    def update_default(
        self,
        point: Cartesian2D,
        func: Callable[[T], T],
        default: Callable[[], T] = int,  # type: ignore[assignment]
    ) -> None:
        """Replace the value at a point with func(value), starting from default()."""
        row = self._rows.setdefault(point.y, {})
        current = row[point.x] if point.x in row else default()
        row[point.x] = func(current)

    def get_or_insert_with(self, point: Cartesian2D, fill: Callable[[], T]) -> T:
        """The value at a point, storing fill() there first if it is empty."""
        row = self._rows.setdefault(point.y, {})
        if point.x not in row:
            row[point.x] = fill()
        if self._bounds is None:
            self._bounds = (point, point)
        else:
            low, high = self._bounds
            self._bounds = (point.min_unifying(low), point.max_unifying(high))
        return row[point.x]

    def items(self) -> Iterator[tuple[Cartesian2D, T]]:
        """Yield every stored (point, value), in row-major order."""
        for y in sorted(self._rows):
            row = self._rows[y]
            for x in sorted(row):
                yield Cartesian2D(x, y), row[x]

    def row(self, row: int) -> Iterator[tuple[Cartesian2D, T]]:
        """Yield the values in one row, by increasing column."""
        cells = self._rows.get(row, {})
        for x in sorted(cells):
            yield Cartesian2D(x, row), cells[x]

    def column(self, column: int) -> Iterator[tuple[Cartesian2D, T]]:
        """Yield the values in one column, by increasing row."""
        for y in sorted(self._rows):
            cells = self._rows[y]
            if column in cells:
                yield Cartesian2D(column, y), cells[column]

    def bounds_inclusive(self) -> tuple[Cartesian2D, Cartesian2D] | None:
        return self.dimensions()

    def print_cell(self, symbols: Symbols, row: int, col: int, row_abs: int, col_abs: int) -> str:
        return symbols.full if Cartesian2D(col, row) in self else symbols.empty

    def __str__(self) -> str:
        return self.render()


class SparseGrid3D(Generic[T]):
    """A three-dimensional volume storing values only at occupied points."""

    def __init__(self) -> None:
        self._planes: dict[int, SparseGrid2D[T]] = {}
        self._bounds: tuple[Cartesian3D, Cartesian3D] | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseGrid3D):
            return NotImplemented
        return self._planes == other._planes and self._bounds == other._bounds

    def __len__(self) -> int:
        return sum(len(plane) for plane in self._planes.values())

    def __contains__(self, point: object) -> bool:
        if not isinstance(point, Cartesian3D):
            return False
        z, xy = point.make_2d()
        plane = self._planes.get(z)
        return plane is not None and xy in plane

    def encloses(self, point: Cartesian3D) -> bool:
        """Test whether the point lies within the volume's bounding box."""
        if self._bounds is None:
            return False
        low, high = self._bounds
        return (
            low.x <= point.x <= high.x
            and low.y <= point.y <= high.y
            and low.z <= point.z <= high.z
        )

    def bounds_inclusive(self) -> tuple[Cartesian3D, Cartesian3D] | None:
        """The minimum and maximum corners of the volume, or None when empty."""
        return self._bounds

    def get(self, point: Cartesian3D) -> T | None:
        """The value at a point, or None."""
        z, xy = point.make_2d()
        plane = self._planes.get(z)
        return None if plane is None else plane.get(xy)

    def insert(self, point: Cartesian3D, value: T) -> None:
        """Store a value at a point unless one is already stored there."""
        self.get_or_insert_with(point, lambda: value)

    def get_or_insert_with(self, point: Cartesian3D, fill: Callable[[], T]) -> T:
        """The value at a point, storing fill() there first if it is empty."""
        z, xy = point.make_2d()
        plane = self._planes.get(z)
        if plane is None:
            plane = self._planes[z] = SparseGrid2D()
        out = plane.get_or_insert_with(xy, fill)
        if self._bounds is None:
            self._bounds = (point, point)
        else:
            low, high = self._bounds
            self._bounds = (point.min_unifying(low), point.max_unifying(high))
        return out

    def search_bfs(
        self,
        initial_search: Callable[[SparseGrid3D[T]], Iterable[Cartesian3D]],
        searcher: Callable[[Cartesian3D, SparseGrid3D[T], deque[Cartesian3D]], Any],
    ) -> None:
        """Breadth-first search within the bounding box.

        Each enclosed point is handed to the searcher at most once, along with
        the queue it may extend with further points to visit.
        """
        visited: set[Cartesian3D] = set()
        queue: deque[Cartesian3D] = deque(initial_search(self))
        while queue:
            point = queue.popleft()
            if not self.encloses(point) or point in visited:
                continue
            visited.add(point)
            searcher(point, self, queue)

    def stream_volume(self) -> Iterator[Cartesian3D]:
        """Yield every point in the bounding box, by z, then y, then x."""
        if self._bounds is None:
            return
        low, high = self._bounds
        for z in range(low.z, high.z + 1):
            for y in range(low.y, high.y + 1):
                for x in range(low.x, high.x + 1):
                    yield Cartesian3D(x, y, z)

    def items(self) -> Iterator[tuple[Cartesian3D, T]]:
        """Yield every stored (point, value), by z, then y, then x."""
        for z in sorted(self._planes):
            for point, value in self._planes[z].items():
                yield point.make_3d(z), value