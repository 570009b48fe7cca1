import pytest

from advent.dense import Axis, DenseGrid2D
from advent.points import Cartesian2D
from advent.sparse import SparseGrid2D


def _grid():
    return DenseGrid2D.from_raw(Cartesian2D(2, 3), [[1, 2, 3], [4, 5, 6]])


def test_from_raw_rejects_jagged():
    with pytest.raises(ValueError):
        DenseGrid2D.from_raw(Cartesian2D.ZERO, [[1, 2], [3]])


def test_dimensions_with_origin():
    grid = _grid()
    assert grid.dimensions() == (Cartesian2D(2, 3), Cartesian2D(4, 4))
    assert grid.bounds_inclusive() == grid.dimensions()
    assert DenseGrid2D().dimensions() is None


def test_get_and_index():
    grid = _grid()
    assert grid.get(Cartesian2D(2, 3)) == 1
    assert grid[Cartesian2D(4, 4)] == 6
    assert grid.get(Cartesian2D(1, 3)) is None
    assert grid.get(Cartesian2D(5, 3)) is None
    with pytest.raises(IndexError):
        grid[Cartesian2D(0, 0)]
    with pytest.raises(IndexError):
        grid[Cartesian2D(2, 5)] = 9


def test_in_bounds():
    grid = _grid()
    assert grid.in_bounds(Cartesian2D(3, 4))
    assert not grid.in_bounds(Cartesian2D(1, 4))
    assert not grid.in_bounds(Cartesian2D(3, 5))
    assert not DenseGrid2D().in_bounds(Cartesian2D.ZERO)


def test_setitem_round_trip():
    grid = _grid()
    grid[Cartesian2D(3, 4)] = 50
    assert grid[Cartesian2D(3, 4)] == 50
    assert grid.raw_data()[1][1] == 50


def test_get_row():
    grid = _grid()
    assert grid.get_row(4) == [4, 5, 6]
    assert grid.get_row(2) is None
    assert grid.get_row(5) is None


def test_items_row_major():
    grid = _grid()
    items = list(grid.items())
    assert [v for _, v in items] == [1, 2, 3, 4, 5, 6]
    points = [p for p, _ in items]
    assert points == sorted(points)
    assert all(grid[p] == v for p, v in items)


def test_clear_and_set_origin():
    grid = _grid()
    grid.set_origin(Cartesian2D(0, 0))
    assert grid[Cartesian2D(0, 0)] == 1
    assert not grid.is_empty()
    grid.clear()
    assert grid.is_empty()
    assert grid == DenseGrid2D()


def test_from_sparse():
    sparse = SparseGrid2D.from_items(
        [(Cartesian2D(-1, 2), 7), (Cartesian2D(2, 4), 9), (Cartesian2D(0, 3), 8)]
    )
    dense = DenseGrid2D.from_sparse(sparse)
    assert dense.dimensions() == sparse.dimensions()
    for point, value in dense.items():
        expected = sparse.get(point)
        assert value == (0 if expected is None else expected)


def test_from_sparse_empty():
    assert DenseGrid2D.from_sparse(SparseGrid2D()).is_empty()


def test_render_matches_sparse():
    sparse = SparseGrid2D.from_items(
        [(Cartesian2D(0, 0), 1), (Cartesian2D(3, 2), 1), (Cartesian2D(1, 1), 1)]
    )
    dense = DenseGrid2D.from_sparse(sparse)
    assert dense.render() == sparse.render()
    assert dense.render(True) == sparse.render(True)


def test_axis():
    axis = Axis.new_inclusive(3, 1)
    assert list(axis) == [1, 2, 3]
    assert list(reversed(axis)) == [3, 2, 1]
    assert len(axis) == 3
    assert len(Axis(5, 2)) == 0
    assert list(Axis(5, 2)) == []