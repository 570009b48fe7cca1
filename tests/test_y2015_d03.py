import pytest

from advent.points import Cartesian2D
from advent.puzzle import ParseError
from advent.y2015.d03 import Map, Step


def test_step_directions():
    origin = Cartesian2D.ZERO
    assert Step.North.step(origin) == Cartesian2D(0, 1)
    assert Step.South.step(origin) == Cartesian2D(0, -1)
    assert Step.East.step(origin) == Cartesian2D(1, 0)
    assert Step.West.step(origin) == Cartesian2D(-1, 0)


def test_step_parse():
    rest, step = Step.parse("^>")
    assert rest == ">"
    assert step is Step.North


def test_step_parse_rejects():
    with pytest.raises(ParseError):
        Step.parse("x")


def test_map_parse_stops_at_other_text():
    rest, route = Map.parse("^>v<\n")
    assert rest == "\n"
    assert route.steps == [Step.North, Step.East, Step.South, Step.West]


def test_map_parse_requires_a_step():
    with pytest.raises(ParseError):
        Map.parse("\n")


def test_part_1_single_step():
    _, route = Map.parse(">")
    assert route.part_1() == 2


@pytest.mark.parametrize("text", [">>>>", "^^^^^^", "<<<"])
def test_part_1_straight_line_visits_every_house(text):
    _, route = Map.parse(text)
    assert route.part_1() == len(text) + 1


def test_part_1_revisits_do_not_count_twice():
    _, once = Map.parse("^v")
    _, many = Map.parse("^v^v^v^v^v")
    assert once.part_1() == many.part_1()


def test_part_2_worked_example():
    _, route = Map.parse("^v^v^v^v^v")
    route.prepare_2()
    assert route.part_2() == 11


def test_part_2_after_part_1_is_independent():
    _, fresh = Map.parse("^>v<>>^^")
    fresh.prepare_2()
    expected = fresh.part_2()
    _, reused = Map.parse("^>v<>>^^")
    reused.part_1()
    reused.prepare_2()
    assert reused.part_2() == expected


def test_part_2_bounded_by_steps():
    _, route = Map.parse("^>v<^^>>vv<<")
    route.prepare_2()
    assert 1 <= route.part_2() <= len(route.steps) + 1