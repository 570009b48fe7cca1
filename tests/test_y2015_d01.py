import pytest

from advent.puzzle import ParseError, PuzzleError
from advent.y2015.d01 import Elevator


def test_parse_consumes_line():
    rest, elevator = Elevator.parse("(()\n")
    assert rest == ""
    assert elevator.sequence == "(()"


def test_parse_leaves_rest():
    rest, elevator = Elevator.parse("()\nextra")
    assert rest == "extra"
    assert elevator.sequence == "()"


@pytest.mark.parametrize("text", ["", "(()", "abc\n", "\n"])
def test_parse_rejects_bad_input(text):
    with pytest.raises(ParseError):
        Elevator.parse(text)


@pytest.mark.parametrize("count", [1, 4, 9])
def test_part_1_counts_up(count):
    _, elevator = Elevator.parse("(" * count + "\n")
    assert elevator.part_1() == count


def test_part_1_balanced_returns_ground():
    _, elevator = Elevator.parse("(())()\n")
    assert elevator.part_1() == 0


def test_part_1_down_is_negative():
    _, up = Elevator.parse("(((\n")
    _, down = Elevator.parse(")))\n")
    assert down.part_1() == -up.part_1()


def test_part_1_empty_sequence_fails():
    with pytest.raises(PuzzleError):
        Elevator("").part_1()


@pytest.mark.parametrize("depth", [0, 2, 5])
def test_part_2_finds_first_basement_entry(depth):
    sequence = "(" * depth + ")" * (depth + 1)
    _, elevator = Elevator.parse(sequence + "()\n")
    assert elevator.part_2() == len(sequence)


def test_part_2_never_reaching_basement_fails():
    _, elevator = Elevator.parse("(()\n")
    with pytest.raises(PuzzleError):
        elevator.part_2()


def test_unexpected_characters_are_ignored():
    assert Elevator("(x(").part_1() == Elevator("((").part_1()