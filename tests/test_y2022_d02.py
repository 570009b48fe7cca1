import pytest

from advent.puzzle import ParseError
from advent.y2022.d02 import Action, Outcome, RockPaperScissors

SAMPLE = "A Y\nB X\nC Z\n"


def test_sample_part_1():
    rest, puzzle = RockPaperScissors.parse(SAMPLE)
    assert rest == "\n"
    assert puzzle.part_1() == 15


def test_sample_part_2():
    _, puzzle = RockPaperScissors.parse(SAMPLE)
    puzzle.prepare_2()
    assert puzzle.part_2() == 12


def test_prepare_2_consumes_moves():
    _, puzzle = RockPaperScissors.parse(SAMPLE)
    puzzle.prepare_2()
    assert puzzle.pt1 == []
    assert [outcome for _, outcome in puzzle.pt2] == [Outcome.Draw, Outcome.Loss, Outcome.Win]


def test_parse_reads_both_columns():
    _, puzzle = RockPaperScissors.parse("A\tZ")
    assert puzzle.pt1 == [(Action.Rock, Action.Scissors)]


def test_action_symbols():
    assert Action.parse("Bx") == ("x", Action.Paper)
    assert Action.parse("Z") == ("", Action.Scissors)


def test_outcome_symbols():
    assert Outcome.parse("X") == ("", Outcome.Loss)
    assert Outcome.parse("Y") == ("", Outcome.Draw)
    assert Outcome.parse("Z") == ("", Outcome.Win)


def test_bad_symbol_rejected():
    with pytest.raises(ParseError):
        RockPaperScissors.parse("D X")


def test_missing_space_rejected():
    with pytest.raises(ParseError):
        RockPaperScissors.parse("AX")


def test_multiplication_rules():
    assert Action.__mul__(Action.Rock, Action.Scissors) is Outcome.Win
    assert Action.__mul__(Action.Rock, Action.Paper) is Outcome.Loss
    assert Action.__mul__(Action.Paper, Action.Paper) is Outcome.Draw


@pytest.mark.parametrize("one", list(Action))
@pytest.mark.parametrize("two", list(Action))
def test_multiplication_is_antisymmetric(one, two):
    forward = Action.__mul__(one, two)
    backward = Action.__mul__(two, one)
    if forward is Outcome.Win:
        assert backward is Outcome.Loss
    elif forward is Outcome.Loss:
        assert backward is Outcome.Win
    else:
        assert backward is Outcome.Draw and one is two


@pytest.mark.parametrize("outcome", list(Outcome))
@pytest.mark.parametrize("action", list(Action))
def test_division_inverts_multiplication(outcome, action):
    needed = Outcome.__truediv__(outcome, action)
    assert Action.__mul__(needed, action) is outcome


def test_from_action():
    assert Outcome.from_action(Action.Rock) is Outcome.Loss
    assert Outcome.from_action(Action.Paper) is Outcome.Draw
    assert Outcome.from_action(Action.Scissors) is Outcome.Win