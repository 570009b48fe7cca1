import pytest

from advent.puzzle import ParseError
from advent.y2023.d02 import GameSet, Record

SAMPLE = """\
Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green
"""


def test_worked_example():
    rest, games = GameSet.parse(SAMPLE)
    assert rest.strip() == ""
    assert sorted(games.games) == [1, 2, 3, 4, 5]
    assert games.part_1() == 8
    assert games.part_2() == 2286


def test_maximum_per_colour():
    _, games = GameSet.parse(SAMPLE)
    assert games.games[1] == Record(red=4, blue=6, green=2)


def test_record_parse_trims_and_overwrites():
    rest, record = Record.parse("  3 blue, 4 red, 1 blue; rest")
    assert rest == "; rest"
    assert record == Record(red=4, blue=1, green=0)


def test_game_number_out_of_range():
    with pytest.raises(ParseError):
        GameSet.parse("Game 256: 1 red\n")


def test_bad_colour():
    with pytest.raises(ParseError):
        Record.parse("3 purple")