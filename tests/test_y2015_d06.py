import pytest

from advent.puzzle import ParseError, PuzzleError
from advent.y2015.d06 import DIMENSION, Instruction, LightGrid, Opcode


def _run(text):
    _, grid = LightGrid.parse(text)
    grid.prepare_1()
    one = grid.part_1()
    grid.prepare_2()
    return one, grid.part_2()


def test_instruction_parse():
    rest, insn = Instruction.parse("turn off 3,4 through 7,9\nnext")
    assert rest == "\nnext"
    assert insn == Instruction(range(3, 8), range(4, 10), Opcode.Off)


@pytest.mark.parametrize("text, op", [
    ("turn on 0,0 through 1,1", Opcode.On),
    ("toggle 0,0 through 1,1", Opcode.Toggle),
    ("turn off 0,0 through 1,1", Opcode.Off),
])
def test_instruction_opcodes(text, op):
    assert Instruction.parse(text)[1].insn is op


@pytest.mark.parametrize("text", [
    "switch on 0,0 through 1,1",
    "turn on 0,0 to 1,1",
    "turn on 70000,0 through 1,1",
    "",
])
def test_instruction_parse_rejects(text):
    with pytest.raises(ParseError):
        Instruction.parse(text)


def test_grid_parse_keeps_trailing_newline():
    rest, grid = LightGrid.parse("turn on 0,0 through 1,1\ntoggle 0,0 through 0,0\n")
    assert rest == "\n"
    assert len(grid.steps) == 2


def test_whole_grid_on():
    one, two = _run(f"turn on 0,0 through {DIMENSION - 1},{DIMENSION - 1}")
    assert one == DIMENSION * DIMENSION
    assert two == DIMENSION * DIMENSION


def test_toggle_twice_restores():
    one, two = _run("toggle 10,10 through 20,20\ntoggle 10,10 through 20,20")
    assert one == 0
    assert two == 4 * len(range(10, 21)) ** 2


def test_toggle_doubles_brightness():
    one, two = _run("toggle 0,0 through 999,0")
    assert two == 2 * one


def test_on_then_off_is_dark():
    one, two = _run("turn on 5,5 through 50,60\nturn off 5,5 through 50,60")
    assert one == 0
    assert two == 0


def test_turn_off_saturates_at_zero():
    one, two = _run("turn off 0,0 through 999,999\nturn on 0,0 through 0,0")
    assert one == 1
    assert two == 1


def test_unprepared_grid_is_dark():
    _, grid = LightGrid.parse("turn on 0,0 through 999,999")
    assert grid.part_1() == 0


def test_wrong_grid_kind_fails():
    _, grid = LightGrid.parse("turn on 0,0 through 1,1")
    grid.prepare_2()
    with pytest.raises(PuzzleError):
        grid.part_1()
    grid.prepare_1()
    with pytest.raises(PuzzleError):
        grid.part_2()


def test_columns_outside_grid_fail():
    _, grid = LightGrid.parse("turn on 0,0 through 1500,1")
    with pytest.raises(PuzzleError):
        grid.prepare_1()