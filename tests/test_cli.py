import pytest

from advent.cli import (
    Args,
    Data,
    Step,
    TraceFormat,
    main,
    parse_args,
    render_known_puzzles,
    solutions,
)
from advent.puzzle import PuzzleError

SAMPLE = "mjqjpqmgbljsphdztnvjfqwrcgsmlb"


@pytest.fixture
def sample_tree(tmp_path, monkeypatch):
    folder = tmp_path / "src" / "y2022" / "d06"
    folder.mkdir(parents=True)
    (folder / "sample.txt").write_text(SAMPLE)
    (folder / "input.txt").write_text("abcd")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_registry_contents():
    registry = solutions()
    assert list(registry) == [2015, 2022, 2023]
    assert list(registry[2015]) == [1, 2, 3, 4, 5, 6, 19]
    assert list(registry[2022]) == list(range(1, 9))
    assert list(registry[2023]) == [1, 2]


def test_render_known_puzzles():
    text = render_known_puzzles()
    lines = text.splitlines()
    assert lines[0] == "Known solutions are:"
    assert lines[1] == "- y2015: d01, d02, d03, d04, d05, d06, d19"
    assert lines[-1] == "Do not use the `y` or `d` prefixes when providing arguments."


def test_parse_args_defaults():
    args = parse_args(["2022", "6"])
    assert args == Args(2022, 6, Data.Sample, Step.All, TraceFormat.Plain)


def test_parse_args_options():
    args = parse_args(["2015", "1", "-d", "input", "--step", "two", "-f", "json"])
    assert (args.data, args.step, args.format) == (Data.Input, Step.Two, TraceFormat.Json)


def test_parse_args_rejects_out_of_range_day():
    with pytest.raises(SystemExit):
        parse_args(["2022", "300"])


def test_unknown_puzzle():
    with pytest.raises(PuzzleError) as info:
        Args(1999, 1).execute_program()
    assert "1999-01 has no registered solution" in str(info.value)


def test_execute_both_parts(sample_tree):
    assert Args(2022, 6).execute_program() == (7, 19)


def test_execute_one_part(sample_tree):
    assert Args(2022, 6, step=Step.One).execute_program() == (7, None)


def test_execute_input_data_failure_is_wrapped(sample_tree):
    with pytest.raises(PuzzleError) as info:
        Args(2022, 6, data=Data.Input, step=Step.Two).execute_program()
    assert "2022-06#2" in str(info.value)


def test_main_exit_codes(sample_tree):
    assert main(["2022", "6"]) == 0
    assert main(["1999", "1"]) == 1
    assert main([]) == 2


def test_main_help_lists_puzzles(capsys):
    assert main(["--help"]) == 0
    assert "Known solutions are:" in capsys.readouterr().out