import pytest

from advent.puzzle import ParseError, PuzzleError
from advent.y2022.d07 import Command, FsNode, Navigator

SESSION = "$ cd /\n$ ls\ndir a\n14848514 b.txt\n$ cd a\n$ ls\n29116 f"


def test_session_builds_tree():
    rest, nav = Navigator.parse(SESSION)
    assert rest == ""
    assert len(nav.script) == 6
    nav.after_parse()
    assert str(nav) == "<root>/\n  a/\n    f: 29116\n  b.txt: 14848514\n"


def test_go_up_at_root_stays_at_root():
    _, nav = Navigator.parse("$ cd /\n$ cd ..\ndir x\n")
    nav.after_parse()
    assert set(nav.fs.contents) == {"x"}
    assert nav.fs.contents["x"].is_dir


def test_missing_root_line():
    with pytest.raises(ParseError):
        Navigator.parse("$ ls\ndir a\n")


@pytest.mark.parametrize(
    "line, kind",
    [
        ("$ ls", Command.Kind.List),
        ("$ cd /", Command.Kind.Root),
        ("$ cd ..", Command.Kind.GoUp),
        ("$ cd abc", Command.Kind.GoDown),
        ("dir abc", Command.Kind.Dir),
        ("42 abc.txt", Command.Kind.File),
    ],
)
def test_command_kinds(line, kind):
    rest, command = Command.parse(line)
    assert rest == ""
    assert command.kind is kind


@pytest.mark.parametrize("line", ["$ ls", "$ cd /", "$ cd ..", "$ cd abc"])
def test_command_display_round_trip(line):
    _, command = Command.parse(line)
    assert str(command) == line


def test_file_command_fields_and_display():
    _, command = Command.parse("123 notes.txt")
    assert command.name == "notes.txt"
    assert command.size == 123
    assert str(command) == "- [txt] notes.txt: 123"
    assert str(Command.parse("dir d")[1]) == "- [dir] d"


def test_unparseable_command():
    with pytest.raises(ParseError):
        Command.parse("nonsense")


def test_dig_through_file():
    root = FsNode.mkdir()
    root.dig("/", "f", FsNode.touch(5))
    with pytest.raises(PuzzleError):
        root.dig("/f", "g", FsNode.touch(1))
    with pytest.raises(PuzzleError):
        FsNode.touch(3).dig("/", "g", FsNode.mkdir())


def test_dig_creates_intermediate_directories():
    root = FsNode.mkdir()
    root.dig("/a/b", "c", FsNode.touch(7))
    assert root.contents["a"].contents["b"].contents["c"] == FsNode.touch(7)
    assert root.render("top", 1).startswith("  top/\n")