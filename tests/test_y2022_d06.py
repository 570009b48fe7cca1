import pytest

from advent.puzzle import PuzzleError
from advent.y2022.d06 import Message

SAMPLE = "mjqjpqmgbljsphdztnvjfqwrcgsmlb"


def test_parse_takes_everything():
    rest, message = Message.parse(SAMPLE + "\n")
    assert rest == ""
    assert message.text == SAMPLE + "\n"


def test_worked_example():
    _, message = Message.parse(SAMPLE)
    assert message.part_1() == 7
    assert message.part_2() == 19


@pytest.mark.parametrize("length", [1, 2, 4, 14])
def test_marker_is_distinct_and_first(length):
    message = Message(SAMPLE)
    end = message.find_sync(length)
    assert end >= length
    assert len(set(SAMPLE[end - length:end])) == length
    for earlier in range(length, end):
        assert len(set(SAMPLE[earlier - length:earlier])) < length


def test_no_marker():
    message = Message("aaaaaaaa")
    assert message.find_sync(4) is None
    with pytest.raises(PuzzleError):
        message.part_1()


def test_too_short_for_part_2():
    message = Message("abcd")
    assert message.part_1() == message.find_sync(4)
    with pytest.raises(PuzzleError):
        message.part_2()