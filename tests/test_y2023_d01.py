from advent.y2023.d01 import Calibration

SAMPLE_1 = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet\n"

SAMPLE_2 = (
    "two1nine\neightwothree\nabcone2threexyz\nxtwone3four\n"
    "4nineeightseven2\nzoneight234\n7pqrstsixteen\n"
)


def test_parse_consumes_everything():
    rest, calibration = Calibration.parse(SAMPLE_1)
    assert rest == ""
    assert len(calibration.digits_only) == len(SAMPLE_1.splitlines())


def test_part_1_worked_example():
    _, calibration = Calibration.parse(SAMPLE_1)
    assert calibration.part_1() == 142


def test_part_2_worked_example():
    _, calibration = Calibration.parse(SAMPLE_2)
    assert calibration.part_2() == 281


def test_overlapping_words_both_count():
    _, calibration = Calibration.parse("twone")
    assert calibration.digits_and_words == [21]


def test_without_words_both_parts_agree():
    _, calibration = Calibration.parse(SAMPLE_1)
    assert calibration.part_2() == calibration.part_1()
    assert calibration.digits_and_words == calibration.digits_only


def test_single_digit_is_used_twice():
    _, calibration = Calibration.parse("ab7cd")
    assert calibration.digits_only == [7 * 10 + 7]


def test_line_without_numbers():
    _, calibration = Calibration.parse("abcdef")
    assert calibration.digits_only == [0]
    assert calibration.digits_and_words == []
    assert calibration.part_2() == 0


def test_words_only_line_counts_in_part_2_alone():
    _, calibration = Calibration.parse("one\n")
    assert calibration.part_1() == 0
    assert calibration.digits_and_words == [1 * 10 + 1]