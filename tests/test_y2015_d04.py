import hashlib

from advent.y2015.d04 import Miner


def test_parse_trims():
    rest, miner = Miner.parse("  abcdef\n")
    assert rest == ""
    assert miner.seed == "abcdef"


def test_part_1_worked_example():
    _, miner = Miner.parse("abcdef\n")
    answer = miner.part_1()
    assert answer == 609043


def test_part_1_answer_hash_has_five_zeros():
    miner = Miner("abcdef")
    answer = miner.part_1()
    digest = hashlib.md5(f"abcdef{answer}".encode()).hexdigest()
    assert digest.startswith("00000")