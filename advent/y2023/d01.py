"""Calibration values built from the first and last digits on each line."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from advent.puzzle import ParseError, Puzzle, written_number

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"


def _digits_and_words(line: str) -> list[int]:
    found = []
    for index, symbol in enumerate(line):
        try:
            _, number = written_number(line[index:])
        except ParseError:
            if symbol not in _DIGITS:
                continue
            number = int(symbol)
        found.append(number)
    return found


@dataclass
class Calibration(Puzzle):
    """Per-line values, reading digits only and reading spelled digits too."""

    digits_only: list[int] = field(default_factory=list)
    digits_and_words: list[int] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> tuple[str, Calibration]:
        """Read every line of the input."""
        this = cls()
        for line in text.splitlines():
            digits = [int(char) for char in line if char in _DIGITS]
            if not digits:
                logger.error("did not discover any numbers: %r", line)
                this.digits_only.append(0)
            else:
                this.digits_only.append(digits[0] * 10 + digits[-1])

            found = _digits_and_words(line)
            if not found:
                logger.error("did not discover any numbers, including spelled: %r", line)
                continue
            this.digits_and_words.append(found[0] * 10 + found[-1])
        return "", this

    def part_1(self) -> int:
        return sum(self.digits_only)

    def part_2(self) -> int:
        return sum(self.digits_and_words)