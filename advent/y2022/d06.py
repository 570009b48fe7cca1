"""Finding the start-of-packet marker in a datastream."""

from __future__ import annotations

from dataclasses import dataclass

from advent.puzzle import Puzzle, PuzzleError


@dataclass
class Message(Puzzle):
    """The raw datastream."""

    text: str = ""

    @classmethod
    def parse(cls, text: str) -> tuple[str, Message]:
        """Take the whole input, untrimmed."""
        return "", cls(text)

    def find_sync(self, length: int) -> int | None:
        """The position just past the first run of `length` distinct bytes."""
        data = self.text.encode()
        for start in range(len(data) - length + 1):
            if len(set(data[start:start + length])) == length:
                return start + length
        return None

    def _required(self, length: int) -> int:
        found = self.find_sync(length)
        if found is None:
            raise PuzzleError("no sync sequence found")
        return found

    def part_1(self) -> int:
        """The end of the first four-byte marker."""
        return self._required(4)

    def part_2(self) -> int:
        """The end of the first fourteen-byte marker."""
        return self._required(14)