"""Sorting strings into naughty and nice."""

from __future__ import annotations

from dataclasses import dataclass

from advent.puzzle import Puzzle

_FORBIDDEN = frozenset({"ab", "cd", "pq", "xy"})


def is_ascii_vowel(char: str) -> bool:
    """Test whether a single character is a lower-case ASCII vowel."""
    return len(char) == 1 and char in "aeiou"


def _pairs(line: str):
    return (a + b for a, b in zip(line, line[1:]))


def _nice_1(line: str) -> bool:
    vowels = sum(1 for char in line if is_ascii_vowel(char))
    paired = any(a == b for a, b in zip(line, line[1:]))
    allowed = not any(pair in _FORBIDDEN for pair in _pairs(line))
    return vowels >= 3 and paired and allowed


def _has_split_repeat(line: str) -> bool:
    return any(a == c for a, c in zip(line, line[2:]))


def _has_repeated_pair(line: str) -> bool:
    seen: dict[str, list[int]] = {}
    for position, pair in enumerate(_pairs(line)):
        slot = seen.setdefault(pair, [])
        if slot and slot[-1] == position - 1:
            continue
        slot.append(position)
    return any(len(positions) > 1 for positions in seen.values())


@dataclass
class NaughtyList(Puzzle):
    """A list of strings, one per line."""

    source: str = ""

    @classmethod
    def parse(cls, text: str) -> tuple[str, NaughtyList]:
        """Take the whole input, trimmed."""
        return "", cls(text.strip())

    def part_1(self) -> int:
        """Strings with three vowels, a doubled letter and no forbidden pair."""
        return sum(1 for line in self.source.splitlines() if _nice_1(line))

    def part_2(self) -> int:
        """Strings with a letter repeated one apart and a non-overlapping repeated pair."""
        return sum(
            1
            for line in self.source.splitlines()
            if _has_split_repeat(line) and _has_repeated_pair(line)
        )