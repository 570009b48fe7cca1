"""Scoring a strategy guide for rock, paper, scissors."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field

from advent.puzzle import ParseError, Puzzle

_SPACE = re.compile(r"[ \t]+")


class Action(enum.Enum):
    """A hand shape, valued by the score it earns."""

    Rock = 1
    Paper = 2
    Scissors = 3

    @classmethod
    def parse(cls, text: str) -> tuple[str, Action]:
        """Parse one of A, B, C, X, Y or Z."""
        action = _ACTION_SYMBOLS.get(text[:1])
        if action is None:
            raise ParseError(f"expected an action at {text[:16]!r}")
        return text[1:], action

    def __mul__(self, other: Action) -> Outcome:
        """The outcome for self when played against other."""
        if not isinstance(other, Action):
            return NotImplemented
        if _BEATS[self] is other:
            return Outcome.Win
        if _BEATS[other] is self:
            return Outcome.Loss
        return Outcome.Draw

    def __add__(self, outcome: Outcome) -> int:
        """The round's score: this shape's value plus the outcome's."""
        if not isinstance(outcome, Outcome):
            return NotImplemented
        return self.value + outcome.value


class Outcome(enum.Enum):
    """The result of a round, valued by the score it earns."""

    Win = 6
    Draw = 3
    Loss = 0

    @classmethod
    def parse(cls, text: str) -> tuple[str, Outcome]:
        """Parse X (loss), Y (draw) or Z (win)."""
        outcome = _OUTCOME_SYMBOLS.get(text[:1])
        if outcome is None:
            raise ParseError(f"expected an outcome at {text[:16]!r}")
        return text[1:], outcome

    @classmethod
    def from_action(cls, action: Action) -> Outcome:
        """Reinterpret the second column: rock is a loss, paper a draw, scissors a win."""
        return {
            Action.Rock: cls.Loss,
            Action.Paper: cls.Draw,
            Action.Scissors: cls.Win,
        }[action]

    def __truediv__(self, action: Action) -> Action:
        """The shape to play against action to reach this outcome."""
        if not isinstance(action, Action):
            return NotImplemented
        if self is Outcome.Draw:
            return action
        if self is Outcome.Loss:
            return _BEATS[action]
        return next(winner for winner, loser in _BEATS.items() if loser is action)


_BEATS = {
    Action.Rock: Action.Scissors,
    Action.Paper: Action.Rock,
    Action.Scissors: Action.Paper,
}

_ACTION_SYMBOLS = {
    "A": Action.Rock,
    "X": Action.Rock,
    "B": Action.Paper,
    "Y": Action.Paper,
    "C": Action.Scissors,
    "Z": Action.Scissors,
}

_OUTCOME_SYMBOLS = {"X": Outcome.Loss, "Y": Outcome.Draw, "Z": Outcome.Win}


def _pair(text: str) -> tuple[str, tuple[Action, Action]]:
    rest, them = Action.parse(text)
    space = _SPACE.match(rest)
    if space is None:
        raise ParseError(f"expected whitespace at {rest[:16]!r}")
    rest, you = Action.parse(rest[space.end():])
    return rest, (them, you)


@dataclass
class RockPaperScissors(Puzzle):
    """A strategy guide, read either as moves or as desired outcomes."""

    pt1: list[tuple[Action, Action]] = field(default_factory=list)
    pt2: list[tuple[Action, Outcome]] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> tuple[str, RockPaperScissors]:
        """Parse one "<them> <you>" pair per line."""
        rest, first = _pair(text)
        rounds = [first]
        while rest.startswith("\n"):
            try:
                after, pair = _pair(rest[1:])
            except ParseError:
                break
            rounds.append(pair)
            rest = after
        return rest, cls(rounds)

    def part_1(self) -> int:
        """The total score when the second column is your move."""
        return sum(you + you * them for them, you in self.pt1)

    def prepare_2(self) -> None:
        """Move the guide over to the outcome reading, emptying the move reading."""
        self.pt2 = [(them, Outcome.from_action(b)) for them, b in self.pt1]
        self.pt1 = []

    def part_2(self) -> int:
        """The total score when the second column is the desired outcome."""
        return sum((res / them) + res for them, res in self.pt2)