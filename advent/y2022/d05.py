"""Rearranging stacks of crates with a crane."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from advent.puzzle import ParseError, Puzzle, PuzzleError

logger = logging.getLogger(__name__)

_MOVE = re.compile(r"move ([0-9]+) from ([0-9]+) to ([0-9]+)")
_IDENT = re.compile(r" ([0-9]+) ")
_U32_MAX = 0xFFFFFFFF


@dataclass(frozen=True, order=True)
class Crate:
    """A crate marked with a single character."""

    ident: str

    @classmethod
    def parse(cls, text: str) -> tuple[str, Crate]:
        """Parse "[X]"."""
        if len(text) < 3 or text[0] != "[" or text[2] != "]":
            raise ParseError(f"expected a crate at {text[:16]!r}")
        return text[3:], cls(text[1])

    def __str__(self) -> str:
        return f"[{self.ident}]"


@dataclass(frozen=True, order=True)
class Move:
    """Move cnt crates from column src to column dst."""

    cnt: int
    src: int
    dst: int

    @classmethod
    def parse(cls, text: str) -> tuple[str, Move]:
        """Parse "move N from S to D"."""
        match = _MOVE.match(text)
        if match is None:
            raise ParseError(f"expected a move at {text[:24]!r}")
        cnt, src, dst = (int(group) for group in match.groups())
        if max(cnt, src, dst) > _U32_MAX:
            raise ParseError(f"number out of range in {match.group()!r}")
        return text[match.end():], cls(cnt, src, dst)


def _cell(text: str) -> tuple[str, Crate | None]:
    if text.startswith("   "):
        return text[3:], None
    return Crate.parse(text)


def _separated(text: str, item):
    """Parse one or more items separated by single spaces."""
    rest, first = item(text)
    items = [first]
    while rest.startswith(" "):
        try:
            after, value = item(rest[1:])
        except ParseError:
            break
        items.append(value)
        rest = after
    return rest, items


def _newline(text: str) -> str:
    if not text.startswith("\n"):
        raise ParseError(f"expected a newline at {text[:16]!r}")
    return text[1:]


def _crate_row(text: str) -> tuple[str, list[Crate | None]]:
    rest, cells = _separated(text, _cell)
    return _newline(rest), cells


def _ident(text: str) -> tuple[str, int]:
    match = _IDENT.match(text)
    if match is None or int(match.group(1)) > _U32_MAX:
        raise ParseError(f"expected a column number at {text[:16]!r}")
    return text[match.end():], int(match.group(1))


def _top_crates(pile: dict[int, list[Crate]]) -> str:
    return "".join(stack[-1].ident for stack in pile.values() if stack)


@dataclass
class Dockyard(Puzzle):
    """Stacks of crates keyed by column, the crane's moves and the last answer."""

    pile: dict[int, list[Crate]] = field(default_factory=dict)
    moves: list[Move] = field(default_factory=list)
    answer: str = ""

    @classmethod
    def parse(cls, text: str) -> tuple[str, Dockyard]:
        """Parse the crate diagram, its column numbers, a blank line and the moves."""
        rest, row = _crate_row(text)
        rows = [row]
        while True:
            try:
                rest, row = _crate_row(rest)
            except ParseError:
                break
            rows.append(row)

        rest, idents = _separated(rest, _ident)
        rest = _newline(rest)

        pile: dict[int, list[Crate]] = {}
        for row in reversed(rows):
            for crate, column in zip(row, idents):
                if crate is not None:
                    pile.setdefault(column, []).append(crate)
        pile = dict(sorted(pile.items()))

        rest = _newline(rest)
        rest, first = Move.parse(rest)
        moves = [first]
        while rest.startswith("\n"):
            try:
                after, move = Move.parse(rest[1:])
            except ParseError:
                break
            moves.append(move)
            rest = after
        return rest, cls(pile, moves)

    def _copy_pile(self) -> dict[int, list[Crate]]:
        return {column: list(stack) for column, stack in self.pile.items()}

    def run_singly(self) -> None:
        """Apply the moves one crate at a time, recording the top crates."""
        pile = self._copy_pile()
        for move in self.moves:
            for _ in range(move.cnt):
                source = pile.get(move.src)
                if source is None:
                    raise PuzzleError(f"no such source column {move.src}")
                if not source:
                    raise PuzzleError("cannot pull from an empty column")
                crate = source.pop()
                destination = pile.get(move.dst)
                if destination is None:
                    raise PuzzleError(f"no such destination column {move.dst}")
                destination.append(crate)
        self.answer = _top_crates(pile)

    def run_multi(self) -> None:
        """Apply the moves several crates at a time, keeping their order."""
        pile = self._copy_pile()
        for move in self.moves:
            source = pile.get(move.src)
            if source is None:
                raise PuzzleError(f"no such source column {move.src}")
            if move.cnt > len(source):
                raise PuzzleError(
                    f"cannot move {move.cnt} items from stack {move.src} (size {len(source)})"
                )
            mid = len(source) - move.cnt
            lifted = source[mid:]
            del source[mid:]
            destination = pile.get(move.dst)
            if destination is None:
                raise PuzzleError(f"no such destination column {move.dst}")
            destination.extend(lifted)
        self.answer = _top_crates(pile)

    def prepare_1(self) -> None:
        logger.debug("parsed\n%s", self)
        self.run_singly()
        logger.info("top crates: %s", self.answer)

    def part_1(self) -> int:
        """The answer is the text left in answer; the number is always zero."""
        return 0

    def prepare_2(self) -> None:
        self.run_multi()
        logger.info("top crates: %s", self.answer)

    def part_2(self) -> int:
        """The answer is the text left in answer; the number is always zero."""
        return 0

    def __str__(self) -> str:
        highest = max((len(stack) for stack in self.pile.values()), default=0)
        lines = []
        for level in reversed(range(highest)):
            cells = (
                str(stack[level]) if level < len(stack) else "   "
                for stack in self.pile.values()
            )
            lines.append(" ".join(cells).rstrip())
        lines.append(" ".join(f" {column} " for column in self.pile).rstrip())
        return "".join(line + "\n" for line in lines)