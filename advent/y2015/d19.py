"""Molecule replacements: counting the distinct molecules one step away."""

from __future__ import annotations

import re
from dataclasses import dataclass

from advent.dictionary import Dictionary
from advent.puzzle import ParseError, Puzzle

_RULE = re.compile(r"([A-Za-z]+) => ([A-Za-z]+)")
_SEED = re.compile(r"[A-Za-z0-9]+")


@dataclass(frozen=True, order=True)
class Rule:
    """A replacement of one substring by another."""

    pattern: str = ""
    replacement: str = ""

    @classmethod
    def parse(cls, text: str) -> tuple[str, Rule]:
        """Parse "From => Into"."""
        match = _RULE.match(text)
        if match is None:
            raise ParseError(f"expected a replacement rule at {text[:16]!r}")
        return text[match.end():], cls(match.group(1), match.group(2))


class Synth(Puzzle):
    """Replacement rules, a starting molecule and the products found so far."""

    def __init__(self, rules: list[Rule], seed: str) -> None:
        self.rules = rules
        self.seed = seed
        self.products: Dictionary[str] = Dictionary()

    @classmethod
    def parse(cls, text: str) -> tuple[str, Synth]:
        """Parse rules, one per line, then the molecule after any whitespace."""
        rest, first = Rule.parse(text)
        rules = [first]
        while rest.startswith("\n"):
            try:
                after, rule = Rule.parse(rest[1:])
            except ParseError:
                break
            rules.append(rule)
            rest = after
        rest = rest.lstrip()
        match = _SEED.match(rest)
        if match is None:
            raise ParseError(f"expected a molecule at {rest[:16]!r}")
        return rest[match.end():], cls(rules, match.group())

    def prepare_1(self) -> None:
        """Record every molecule made by applying one rule at one place."""
        for rule in self.rules:
            start = self.seed.find(rule.pattern)
            while start != -1:
                end = start + len(rule.pattern)
                self.products.insert(self.seed[:start] + rule.replacement + self.seed[end:])
                start = self.seed.find(rule.pattern, end)

    def part_1(self) -> int:
        """How many distinct molecules have been recorded."""
        return len(self.products)