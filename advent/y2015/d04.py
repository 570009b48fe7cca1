"""Mining for MD5 hashes with leading zeros."""

from __future__ import annotations

import hashlib
import itertools
import logging
from dataclasses import dataclass

from advent.puzzle import Puzzle

logger = logging.getLogger(__name__)


@dataclass
class Miner(Puzzle):
    """A secret key to which counters are appended and hashed."""

    seed: str = ""

    @classmethod
    def parse(cls, text: str) -> tuple[str, Miner]:
        """Take the whole input, trimmed, as the seed."""
        return "", cls(text.strip())

    def _search(self, found) -> int:
        base = hashlib.md5(self.seed.encode())
        for count in itertools.count(1):
            if count % 1000 == 0:
                logger.debug("round %d", count)
            hasher = base.copy()
            hasher.update(str(count).encode())
            if found(hasher.digest()):
                return count
        raise AssertionError("unreachable")

    def part_1(self) -> int:
        """The lowest counter whose hash starts with five zero hex digits."""
        return self._search(lambda digest: digest[:2] == b"\0\0" and digest[2] & 0xF0 == 0)

    def part_2(self) -> int:
        """The lowest counter whose hash starts with six zero hex digits."""
        return self._search(lambda digest: digest[:3] == b"\0\0\0")