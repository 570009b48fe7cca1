"""A de-duplicating dictionary that hands out opaque identifiers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, Iterator, TypeVar

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True, order=True)
class Identifier:
    """An opaque identifier produced by a dictionary."""

    ident: int

    def __str__(self) -> str:
        return str(self.ident)


class Dictionary(Generic[T]):
    """Stores each distinct value once, mapping it both ways to an Identifier.

    Identifiers are handed out in insertion order, starting at zero. An
    identifier from one dictionary is not guaranteed to mean anything in
    another.
    """

    def __init__(self) -> None:
        self._cached: dict[T, int] = {}
        self._idents: dict[int, T] = {}

    def __len__(self) -> int:
        return len(self._cached)

    def __contains__(self, value: object) -> bool:
        try:
            return value in self._cached
        except TypeError:
            return False

    def __getitem__(self, ident: Identifier) -> T:
        return self._idents[ident.ident]

    def __repr__(self) -> str:
        entries = ", ".join(f"{ident}: {value!r}" for ident, value in self._idents.items())
        return "{" + entries + "}"

    def insert(self, value: T) -> Identifier:
        """Store a value, returning its identifier (the existing one if already stored)."""
        existing = self._cached.get(value)
        if existing is not None:
            return Identifier(existing)
        next_ident = len(self)
        self._cached[value] = next_ident
        self._idents[next_ident] = value
        return Identifier(next_ident)

    def lookup(self, ident: Identifier) -> T | None:
        """Return the value named by an identifier, or None."""
        return self._idents.get(ident.ident)

    def lookup_value(self, value: T) -> Identifier | None:
        """Return the identifier of a stored value, or None."""
        found = self._cached.get(value)
        return None if found is None else Identifier(found)

    def contains_key(self, ident: Identifier) -> bool:
        """Test whether an identifier names a stored value."""
        return ident.ident in self._idents

    def identifiers(self) -> Iterator[Identifier]:
        """Yield every identifier in ascending order."""
        for ident in sorted(self._idents):
            yield Identifier(ident)

    def copy(self) -> Dictionary[T]:
        """Return an independent copy sharing the stored values."""
        other: Dictionary[T] = Dictionary()
        other._cached = dict(self._cached)
        other._idents = dict(self._idents)
        return other