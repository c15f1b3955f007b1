"""A cursor iterator over the sights of a scenic area."""

from __future__ import annotations

from typing import Iterator, Optional, Protocol


class Pot(Protocol):
    def visit(self) -> object: ...


class PotsIterator:
    """A cursor over a snapshot of the sights."""

    def __init__(self, pots: list[Pot]) -> None:
        self._pots = list(pots)
        self._count = len(self._pots)
        self._cursor = 0

    def reset(self) -> None:
        """Move the cursor back to the start."""
        self._cursor = 0

    def first_pot(self) -> Pot:
        """The first sight; IndexError if there is none."""
        return self._pots[0]

    def is_last_pot(self) -> bool:
        """Whether the cursor has moved past the last sight."""
        return self._cursor == self._count

    def next_pot(self) -> Optional[Pot]:
        """Advance the cursor and return the sight there, or None past the end."""
        self._cursor += 1
        if self.is_last_pot():
            return None
        return self._pots[self._cursor]


class ScenicArea:
    """Holds the sights; new ones may be added at any time."""

    def __init__(self) -> None:
        self._pots: list[Pot] = []

    def iterator(self) -> PotsIterator:
        """A cursor over the sights as they are now."""
        return PotsIterator(self._pots)

    def add_pot(self, *args: Pot) -> None:
        """Add sights."""
        self._pots.extend(args)

    def pots_count(self) -> int:
        """The number of sights."""
        return len(self._pots)

    def __iter__(self) -> Iterator[Pot]:
        return iter(list(self._pots))