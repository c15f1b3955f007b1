"""An iterator over a container of visitors."""

from __future__ import annotations

from typing import Protocol


class Visitor(Protocol):
    def visit(self) -> object: ...


class Teacher:
    def visit(self) -> str:
        text = "this is teacher visitor"
        print(text)
        return text


class Analysis:
    def visit(self) -> str:
        text = "this is analysis visitor"
        print(text)
        return text


class VisitorIterator:
    """Holds visitors and walks through them once."""

    def __init__(self) -> None:
        self._visitors: list[Visitor] = []
        self._index = 0

    def add(self, visitor: Visitor) -> None:
        """Add a visitor at the end."""
        self._visitors.append(visitor)

    def remove(self, index: int) -> None:
        """Remove the visitor at ``index``; out-of-range indexes are ignored."""
        if 0 <= index < len(self._visitors):
            del self._visitors[index]

    def has_next(self) -> bool:
        """Whether a visitor remains."""
        return self._index < len(self._visitors)

    def next(self) -> Visitor:
        """Return the next visitor; IndexError when there is none."""
        print(self._index)
        visitor = self._visitors[self._index]
        self._index += 1
        return visitor

    def __len__(self) -> int:
        return len(self._visitors)


def new_iterator() -> VisitorIterator:
    """An empty iterator."""
    return VisitorIterator()