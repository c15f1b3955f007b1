"""A two-way iterator over the books on a shelf."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class Book:
    name: str


@dataclass
class BookShelf:
    """A collection of books."""

    books: list[Book] = field(default_factory=list)

    def add(self, book: Book) -> None:
        """Put a book on the shelf."""
        self.books.append(book)

    def iterator(self) -> "BookIterator":
        """A new iterator positioned at the first book."""
        return BookIterator(self)

    def __iter__(self) -> Iterator[Book]:
        return iter(self.books)


class BookIterator:
    """Moves forwards and backwards over a shelf.

    ``index`` stays on the last valid book when the cursor runs off either end.
    """

    def __init__(self, shelf: BookShelf) -> None:
        self._shelf = shelf
        self._index = 0
        self._internal = 0

    @property
    def index(self) -> int:
        """The position of the current book."""
        return self._index

    @property
    def value(self) -> Book:
        """The current book."""
        return self._shelf.books[self._index]

    def has(self) -> bool:
        """Whether the cursor is on a book."""
        return 0 <= self._internal < len(self._shelf.books)

    def next(self) -> None:
        """Move to the next book."""
        self._internal += 1
        if self.has():
            self._index += 1

    def prev(self) -> None:
        """Move to the previous book."""
        self._internal -= 1
        if self.has():
            self._index -= 1

    def reset(self) -> None:
        """Move back to the first book."""
        self._index = 0
        self._internal = 0

    def end(self) -> None:
        """Move to the last book."""
        self._index = len(self._shelf.books) - 1
        self._internal = self._index