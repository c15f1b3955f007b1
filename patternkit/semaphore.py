"""A counting semaphore whose acquire and release give up after a timeout."""

from __future__ import annotations

import threading
from types import TracebackType
from typing import Optional


class NoTicketsError(Exception):
    """No ticket could be acquired within the timeout."""

    def __init__(self) -> None:
        super().__init__("could not acquire semaphore ticket")


class IllegalReleaseError(Exception):
    """No ticket was held to release within the timeout."""

    def __init__(self) -> None:
        super().__init__("can't release the semaphore without acquiring it first")


class Semaphore:
    """A semaphore with ``tickets`` slots and a timeout in seconds."""

    def __init__(self, tickets: int, timeout: float) -> None:
        if tickets < 0:
            raise ValueError("tickets must not be negative")
        self._tickets = tickets
        self._timeout = timeout
        self._held = 0
        self._cond = threading.Condition()

    def acquire(self) -> None:
        """Take a ticket, raising NoTicketsError if none frees up in time."""
        with self._cond:
            if not self._cond.wait_for(lambda: self._held < self._tickets, timeout=self._timeout):
                raise NoTicketsError()
            self._held += 1
            self._cond.notify_all()

    def release(self) -> None:
        """Return a ticket, raising IllegalReleaseError if none is held in time."""
        with self._cond:
            if not self._cond.wait_for(lambda: self._held > 0, timeout=self._timeout):
                raise IllegalReleaseError()
            self._held -= 1
            self._cond.notify_all()

    def is_empty(self) -> bool:
        """Whether no tickets are held at this instant."""
        with self._cond:
            return self._held == 0

    def __enter__(self) -> "Semaphore":
        self.acquire()
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.release()