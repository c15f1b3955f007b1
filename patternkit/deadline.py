"""Running work with a deadline."""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional


class TimedOutError(Exception):
    """The work did not finish before the deadline."""

    def __init__(self) -> None:
        super().__init__("timed out waiting for function to finish")


class _Stopper:
    """Handed to work: lets it cancel itself and tells it when time is up."""

    def __init__(self) -> None:
        self._expired = threading.Event()
        self._lock = threading.Lock()
        self._error: Optional[BaseException] = None

    def stop(self, error: BaseException) -> None:
        """Ask the run to finish with ``error``; only the first request counts."""
        with self._lock:
            if self._error is None:
                self._error = error

    @property
    def error(self) -> Optional[BaseException]:
        with self._lock:
            return self._error

    @property
    def expired(self) -> bool:
        """Whether the deadline has passed."""
        return self._expired.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Wait until the deadline passes; return whether it did."""
        return self._expired.wait(timeout)

    def _expire(self) -> None:
        self._expired.set()


class Worker:
    """Runs work that must finish within ``timeout`` seconds."""

    def __init__(self, timeout: float, action: str) -> None:
        self.timeout = timeout
        self.action = action

    def run(self, work: Callable[[_Stopper], Any]) -> Any:
        """Run ``work(stopper)`` and return its result.

        Raises TimedOutError if the deadline passes first; the work is not
        killed but its stopper reports ``expired``. If the work called
        ``stopper.stop(error)``, that error is raised.
        """
        stopper = _Stopper()
        finished = threading.Event()
        outcome: dict[str, Any] = {}

        def target() -> None:
            try:
                outcome["value"] = work(stopper)
            except BaseException as exc:
                outcome["error"] = exc
            finally:
                finished.set()

        threading.Thread(target=target, daemon=True).start()

        if not finished.wait(self.timeout):
            stopper._expire()
            raise TimedOutError()

        stop_error = stopper.error
        if stop_error is not None:
            raise stop_error
        if "error" in outcome:
            raise outcome["error"]
        return outcome.get("value")