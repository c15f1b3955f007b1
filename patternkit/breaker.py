"""A circuit breaker that opens on errors and half-closes after a timeout."""

from __future__ import annotations

import threading
import time
from enum import Enum
from typing import Any, Callable


class BreakerOpenError(Exception):
    """The work was not run because the breaker is open."""

    def __init__(self) -> None:
        super().__init__("circuit breaker is open")


class _State(Enum):
    CLOSED = 0
    OPEN = 1
    HALF_OPEN = 2


class Breaker:
    """The circuit-breaker resiliency pattern.

    From closed, the breaker opens after ``error_threshold`` errors without an
    error-free period of at least ``timeout`` seconds. From open, it half-closes
    after ``timeout``. From half-open, it closes after ``success_threshold``
    consecutive successes, or opens on a single error. Work signals an error by
    raising.
    """

    def __init__(self, error_threshold: int, success_threshold: int, timeout: float) -> None:
        self._error_threshold = error_threshold
        self._success_threshold = success_threshold
        self._timeout = timeout
        self._lock = threading.Lock()
        self._state = _State.CLOSED
        self._errors = 0
        self._successes = 0
        self._last_error = 0.0

    def run(self, work: Callable[[], Any]) -> Any:
        """Run ``work`` and return its result, or raise BreakerOpenError."""
        state = self._state
        if state is _State.OPEN:
            raise BreakerOpenError()
        return self._do_work(state, work)

    def go(self, work: Callable[[], Any]) -> threading.Thread:
        """Run ``work`` in a background thread, or raise BreakerOpenError.

        The outcome of the work only feeds the breaker; the started thread is
        returned so the caller may wait for it.
        """
        state = self._state
        if state is _State.OPEN:
            raise BreakerOpenError()
        thread = threading.Thread(target=self._run_detached, args=(state, work), daemon=True)
        thread.start()
        return thread

    def _run_detached(self, state: _State, work: Callable[[], Any]) -> None:
        try:
            self._do_work(state, work)
        except Exception:
            pass

    def _do_work(self, state: _State, work: Callable[[], Any]) -> Any:
        try:
            result = work()
        except BaseException:
            self._process_result(False)
            raise
        if state is not _State.CLOSED:
            self._process_result(True)
        return result

    def _process_result(self, success: bool) -> None:
        with self._lock:
            if success:
                if self._state is _State.HALF_OPEN:
                    self._successes += 1
                    if self._successes == self._success_threshold:
                        self._change_state(_State.CLOSED)
                return

            now = time.monotonic()
            if self._errors > 0 and now > self._last_error + self._timeout:
                self._errors = 0

            if self._state is _State.CLOSED:
                self._errors += 1
                if self._errors == self._error_threshold:
                    self._open_breaker()
                else:
                    self._last_error = now
            elif self._state is _State.HALF_OPEN:
                self._open_breaker()

    def _open_breaker(self) -> None:
        self._change_state(_State.OPEN)
        timer = threading.Timer(self._timeout, self._half_open)
        timer.daemon = True
        timer.start()

    def _half_open(self) -> None:
        with self._lock:
            self._change_state(_State.HALF_OPEN)

    def _change_state(self, state: _State) -> None:
        self._errors = 0
        self._successes = 0
        self._state = state