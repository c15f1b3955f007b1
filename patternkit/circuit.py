"""An options-driven request breaker and a simple function-wrapping breaker."""

from __future__ import annotations

import dataclasses
import threading
import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Optional

DEFAULT_EXPIRY = 20.0
DEFAULT_INTERVAL = 10.0
DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_REQUESTS = 5
RETRY_BASE_DELAY = 1.0


class State(IntEnum):
    """The state of a breaker."""

    CLOSED = 0
    HALF_OPEN = 1
    OPEN = 2
    UNKNOWN = 3


class OperationState(IntEnum):
    """The outcome of a single operation."""

    UNKNOWN = 0
    FAILURE = 1
    SUCCESS = 2


class TooManyRequestsError(Exception):
    """The breaker is open and rejects the request."""

    def __init__(self) -> None:
        super().__init__("too many requests")


class ServiceUnavailableError(Exception):
    """The wrapped circuit failed too often and is resting."""

    def __init__(self) -> None:
        super().__init__("service unavailable")


@dataclass
class Counters:
    """Request counts that a breaker bases its decisions on."""

    requests: int = 0
    total_failures: int = 0
    total_successes: int = 0
    consecutive_successes: int = 0
    consecutive_failures: int = 0
    last_activity: Optional[float] = None

    def count(self, state: OperationState, consecutive: bool) -> None:
        """Record one operation; ``consecutive`` continues the current streak."""
        if state is OperationState.FAILURE:
            self.total_failures += 1
            self.consecutive_failures = self.consecutive_failures + 1 if consecutive else 1
        elif state is OperationState.SUCCESS:
            self.total_successes += 1
            self.consecutive_successes = self.consecutive_successes + 1 if consecutive else 1
        self.requests += 1
        self.last_activity = time.time()

    def reset(self) -> None:
        """Zero every count, keeping the time of the last activity."""
        self.requests = 0
        self.total_failures = 0
        self.total_successes = 0
        self.consecutive_successes = 0
        self.consecutive_failures = 0

    def total(self) -> int:
        """The number of requests counted."""
        return self.requests


BreakCondition = Callable[[State, Counters], bool]
StateChangedHandler = Callable[[str, State, State], None]


def _default_can_open(state: State, counters: Counters) -> bool:
    return counters.consecutive_failures > 2


def _default_can_close(state: State, counters: Counters) -> bool:
    return counters.consecutive_successes > 2


@dataclass
class Options:
    """Settings of a RequestBreaker; times are in seconds, ``expiry`` is wall time."""

    name: str = "defaultBreakerName"
    expiry: float = field(default_factory=lambda: time.time() + DEFAULT_EXPIRY)
    interval: float = DEFAULT_INTERVAL
    timeout: float = DEFAULT_TIMEOUT
    max_requests: int = DEFAULT_MAX_REQUESTS
    can_open: BreakCondition = _default_can_open
    can_close: BreakCondition = _default_can_close
    on_state_changed: Optional[StateChangedHandler] = None
    shoulder_half_to_open: int = 0
    context: Any = None


Option = Callable[[Options], None]


def action_name(name: str) -> Option:
    def apply(options: Options) -> None:
        options.name = name

    return apply


def interval(value: float) -> Option:
    def apply(options: Options) -> None:
        options.interval = value

    return apply


def timeout(value: float) -> Option:
    def apply(options: Options) -> None:
        options.timeout = value

    return apply


def max_requests(value: int) -> Option:
    def apply(options: Options) -> None:
        options.max_requests = value

    return apply


def with_shoulder_half_to_open(value: int) -> Option:
    def apply(options: Options) -> None:
        options.shoulder_half_to_open = value

    return apply


def expiry(value: float) -> Option:
    def apply(options: Options) -> None:
        options.expiry = value

    return apply


def with_state_changed(handler: StateChangedHandler) -> Option:
    def apply(options: Options) -> None:
        options.on_state_changed = handler

    return apply


def with_break_condition(condition: BreakCondition) -> Option:
    def apply(options: Options) -> None:
        options.can_open = condition

    return apply


def with_close_condition(condition: BreakCondition) -> Option:
    def apply(options: Options) -> None:
        options.can_close = condition

    return apply


class RequestBreaker:
    """A breaker configured by option functions that guards calls to work.

    Work is called with the options' ``context`` and signals failure by raising.
    """

    def __init__(self, *args: Option) -> None:
        options = Options()
        for set_option in args:
            set_option(options)
        self._options = options
        self._lock = threading.Lock()
        self._state = State.CLOSED
        self._counters = Counters()
        self._last_result = OperationState.UNKNOWN

    @property
    def name(self) -> str:
        return self._options.name

    @property
    def state(self) -> State:
        with self._lock:
            return self._state

    @property
    def counters(self) -> Counters:
        """A copy of the current counts."""
        with self._lock:
            return dataclasses.replace(self._counters)

    def do(self, work: Callable[[Any], Any]) -> Any:
        """Run ``work`` if the breaker accepts it and return its result."""
        self._before_request()
        try:
            result = work(self._options.context)
        except Exception:
            self._after_request(False)
            raise
        self._after_request(True)
        return result

    def _change_state(self, state: State) -> None:
        previous = self._state
        self._state = state
        self._counters.reset()
        self._last_result = OperationState.UNKNOWN
        handler = self._options.on_state_changed
        if handler is not None:
            handler(self._options.name, previous, state)

    def _before_request(self) -> None:
        with self._lock:
            now = time.time()
            if self._state is State.OPEN:
                if self._options.expiry < now:
                    self._change_state(State.HALF_OPEN)
                    self._options.expiry = now + self._options.timeout
                    return
                raise TooManyRequestsError()
            if self._state is State.CLOSED and self._options.expiry < now:
                self._counters.reset()
                self._last_result = OperationState.UNKNOWN
                self._options.expiry = now + self._options.interval

    def _after_request(self, success: bool) -> None:
        with self._lock:
            result = OperationState.SUCCESS if success else OperationState.FAILURE
            self._counters.count(result, result is self._last_result)
            self._last_result = result
            now = time.time()
            if not success:
                if self._state in (State.HALF_OPEN, State.CLOSED) and self._options.can_open(
                    self._state, dataclasses.replace(self._counters)
                ):
                    self._change_state(State.OPEN)
                    self._options.expiry = now + self._options.timeout
            elif (
                self._state is State.HALF_OPEN
                and self._counters.consecutive_successes >= self._options.shoulder_half_to_open
            ):
                self._change_state(State.CLOSED)
                self._options.expiry = now + self._options.interval


@dataclass
class _SimpleCounter:
    last_result: OperationState = OperationState.UNKNOWN
    last_activity: float = 0.0
    consecutive_successes: int = 0
    consecutive_failures: int = 0

    def count(self, result: OperationState) -> None:
        if result is OperationState.FAILURE:
            self.consecutive_failures += 1
        elif result is OperationState.SUCCESS:
            self.consecutive_successes += 1
        self.last_activity = time.monotonic()
        self.last_result = result


def _can_retry(counter: _SimpleCounter, failure_threshold: int) -> bool:
    backoff_level = max(counter.consecutive_failures - failure_threshold, 0)
    retry_at = counter.last_activity + RETRY_BASE_DELAY * (1 << backoff_level)
    return time.monotonic() > retry_at


def breaker(
    circuit: Callable[[Any], Any], failure_threshold: int
) -> Callable[..., Any]:
    """Wrap ``circuit`` so it fails fast after ``failure_threshold`` failures.

    Once the threshold is reached, calls raise ServiceUnavailableError until a
    second has passed since the last failure; then one call is let through.
    """
    counter = _SimpleCounter()
    lock = threading.Lock()

    def wrapped(context: Any = None) -> Any:
        with lock:
            if counter.consecutive_failures >= failure_threshold:
                if not _can_retry(counter, failure_threshold):
                    raise ServiceUnavailableError()
                counter.consecutive_failures = 0
        try:
            result = circuit(context)
        except Exception:
            with lock:
                counter.count(OperationState.FAILURE)
            raise
        with lock:
            counter.count(OperationState.SUCCESS)
        return result

    return wrapped