"""Fan-out: splitting one stream into several."""

from __future__ import annotations

import itertools
import queue
import threading
from typing import Any, Iterable, Iterator


class _Channel:
    """An unbounded hand-off from a producer thread to one consumer."""

    _CLOSED = object()

    def __init__(self) -> None:
        self._queue: "queue.SimpleQueue[Any]" = queue.SimpleQueue()

    def send(self, value: Any) -> None:
        self._queue.put(value)

    def close(self) -> None:
        self._queue.put(self._CLOSED)

    def __iter__(self) -> Iterator[Any]:
        while True:
            value = self._queue.get()
            if value is self._CLOSED:
                return
            yield value


def _channels(n: int) -> list[_Channel]:
    if n < 0:
        raise ValueError("n must not be negative")
    return [_Channel() for _ in range(n)]


def _close_all(channels: list[_Channel]) -> None:
    for channel in channels:
        channel.close()


def split(source: Iterable[Any], n: int) -> list[Iterator[Any]]:
    """Copy every value of ``source`` to each of ``n`` outputs."""
    channels = _channels(n)

    def distribute() -> None:
        try:
            for value in source:
                for channel in channels:
                    channel.send(value)
        finally:
            _close_all(channels)

    threading.Thread(target=distribute, daemon=True).start()
    return [iter(channel) for channel in channels]


def split_each(source: Iterable[Any], n: int) -> list[Iterator[Any]]:
    """Start ``n`` workers that each copy one value of ``source`` to every output.

    Only the first ``n`` values are taken; the order in which they reach the
    outputs depends on the workers.
    """
    channels = _channels(n)
    iterator = iter(source)
    read_lock = threading.Lock()
    count_lock = threading.Lock()
    remaining = n
    missing = object()

    def worker() -> None:
        nonlocal remaining
        try:
            with read_lock:
                value = next(iterator, missing)
            if value is not missing:
                for channel in channels:
                    channel.send(value)
        finally:
            with count_lock:
                remaining -= 1
                last = remaining == 0
            if last:
                _close_all(channels)

    for _ in range(n):
        threading.Thread(target=worker, daemon=True).start()
    return [iter(channel) for channel in channels]


def split_round_robin(source: Iterable[Any], n: int) -> list[Iterator[Any]]:
    """Deal the values of ``source`` to ``n`` outputs in turn."""
    if n < 1:
        raise ValueError("n must be at least 1")
    channels = _channels(n)

    def distribute() -> None:
        try:
            for channel, value in zip(itertools.cycle(channels), source):
                channel.send(value)
        finally:
            _close_all(channels)

    threading.Thread(target=distribute, daemon=True).start()
    return [iter(channel) for channel in channels]


def gen(*args: int) -> Iterator[int]:
    """Yield the given numbers."""
    for number in args:
        yield number


def sq(source: Iterable[int]) -> Iterator[int]:
    """Yield the square of each number from ``source``."""
    for number in source:
        yield number * number