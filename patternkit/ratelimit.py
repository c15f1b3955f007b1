"""Pacing a stream of requests with a ticker, optionally allowing bursts."""

from __future__ import annotations

import time
from typing import Iterable, Iterator, TypeVar

T = TypeVar("T")


def rate_limiting(requests: Iterable[T], interval: float, burst: int) -> Iterator[T]:
    """Yield requests at most one per ``interval`` seconds after a burst.

    Up to ``burst`` requests pass at once; after that a token is added every
    ``interval`` seconds. Ticks missed while tokens are full are dropped.
    """
    if interval <= 0:
        raise ValueError("interval must be positive")
    if burst < 0:
        raise ValueError("burst must not be negative")
    return _rate_limited(requests, interval, burst)


def _rate_limited(requests: Iterable[T], interval: float, burst: int) -> Iterator[T]:
    capacity = burst + 1
    tokens = burst
    next_tick = time.monotonic() + interval
    for request in requests:
        while True:
            now = time.monotonic()
            if now >= next_tick:
                ticks = int((now - next_tick) // interval) + 1
                tokens = min(capacity, tokens + ticks)
                next_tick += ticks * interval
            if tokens > 0:
                break
            time.sleep(next_tick - now)
        tokens -= 1
        yield request


def simple_rate_limiting(interval: float, count: int) -> Iterator[int]:
    """Yield the requests 1..count, each on the next tick of ``interval`` seconds."""
    if interval <= 0:
        raise ValueError("interval must be positive")
    if count < 0:
        raise ValueError("count must not be negative")
    return _ticked(interval, count)


def _ticked(interval: float, count: int) -> Iterator[int]:
    next_tick = time.monotonic() + interval
    for request in range(1, count + 1):
        now = time.monotonic()
        if now < next_tick:
            time.sleep(next_tick - now)
            next_tick += interval
        else:
            next_tick += (int((now - next_tick) // interval) + 1) * interval
        yield request