"""Back-off schedules for retrying: lists of delays in seconds."""

from __future__ import annotations


def constant_backoff(n: int, amount: float) -> list[float]:
    """Retry ``n`` times, waiting ``amount`` seconds after each attempt."""
    if n < 0:
        raise ValueError("n must not be negative")
    return [amount] * n


def exponential_backoff(n: int, initial_amount: float) -> list[float]:
    """Retry ``n`` times, doubling the wait after each attempt."""
    if n < 0:
        raise ValueError("n must not be negative")
    return [initial_amount * 2**attempt for attempt in range(n)]