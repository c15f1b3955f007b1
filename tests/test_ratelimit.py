import time

import pytest

from patternkit.ratelimit import rate_limiting, simple_rate_limiting


def timed(iterator):
    start = time.monotonic()
    stamps = []
    items = []
    for item in iterator:
        items.append(item)
        stamps.append(time.monotonic() - start)
    return items, stamps


def test_rate_limiting_burst_then_paced():
    interval = 0.05
    items, stamps = timed(rate_limiting(range(1, 11), interval, 3))
    assert items == list(range(1, 11))
    assert stamps[2] < interval * 0.8
    assert stamps[-1] >= 7 * interval * 0.8
    assert stamps == sorted(stamps)


def test_rate_limiting_without_burst():
    interval = 0.03
    items, stamps = timed(rate_limiting(["a", "b", "c"], interval, 0))
    assert items == ["a", "b", "c"]
    assert stamps[0] >= interval * 0.8
    assert stamps[-1] >= 3 * interval * 0.8


def test_rate_limiting_burst_larger_than_requests():
    items, stamps = timed(rate_limiting([1, 2], 1.0, 5))
    assert items == [1, 2]
    assert stamps[-1] < 0.5


def test_simple_rate_limiting():
    interval = 0.03
    items, stamps = timed(simple_rate_limiting(interval, 5))
    assert items == [1, 2, 3, 4, 5]
    assert stamps[0] >= interval * 0.8
    assert stamps[-1] >= 5 * interval * 0.8


@pytest.mark.parametrize("interval", [0, -1])
def test_invalid_interval(interval):
    with pytest.raises(ValueError):
        rate_limiting([1], interval, 1)
    with pytest.raises(ValueError):
        simple_rate_limiting(interval, 1)


def test_negative_burst():
    with pytest.raises(ValueError):
        rate_limiting([1], 0.1, -1)