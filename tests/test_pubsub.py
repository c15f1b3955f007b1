import time

import pytest

from patternkit.pubsub import Publisher


def only_weather(value):
    return isinstance(value, str) and "weather" in value


def test_publish_to_all_and_filtered():
    p = Publisher(0.1, 10)
    everything = p.subscribe()
    weathers = p.subscribe_topic(only_weather)
    p.publish("weather bad, SH")
    p.publish("weather fine,SZ")
    p.publish("traffic jam")
    p.publish(42)
    p.close()
    assert list(everything) == ["weather bad, SH", "weather fine,SZ", "traffic jam", 42]
    assert list(weathers) == ["weather bad, SH", "weather fine,SZ"]


def test_evict_stops_delivery():
    p = Publisher(0.1, 10)
    kept = p.subscribe()
    evicted = p.subscribe()
    p.publish("one")
    p.evict(evicted)
    p.publish("two")
    assert evicted.closed
    assert list(evicted) == ["one"]
    p.close()
    assert list(kept) == ["one", "two"]


def test_full_subscriber_drops_after_timeout():
    p = Publisher(0.05, 1)
    sub = p.subscribe()
    p.publish("first")
    start = time.monotonic()
    p.publish("second")
    assert time.monotonic() - start >= 0.04
    p.close()
    assert list(sub) == ["first"]


def test_receive_returns_value():
    p = Publisher(0.1, 2)
    sub = p.subscribe()
    p.publish("hello")
    assert sub.receive(timeout=1) == "hello"


def test_buffer_must_be_positive():
    with pytest.raises(ValueError):
        Publisher(0.1, 0)