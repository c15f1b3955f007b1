"""A publisher that fans values out to subscribers, optionally filtered."""

from __future__ import annotations

import queue
import threading
from typing import Any, Callable, Iterator, Optional

TopicFilter = Callable[[Any], bool]

_POLL = 0.01


class Subscriber:
    """A bounded buffer of published values; iterating ends once it is closed."""

    def __init__(self, buffer: int, topic: Optional[TopicFilter]) -> None:
        self._queue: "queue.Queue[Any]" = queue.Queue(maxsize=buffer)
        self._closed = threading.Event()
        self.topic = topic

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def receive(self, timeout: Optional[float] = None) -> Any:
        """Take the next value; raises queue.Empty if none arrives in time."""
        return self._queue.get(timeout=timeout)

    def __iter__(self) -> Iterator[Any]:
        while True:
            try:
                yield self._queue.get(timeout=_POLL)
            except queue.Empty:
                if self._closed.is_set() and self._queue.empty():
                    return

    def _offer(self, value: Any, timeout: float) -> None:
        try:
            self._queue.put(value, timeout=timeout)
        except queue.Full:
            pass

    def _close(self) -> None:
        self._closed.set()


class Publisher:
    """Publishes values to subscribers, giving up on a full one after a timeout."""

    def __init__(self, publish_timeout: float, buffer: int) -> None:
        if buffer < 1:
            raise ValueError("buffer must be at least 1")
        self._timeout = publish_timeout
        self._buffer = buffer
        self._lock = threading.Lock()
        self._subscribers: dict[Subscriber, Optional[TopicFilter]] = {}

    def subscribe(self) -> Subscriber:
        """Add a subscriber to every value."""
        return self.subscribe_topic(None)

    def subscribe_topic(self, topic: Optional[TopicFilter]) -> Subscriber:
        """Add a subscriber to the values for which ``topic`` is true."""
        subscriber = Subscriber(self._buffer, topic)
        with self._lock:
            self._subscribers[subscriber] = topic
        return subscriber

    def evict(self, subscriber: Subscriber) -> None:
        """Remove a subscriber and close it."""
        with self._lock:
            self._subscribers.pop(subscriber, None)
            subscriber._close()

    def publish(self, value: Any) -> None:
        """Send ``value`` to every matching subscriber and wait for the sends."""
        with self._lock:
            threads = [
                threading.Thread(target=self._send, args=(subscriber, topic, value))
                for subscriber, topic in self._subscribers.items()
            ]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

    def close(self) -> None:
        """Remove and close every subscriber."""
        with self._lock:
            for subscriber in self._subscribers:
                subscriber._close()
            self._subscribers.clear()

    def _send(self, subscriber: Subscriber, topic: Optional[TopicFilter], value: Any) -> None:
        if topic is not None and not topic(value):
            return
        subscriber._offer(value, self._timeout)