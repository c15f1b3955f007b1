"""Topics that users subscribe to and receive published messages from."""

from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

RECEIVE_TIMEOUT = 0.1
_POLL = 0.01


class TopicClosedError(Exception):
    """The subscription has been cancelled."""

    def __init__(self) -> None:
        super().__init__("Topic has been closed")


class ReceiveTimeoutError(Exception):
    """No message arrived in time."""

    def __init__(self) -> None:
        super().__init__("time out error")


@dataclass
class User:
    id: int = 0
    name: str = ""


@dataclass
class Session:
    user: User = field(default_factory=User)
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class Message:
    seq: int = 0
    text: str = ""
    sender: Optional[Session] = None


class Subscription:
    """One user's subscription to a topic, with an inbox and an outbox."""

    def __init__(self, uid: int, topic_name: str, queue_size: int) -> None:
        self.session = Session(User(id=uid))
        self.topic_name = topic_name
        self.outbox: "queue.Queue[Message]" = queue.Queue(maxsize=queue_size)
        self.inbox: "queue.Queue[Message]" = queue.Queue(maxsize=queue_size)
        self._cancelled = threading.Event()

    @property
    def id(self) -> int:
        return self.session.user.id

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        """Close the subscription."""
        self._cancelled.set()

    def publish(self, message: Message) -> None:
        """Queue a message the user sends; blocks while the outbox is full."""
        if self._cancelled.is_set():
            raise TopicClosedError()
        self.outbox.put(message)

    def receive(self) -> Message:
        """Take the next message from the inbox, waiting a short while."""
        deadline = time.monotonic() + RECEIVE_TIMEOUT
        while True:
            if self._cancelled.is_set():
                raise TopicClosedError()
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise ReceiveTimeoutError()
            try:
                return self.inbox.get(timeout=min(remaining, _POLL))
            except queue.Empty:
                continue


@dataclass
class Topic:
    """A named topic holding its subscribers and the messages published to it."""

    user_queue_size: int = 0
    name: str = ""
    subscribers: dict[int, Subscription] = field(default_factory=dict)
    message_history: list[Message] = field(default_factory=list)

    def publish(self, message: Message) -> None:
        """Deliver a message to every subscriber and keep it in the history."""
        for uid, subscription in list(self.subscribers.items()):
            if subscription.id == uid:
                subscription.inbox.put(message)
        self.message_history.append(message)

    def _find(self, uid: int, topic_name: str) -> Optional[Subscription]:
        if topic_name != self.name:
            return None
        return self.subscribers.get(uid)

    def subscribe(self, uid: int, topic_name: str) -> Optional[Subscription]:
        """Subscribe a user, or return None when the topic name does not match."""
        if topic_name != self.name:
            return None
        if self._find(uid, topic_name) is None:
            self.subscribers[uid] = Subscription(uid, topic_name, self.user_queue_size)
        return self.subscribers[uid]

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription if it belongs to this topic."""
        if self._find(subscription.id, subscription.topic_name) is not None:
            del self.subscribers[subscription.id]

    def delete(self) -> None:
        """Drop the subscribers, the name and the history."""
        self.subscribers = {}
        self.name = ""
        self.message_history = []


@dataclass
class Queue:
    """All topics, by name."""

    topics: dict[str, Topic] = field(default_factory=dict)

    def add_topic(self, topic_name: str, user_queue_size: int) -> Topic:
        """Return the named topic, creating it if it does not exist."""
        if topic_name not in self.topics:
            self.topics[topic_name] = Topic(user_queue_size=user_queue_size, name=topic_name)
        return self.topics[topic_name]