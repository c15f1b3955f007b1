"""Observers: a forum mails its subscribers when it is updated."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol


@dataclass(frozen=True)
class Update:
    """What changed on the forum."""

    topic: str = ""
    order: int = 0


class MailReceiver(Protocol):
    def notice(self, context: Update) -> object: ...


@dataclass
class TechBBS:
    """A forum that notifies its subscribers of updates."""

    observers: list[MailReceiver] = field(default_factory=list)
    context: Optional[Update] = None

    def registry(self, receiver: MailReceiver) -> None:
        """Subscribe a receiver to updates."""
        self.observers.append(receiver)

    def set_context(self, context: Update) -> None:
        """Set the update to announce."""
        self.context = context

    def notice_all_update(self) -> None:
        """Notify every subscriber, in the order they registered."""
        for observer in self.observers:
            observer.notice(self.context)


@dataclass
class User:
    """A subscriber who keeps the updates it has been told about."""

    name: str
    received: list[Update] = field(default_factory=list)

    def notice(self, context: Update) -> str:
        """Receive an update notice and return the text shown."""
        if not isinstance(context, Update):
            raise TypeError("notice needs an Update")
        self.received.append(context)
        text = (
            f"{self.name} receive updates notice\n"
            f"updates order: {context.order} content: {context.topic}"
        )
        print(text)
        return text