"""A bridge between kinds of message and the way they are delivered."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol


class NoticeMessage(Protocol):
    def notice_user(self, text: str) -> list[str]: ...

    def priority(self) -> int: ...


class NoticeHandler(Protocol):
    def notice_user(self, text: str, message: NoticeMessage) -> list[str]: ...


def _say(text: str) -> str:
    print(text)
    return text


@dataclass
class WSMessage:
    """A websocket message that hands delivery to its handler."""

    handler: Optional[NoticeHandler] = None
    level: int = 0

    def notice_user(self, text: str) -> list[str]:
        lines = [_say(f"Websocket Notice User... {text}")]
        if self.handler is not None:
            lines += self.handler.notice_user(text, self)
        return lines

    def priority(self) -> int:
        return self.level


@dataclass
class EmailMessage:
    """An e-mail message that hands delivery to its handler."""

    handler: Optional[NoticeHandler] = None
    level: int = 0

    def notice_user(self, text: str) -> list[str]:
        lines = [_say(f"Email Notice User... {text}")]
        if self.handler is not None:
            lines += self.handler.notice_user(text, self)
        return lines

    def priority(self) -> int:
        return self.level


class EmergencyWSMessage:
    def notice_user(self, text: str, message: NoticeMessage) -> list[str]:
        return [_say(f"Notice User {text}  By Websocket: with Level:  {message.priority()}")]


class EmergencyEmailMessage:
    def notice_user(self, text: str, message: NoticeMessage) -> list[str]:
        return [_say(f"Notice User: {text}  By Email: with Level:  {message.priority()}")]