"""Saving and restoring a game role's state."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class RoleStatusMemento:
    """A saved snapshot of a role's state."""

    tag: str
    hp: int
    mp: int
    level: int
    time_mark: str


@dataclass
class GamePlayer:
    """The originator: holds the current state of the game."""

    hp: int = 0
    mp: int = 0
    role: int = 0
    level: int = 0

    def create(self, tag: str) -> RoleStatusMemento:
        """Snapshot the current state under ``tag``."""
        return RoleStatusMemento(
            tag=tag,
            hp=self.hp,
            mp=self.mp,
            level=self.level,
            time_mark=datetime.now().isoformat(sep=" "),
        )

    def load(self, memento: RoleStatusMemento) -> None:
        """Restore the state from a snapshot."""
        self.mp = memento.mp
        self.hp = memento.hp
        self.level = memento.level
        print(f"Game Profile had been restored to {memento.tag} : {memento.time_mark}")

    def status(self) -> str:
        """Describe the current state."""
        text = f"Current Level :{self.level} HP:{self.hp}, MP:{self.mp}"
        print(text)
        return text


@dataclass
class RoleStatusCaretaker:
    """Keeps snapshots by tag."""

    mementos: dict[str, RoleStatusMemento] = field(default_factory=dict)

    def save_status(self, memento: RoleStatusMemento) -> None:
        """Store a snapshot, replacing any with the same tag."""
        self.mementos[memento.tag] = memento
        print(f"Game File {memento.tag}  Saved at {memento.time_mark}")

    def retrieve_status(self, tag: str) -> RoleStatusMemento:
        """The snapshot saved under ``tag``; KeyError if there is none."""
        return self.mementos[tag]