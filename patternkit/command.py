"""Commands: drill orders given to troops, and undoable drawing steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class Command(Protocol):
    def execute(self) -> list[str]: ...


@dataclass
class Troop:
    """Carries out orders."""

    name: str

    def execute(self) -> list[str]:
        line = f"cmd had been executed by {self.name}"
        print(line)
        return [line]


def _announce(order: str, receiver: Command) -> list[str]:
    print(order)
    return [order, *receiver.execute()]


@dataclass
class TurnLeftCommand:
    receiver: Command

    def execute(self) -> list[str]:
        return _announce("Troop Turn Left", self.receiver)


@dataclass
class TurnRightCommand:
    receiver: Command

    def execute(self) -> list[str]:
        return _announce("Troop Turn Right", self.receiver)


@dataclass
class TurnBackCommand:
    receiver: Command
    hold_time: int = 0

    def execute(self) -> list[str]:
        return _announce("Troop Turn Back", self.receiver)


@dataclass
class Instructor:
    """Gives a series of orders."""

    commands: list[Command] = field(default_factory=list)

    def add_command(self, command: Command) -> None:
        self.commands.append(command)

    def execute(self) -> list[str]:
        """Give every order in turn; return all lines shown."""
        return [line for command in self.commands for line in command.execute()]


@dataclass(frozen=True)
class Position:
    x: int
    y: int


@dataclass
class DrawCommand:
    """Draw a line to a position."""

    position: Position

    def execute(self) -> str:
        return f"{self.position.x}.{self.position.y}"


@dataclass
class PathPainter:
    """Runs drawing commands and can undo the last one."""

    commands: list[DrawCommand] = field(default_factory=list)

    def execute(self) -> str:
        return "".join(command.execute() + "\n" for command in self.commands)

    def append(self, command: DrawCommand) -> None:
        self.commands.append(command)

    def undo(self) -> None:
        """Drop the last command, if any."""
        if self.commands:
            self.commands.pop()

    def clear(self) -> None:
        self.commands = []