"""Composite: boxes that hold cargo and other boxes."""

from __future__ import annotations

from dataclasses import dataclass, field


def _say(text: str) -> str:
    print(text)
    return text


@dataclass
class Cargo:
    """Basic cargo with a volume and a description."""

    volume: int = 0
    description: str = ""

    def cargo_type(self) -> str:
        """The name of this cargo's kind."""
        return type(self).__name__

    def show_content(self) -> list[str]:
        """Describe the cargo; return the lines shown."""
        return [_say(f"Type:  {Cargo.cargo_type(self)}  Content  {self.description}")]


@dataclass
class SingleCargo(Cargo):
    """A single item, sent from one party to another."""

    sender: str = ""
    receiver: str = ""

    def show_content(self) -> list[str]:
        return [
            _say(
                f"Type:  {self.cargo_type()}  From  {self.sender}  To  {self.receiver}  "
                f"Content  {self.description}"
            )
        ]


@dataclass
class Box(Cargo):
    """A container holding cargo and other boxes."""

    inner_space: int = 0
    children: list[Cargo] = field(default_factory=list)

    def put_in_cargo(self, cargo: Cargo) -> None:
        """Put cargo or a box inside; TypeError for anything else."""
        if isinstance(cargo, Box):
            _say(f"get a Box: Type:  {cargo.cargo_type()}")
        elif isinstance(cargo, SingleCargo):
            _say(f"get a SingleCargo Type:  {cargo.cargo_type()}")
        elif not isinstance(cargo, Cargo):
            raise TypeError("only cargo can be put in a box")
        self.children.append(cargo)

    def show_content(self) -> list[str]:
        """Describe the box and, recursively, everything in it."""
        lines = [
            _say(
                f"Type:  {self.cargo_type()}  InnerSpace  {self.inner_space}  "
                f"Children:  {self.description}"
            ),
            _say(f"Children Count:  {len(self.children)}  Description  {self.description}"),
        ]
        for child in self.children:
            lines.append(_say(f"Current Child is a {child.cargo_type()}"))
            lines += child.show_content()
        return lines