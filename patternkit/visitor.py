"""Visitors over fuels and over game objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Gas:
    density: int

    def accept(self, visitor: "ClothFactory") -> str:
        return visitor.visit(self)


@dataclass(frozen=True)
class Diesel:
    energy: int

    def accept(self, visitor: "MilitaryFactory") -> str:
        return visitor.visit(self)


@dataclass
class MilitaryFactory:
    """Buys diesel to make weapons."""

    name: str = ""

    def visit(self, diesel: Diesel) -> str:
        text = f"militaryFactory: use diesel with inner energy {diesel.energy}"
        print(text)
        return text


@dataclass
class ClothFactory:
    """Buys gas to make synthetic fibres."""

    def visit(self, gas: Gas) -> str:
        text = f"clothFactory: use gas with density {gas.density}"
        print(text)
        return text


class GameVisitor(Protocol):
    def visit_player(self, player: "Player") -> str: ...

    def visit_npc(self, npc: "NPC") -> str: ...

    def visit_system_env(self, env: "SystemEnv") -> str: ...


@dataclass(frozen=True)
class Player:
    name: str
    level: int

    def accept(self, visitor: GameVisitor) -> str:
        return visitor.visit_player(self)


@dataclass(frozen=True)
class NPC:
    name: str
    is_immortal: bool

    def accept(self, visitor: GameVisitor) -> str:
        return visitor.visit_npc(self)


@dataclass(frozen=True)
class SystemEnv:
    mark: str
    version: str

    def accept(self, visitor: GameVisitor) -> str:
        return visitor.visit_system_env(self)


def _say(text: str) -> str:
    print(text)
    return text


class SettingVisitor:
    """Reports the settings of game objects."""

    def visit_player(self, player: Player) -> str:
        return _say(f"Game Player: Name:{player.name} ,Level:{player.level}")

    def visit_npc(self, npc: NPC) -> str:
        immortal = "true" if npc.is_immortal else "false"
        return _say(f"Game NPC: Name:{npc.name} ,Immortal:{immortal}")

    def visit_system_env(self, env: SystemEnv) -> str:
        return _say(f"Game Env: Mark:{env.mark} ,Version:{env.version}")


@dataclass
class Attacker:
    """Attacks players and NPCs; the environment cannot be attacked."""

    name: str = ""

    def visit_player(self, player: Player) -> str:
        return _say(f"{self.name} Attack Player : {player.name}")

    def visit_npc(self, npc: NPC) -> str:
        return _say(f"{self.name} Attack NPC: {npc.name}")

    def visit_system_env(self, env: SystemEnv) -> str:
        return _say("Unsupported target game env")