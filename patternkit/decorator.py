"""Decorator: makeup layered over a natural face."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class FaceLooks(Protocol):
    def face_looks(self) -> int: ...


@dataclass
class NatureGirl:
    face_value: int = 0

    def face_looks(self) -> int:
        return self.face_value


@dataclass
class GirlWithMakeups:
    """Adds ``face_plus`` to whatever it wraps."""

    origin: FaceLooks
    face_plus: int = 0

    def face_looks(self) -> int:
        return self.origin.face_looks() + self.face_plus

    def face_real(self) -> int:
        """The look of what is wrapped, without this layer."""
        return self.origin.face_looks()