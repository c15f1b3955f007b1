"""A simple factory that makes school members who can introduce themselves."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol


class SchoolMember(IntEnum):
    STUDENT = 0
    TEACHER = 1


class Mouth(Protocol):
    def say(self, name: str) -> str: ...


class _Teacher:
    def say(self, name: str) -> str:
        return f"I am Teacher: {name}"


class _Student:
    def say(self, name: str) -> str:
        return f"I am Student： {name}"


def create_member(kind: SchoolMember) -> Mouth:
    """Make a member of the given kind; ValueError for an unknown kind."""
    member = SchoolMember(kind)
    if member is SchoolMember.STUDENT:
        return _Student()
    return _Teacher()