"""Functional options: settings passed as functions that adjust defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass
class Options:
    """Every setting a caller may pass in."""

    uid: int = 0
    gid: int = 0
    flags: int = 0
    company: str = ""
    gender: bool = True


Option = Callable[[Options], None]


def uid(user_id: int) -> Option:
    """Set the user id."""

    def apply(options: Options) -> None:
        options.uid = user_id

    return apply


def gid(group_id: int) -> Option:
    """Set the group id."""

    def apply(options: Options) -> None:
        options.gid = group_id

    return apply


def company(name: str) -> Option:
    """Set the company name."""

    def apply(options: Options) -> None:
        options.company = name

    return apply


def gender(is_male: bool) -> Option:
    """Set the gender: True for male."""

    def apply(options: Options) -> None:
        options.gender = is_male

    return apply


def introduce(name: str, *args: Option) -> Options:
    """Introduce someone, applying the options over the defaults; return the options used."""
    options = Options()
    for set_option in args:
        set_option(options)
    label = "male" if options.gender else "female"
    print("----------------------")
    print(
        "im am: ", name, "\nfrom: ", options.company, "\ngender: ", label, "\nUID: ", options.uid
    )
    return options