"""Classifiers that tell a retrier how to treat the outcome of an attempt."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Protocol


class Action(Enum):
    """What a retrier should do with an outcome."""

    SUCCEED = 0
    FAIL = 1
    RETRY = 2


class Classifier(Protocol):
    def classify(self, error: Optional[BaseException]) -> Action: ...


class DefaultClassifier:
    """Success when there is no error, otherwise retry."""

    def classify(self, error: Optional[BaseException]) -> Action:
        return Action.SUCCEED if error is None else Action.RETRY


class WhitelistClassifier:
    """Retry only the listed errors; fail on any other."""

    def __init__(self, errors: Iterable[BaseException] = ()) -> None:
        self.errors = tuple(errors)

    def classify(self, error: Optional[BaseException]) -> Action:
        if error is None:
            return Action.SUCCEED
        if any(error is listed for listed in self.errors):
            return Action.RETRY
        return Action.FAIL


class BlacklistClassifier:
    """Fail on the listed errors; retry any other."""

    def __init__(self, errors: Iterable[BaseException] = ()) -> None:
        self.errors = tuple(errors)

    def classify(self, error: Optional[BaseException]) -> Action:
        if error is None:
            return Action.SUCCEED
        if any(error is listed for listed in self.errors):
            return Action.FAIL
        return Action.RETRY