"""Chains of approvers handling fee requests."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Protocol

CFO_LIMIT = 10**10
CEO_LIMIT = 10**15


@dataclass(frozen=True)
class FeeRequest:
    """A request for money that needs approval."""

    amount: int
    required_level: int
    name: str


class Approver(Protocol):
    def set_next(self, approver: "Approver") -> None: ...

    def have_right(self, required_level: int) -> bool: ...

    def handle_approval(self, request: FeeRequest) -> bool: ...


@dataclass
class FeeRequestChainFlow:
    """Runs a request past each approver in turn."""

    approvers: list[Approver] = field(default_factory=list)

    def add_approver(self, approver: Approver) -> None:
        self.approvers.append(approver)

    def run_approval_flow(self, request: FeeRequest) -> bool:
        """Stop at the first approver that rejects; return whether all passed."""
        return all(approver.handle_approval(request) for approver in self.approvers)


@dataclass
class GM:
    """Approves requests below its level; otherwise hands them on."""

    level: int = 8
    next_handler: Optional[Approver] = None

    def set_next(self, approver: Approver) -> None:
        self.next_handler = approver

    def have_right(self, required_level: int) -> bool:
        return self.level > required_level

    def handle_approval(self, request: FeeRequest) -> bool:
        if self.have_right(request.required_level):
            print(f"GM permit {request.name} {request.amount} fee request")
            return True
        print(f"GM NO right to approve {request.name} {request.amount} fee request")
        if self.next_handler is not None:
            return self.next_handler.handle_approval(request)
        return True


@dataclass
class CFO:
    """Approves amounts below ten billion; otherwise hands them on."""

    authority: ClassVar[float] = math.inf

    level: int = 0
    next_handler: Optional[Approver] = None

    def set_next(self, approver: Approver) -> None:
        self.next_handler = approver

    def have_right(self, required_level: int) -> bool:
        """The CFO's authority is unlimited, so any level is within it."""
        return required_level < self.authority

    def handle_approval(self, request: FeeRequest) -> bool:
        if request.amount < CFO_LIMIT:
            print(f"CFO permit {request.name} {request.amount} fee request")
            return True
        print(f"CFO No right to approve {request.name} {request.amount} fee request ")
        if self.next_handler is not None:
            return self.next_handler.handle_approval(request)
        return True


@dataclass
class CEO:
    """The last word: approves amounts below a quadrillion, denies the rest."""

    authority: ClassVar[float] = math.inf

    next_handler: Optional[Approver] = None

    def set_next(self, approver: Approver) -> None:
        """Record the approver; the CEO never hands a request on."""
        self.next_handler = approver

    def have_right(self, required_level: int) -> bool:
        """The CEO's authority is unlimited, so any level is within it."""
        return required_level < self.authority

    def handle_approval(self, request: FeeRequest) -> bool:
        if request.amount < CEO_LIMIT:
            print(f"CEO permit {request.name} {request.amount} fee request")
            return True
        print(f"CEO deny {request.name} {request.amount} fee request ")
        return False