"""Flyweights: couriers shared by the whole company."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Deliver:
    """A courier; the packets carried change from task to task."""

    name: str
    packets: list[str] = field(default_factory=list)

    def deliver_packets(self, packets: list[str]) -> str:
        """Deliver ``packets``; return the text shown."""
        text = f"{self.name} : Delivered: [{' '.join(packets)}]"
        print(text)
        return text


@dataclass
class DeliverCompany:
    """Hires each courier once and shares them among tasks."""

    employees: dict[str, Deliver] = field(default_factory=dict)

    def hire(self, name: str) -> bool:
        """Hire ``name``; return False if already hired."""
        if name in self.employees:
            print("already hired")
            return False
        self.employees[name] = Deliver(name=name)
        print("hired")
        return True

    def get_deliver(self, name: str) -> Deliver:
        """The courier called ``name``; KeyError if not hired."""
        return self.employees[name]

    def deliver_task(self, name: str, packets: list[str]) -> str:
        """Send courier ``name`` out with ``packets``."""
        return self.employees[name].deliver_packets(packets)