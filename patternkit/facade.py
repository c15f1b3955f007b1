"""A supermarket facade in front of several vendors."""

from __future__ import annotations

from typing import Protocol


class Vendor(Protocol):
    def sell(self, count: int) -> list[str]: ...


def _report(lines: list[str]) -> list[str]:
    for line in lines:
        print(line)
    return lines


class SaltVendor:
    def sell(self, count: int) -> list[str]:
        lines = ["Salt out"] if count > 5 else []
        return _report(lines + ["Milk got"])


class MilkVendor:
    def sell(self, count: int) -> list[str]:
        lines = ["Milk out"] if count > 20 else []
        return _report(lines + ["Milk got"])


class RiceVendor:
    def sell(self, count: int) -> list[str]:
        lines = ["Rice out"] if count > 10 else []
        return _report(lines + ["Rice got"])


class SuperMarket:
    """Buys from all its vendors in one call."""

    def __init__(self, salts_vendor: Vendor, milks_vendor: Vendor, rices_vendor: Vendor) -> None:
        self.salts_vendor = salts_vendor
        self.milks_vendor = milks_vendor
        self.rices_vendor = rices_vendor

    def sell(self, salt: int, milk: int, rice: int) -> list[str]:
        """Buy from each vendor in turn; return all lines shown."""
        return (
            self.salts_vendor.sell(salt)
            + self.milks_vendor.sell(milk)
            + self.rices_vendor.sell(rice)
        )


def new_super_market() -> SuperMarket:
    """A supermarket with its usual vendors."""
    return SuperMarket(MilkVendor(), MilkVendor(), RiceVendor())