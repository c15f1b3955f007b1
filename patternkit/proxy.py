"""A proxy that registers companies on a founder's behalf."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

MINIMUM_CAPITAL = 10000
ENTERPRISE_NUMBER = "abvdefe12450"


class Nation(IntEnum):
    CN = 0
    UK = 1
    JP = 2


class ConditionError(Exception):
    """The founder does not meet the conditions for registration."""

    def __init__(self) -> None:
        super().__init__("Condition not OK")


@dataclass
class Pioneer:
    """A founder who wants a company."""

    account_money: int = 0
    nation_kind: Nation = Nation.CN

    def register_company(self, company_name: str) -> tuple[str, str]:
        """A founder cannot register alone: returns empty name and number."""
        return "", ""

    def condition(self) -> tuple[int, Nation]:
        """The founder's money and nationality."""
        return self.account_money, self.nation_kind


@dataclass
class RegistryProxyCompany:
    """Registers companies for founders who meet the conditions."""

    pioneer: Pioneer

    def register_company(self, company_name: str) -> tuple[str, str]:
        """Return the company name and its enterprise number; ConditionError if refused."""
        money, nation = self.pioneer.condition()
        if money < MINIMUM_CAPITAL or nation != Nation.CN:
            raise ConditionError()
        return company_name, ENTERPRISE_NUMBER