"""A mediator that stands between a landlord and a tenant."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass
class Person:
    """Anyone taking part: each has a name and a wallet."""

    name: str = ""
    wallet_assets: int = 0


@dataclass
class Tenant(Person):
    """Rents a room through the mediator."""

    furniture: str = ""

    def ask_repair(self, mediator: "Mediator") -> Optional[str]:
        """Ask the landlord, through the mediator, to fix the furniture."""
        print("Tenant: i need landlord fix furniture:")
        return mediator.serve(self)


@dataclass
class Landlord(Person):
    """Lets a room through the mediator and collects rent."""

    rent_account: int = 0

    def collect_rent(self, mediator: "Mediator") -> Optional[str]:
        """Collect the rent through the mediator."""
        print("Landlord: collect money")
        print(f"Landlord: RentAccout {self.rent_account}, WalletAssets {self.wallet_assets}")
        return mediator.serve(self)


@dataclass
class Mediator(Person):
    """Acts for one landlord and one tenant."""

    tenant: Optional[Tenant] = field(default=None, repr=False)
    landlord: Optional[Landlord] = field(default=None, repr=False)
    fee_landlord: int = 0
    fee_tenant: int = 0

    def register_room(self, landlord: Landlord) -> None:
        """List a landlord's room."""
        self.landlord = landlord

    def rent_out_room(self, tenant: Tenant) -> None:
        """Let the room to a tenant."""
        self.tenant = tenant

    def serve(self, client: Union[Tenant, Landlord, object]) -> Optional[str]:
        """Do the work a client asks for; return what was done, if anything."""
        if isinstance(client, Tenant):
            line = "i am serving tenant"
        elif isinstance(client, Landlord):
            line = "i am serving landlord"
        else:
            return None
        print(line)
        return line