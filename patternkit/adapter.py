"""An adapter that lets a two-pin plug charge from a three-pin socket."""

from __future__ import annotations

from typing import Protocol


class Plug(Protocol):
    def pins(self) -> int: ...


class TwoPinPlugin:
    def pins(self) -> int:
        return 2


class ThreePinPowerSocket:
    """Charges three-pin plugs only."""

    def three_pin_charging(self, plug: Plug) -> bool:
        """Charge ``plug`` if it has three pins; return whether it charged."""
        if plug.pins() != 3:
            print("i can not charge for this type")
            return False
        print("charging for three pin plug")
        return True


class PowerAdapter:
    """Sits between a two-pin plug and a three-pin socket."""

    def __init__(self, socket: ThreePinPowerSocket) -> None:
        self._socket = socket
        self._pin = 0

    def pins(self) -> int:
        """The pins the adapter presents to the socket."""
        return self._pin

    def plug_charging(self, plug: Plug) -> bool:
        """Charge a two-pin plug through the socket; return whether it charged."""
        if plug.pins() != 2:
            return False
        self._pin = 3
        return self._socket.three_pin_charging(self)