"""A fluent builder for cars."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass
class CarProto:
    """A car and its parts."""

    wheel: int = 0
    engine: str = ""
    max_speed: int = 0
    brand_name: str = ""

    @property
    def speed(self) -> int:
        return self.max_speed

    @property
    def brand(self) -> str:
        return self.brand_name

    def brief(self) -> list[str]:
        """Describe the car; return the lines shown."""
        lines = [
            "this is a cool car",
            f"car wheel size:  {self.wheel}",
            f"car MaxSpeed:  {self.max_speed}",
            f"car Engine:  {self.engine}",
        ]
        for line in lines:
            print(line)
        return lines


class CarStudio:
    """Sets a car's parts step by step and builds copies of it."""

    def __init__(self) -> None:
        self._prototype = CarProto()

    def wheel(self, wheel: int) -> "CarStudio":
        self._prototype.wheel = wheel
        return self

    def engine(self, engine: str) -> "CarStudio":
        self._prototype.engine = engine
        return self

    def speed(self, max_speed: int) -> "CarStudio":
        self._prototype.max_speed = max_speed
        return self

    def brand(self, brand: str) -> "CarStudio":
        self._prototype.brand_name = brand
        return self

    def build(self) -> CarProto:
        """A new car with the parts set so far."""
        return dataclasses.replace(self._prototype)