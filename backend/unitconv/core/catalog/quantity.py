"""Quantity and unit definitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from unitconv.core.catalog.transforms import Linear, Transform


class QuantityKey(str, Enum):
    LENGTH = "length"
    MASS = "mass"
    TIME = "time"
    AREA = "area"
    VOLUME = "volume"
    SPEED = "speed"
    ACCELERATION = "acceleration"
    FORCE = "force"
    PRESSURE = "pressure"
    ENERGY = "energy"
    POWER = "power"
    TEMPERATURE = "temperature"
    DENSITY = "density"


@dataclass(frozen=True)
class Unit:
    key: str
    name: str
    transform: Transform

    def to_base(self, value: float) -> float:
        return self.transform.to_base(value)

    def from_base(self, value: float) -> float:
        return self.transform.from_base(value)

    @property
    def is_linear(self) -> bool:
        return isinstance(self.transform, Linear)


def linear_unit(key: str, name: str, factor: float) -> Unit:
    """Build a unit worth ``factor`` SI base units."""
    return Unit(key, name, Linear(factor))


@dataclass(frozen=True)
class Quantity:
    key: QuantityKey
    label: str
    base: str  # SI base symbol, display only
    units: tuple[Unit, ...]

    def __post_init__(self) -> None:
        if not self.units:
            raise ValueError(f"Quantity '{self.key.value}' has no units")
        keys = [u.key for u in self.units]
        dupes = sorted({k for k in keys if keys.count(k) > 1})
        if dupes:
            raise ValueError(
                f"Duplicate unit keys in '{self.key.value}': {', '.join(dupes)}"
            )

    @property
    def default_unit(self) -> Unit:
        return self.units[0]

    def find(self, unit_key: str) -> Optional[Unit]:
        for unit in self.units:
            if unit.key == unit_key:
                return unit
        return None
