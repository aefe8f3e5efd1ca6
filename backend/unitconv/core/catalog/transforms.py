"""Transform pairs mapping a unit's values to and from its quantity's SI base.

Two kinds exist:

- ``Linear``: the unit is ``factor`` base units (``v * factor``).
- ``Affine``: a scaled and shifted scale, used for temperatures
  (``(v - origin) * scale + offset``).

Both are plain frozen dataclasses so the catalog can be inspected and
serialized without calling any code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Linear:
    factor: float

    def __post_init__(self) -> None:
        if self.factor == 0:
            raise ValueError("Linear factor must be non-zero")

    def to_base(self, value: float) -> float:
        return value * self.factor

    def from_base(self, value: float) -> float:
        return value / self.factor

    def as_dict(self) -> dict:
        return {"kind": "linear", "factor": self.factor}


@dataclass(frozen=True)
class Affine:
    scale: float
    offset: float = 0.0
    origin: float = 0.0  # value on this scale that maps to ``offset`` in base

    def __post_init__(self) -> None:
        if self.scale == 0:
            raise ValueError("Affine scale must be non-zero")

    def to_base(self, value: float) -> float:
        return (value - self.origin) * self.scale + self.offset

    def from_base(self, value: float) -> float:
        return (value - self.offset) / self.scale + self.origin

    def as_dict(self) -> dict:
        return {
            "kind": "affine",
            "scale": self.scale,
            "offset": self.offset,
            "origin": self.origin,
        }


Transform = Union[Linear, Affine]
