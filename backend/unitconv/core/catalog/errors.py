"""Catalog lookup errors."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog lookup failures."""


class UnknownQuantityError(CatalogError, KeyError):
    def __init__(self, quantity: str):
        self.quantity = quantity
        super().__init__(f"Unknown quantity '{quantity}'")

    def __str__(self) -> str:
        return self.args[0]


class UnresolvedUnitError(CatalogError, KeyError):
    def __init__(self, quantity: str, unit: str):
        self.quantity = quantity
        self.unit = unit
        super().__init__(f"Unit '{unit}' is not defined for quantity '{quantity}'")

    def __str__(self) -> str:
        return self.args[0]
