"""Read-only lookups over the static unit catalog."""

from __future__ import annotations

import logging
from typing import Union

from unitconv.core.catalog.errors import UnknownQuantityError, UnresolvedUnitError
from unitconv.core.catalog.quantity import Quantity, QuantityKey, Unit
from unitconv.core.catalog.tables import QUANTITIES

logger = logging.getLogger(__name__)

QuantityRef = Union[QuantityKey, str]


def list_quantities() -> list[QuantityKey]:
    """Return every quantity key in catalog order."""
    return list(QUANTITIES)


def get_quantity(key: QuantityRef) -> Quantity:
    """Look up a quantity by enum member or string key.

    Raises UnknownQuantityError for keys outside the catalog.
    """
    try:
        return QUANTITIES[QuantityKey(key)]
    except ValueError:
        raise UnknownQuantityError(str(key)) from None


def units_of(key: QuantityRef) -> tuple[Unit, ...]:
    """Return the ordered units of a quantity."""
    return get_quantity(key).units


def resolve_unit(quantity: QuantityRef, unit_key: str, strict: bool = False) -> Unit:
    """Find ``unit_key`` within ``quantity``.

    An unmatched key resolves to the quantity's first unit unless ``strict``
    is set, in which case UnresolvedUnitError is raised.
    """
    q = get_quantity(quantity)
    unit = q.find(unit_key)
    if unit is not None:
        return unit
    if strict:
        raise UnresolvedUnitError(q.key.value, unit_key)
    logger.debug(
        "Unit %r not in %s, falling back to %r",
        unit_key, q.key.value, q.default_unit.key,
    )
    return q.default_unit


def default_units(quantity: QuantityRef) -> tuple[Unit, Unit]:
    """Initial (from, to) selection for a quantity: its first two units."""
    units = units_of(quantity)
    return units[0], units[1] if len(units) > 1 else units[0]
