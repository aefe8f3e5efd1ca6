"""Unit conversion through the SI base unit of a quantity."""

from __future__ import annotations

from unitconv.core.catalog.quantity import Unit
from unitconv.core.catalog.registry import QuantityRef, get_quantity, resolve_unit


def convert_units(source: Unit, target: Unit, value: float) -> float:
    """Convert ``value`` from ``source`` to ``target`` via the base unit."""
    if source is target:
        return value
    return target.from_base(source.to_base(value))


def convert(
    quantity: QuantityRef,
    from_key: str,
    to_key: str,
    value: float,
    *,
    strict: bool = False,
) -> float:
    """Convert ``value`` between two units of ``quantity``.

    Unit keys that don't belong to the quantity fall back to its first unit
    (or raise UnresolvedUnitError when ``strict``). NaN and infinities pass
    through the arithmetic unchanged.
    """
    source = resolve_unit(quantity, from_key, strict)
    target = resolve_unit(quantity, to_key, strict)
    return convert_units(source, target, value)


def convert_all(
    quantity: QuantityRef,
    from_key: str,
    value: float,
    *,
    strict: bool = False,
) -> list[tuple[Unit, float]]:
    """Express ``value`` in every unit of ``quantity``, in catalog order."""
    q = get_quantity(quantity)
    source = resolve_unit(q.key, from_key, strict)
    return [(unit, convert_units(source, unit, value)) for unit in q.units]
