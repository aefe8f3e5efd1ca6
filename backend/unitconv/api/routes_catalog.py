"""Catalog endpoints: which quantities and units are available."""

import logging

from fastapi import APIRouter, HTTPException

from unitconv.models.schemas import QuantityResponse, UnitResponse
from unitconv.core.catalog.errors import UnknownQuantityError
from unitconv.core.catalog.registry import default_units, get_quantity, list_quantities, units_of

logger = logging.getLogger(__name__)

router = APIRouter(tags=["catalog"])


@router.get("/quantities", response_model=list[QuantityResponse])
async def quantities():
    """List quantities in catalog order with their default unit pair."""
    out = []
    for key in list_quantities():
        q = get_quantity(key)
        src, dst = default_units(key)
        out.append({
            "key": q.key.value,
            "label": q.label,
            "base": q.base,
            "default_from": src.key,
            "default_to": dst.key,
        })
    return out


@router.get("/quantities/{quantity}/units", response_model=list[UnitResponse])
async def quantity_units(quantity: str):
    """Units of one quantity, in display order."""
    try:
        units = units_of(quantity)
    except UnknownQuantityError as e:
        logger.warning("Catalog lookup failed: %s", e)
        raise HTTPException(404, detail=[{"message": str(e), "quantity": e.quantity}])
    return [
        {"key": u.key, "name": u.name, "transform": u.transform.as_dict()}
        for u in units
    ]
