"""Conversion and formatting endpoints."""

import logging

from fastapi import APIRouter, HTTPException

from unitconv.config import settings
from unitconv.models.schemas import (
    ConvertRequest,
    ConvertAllRequest,
    FormatRequest,
    ConvertResponse,
    UnitValueResponse,
    FormatResponse,
    finite_or_none,
)
from unitconv.core.catalog.errors import UnknownQuantityError, UnresolvedUnitError
from unitconv.core.catalog.registry import get_quantity, resolve_unit
from unitconv.core.engine.convert import convert_all, convert_units
from unitconv.core.engine.formatting import describe_value, format_number

logger = logging.getLogger(__name__)

router = APIRouter(tags=["convert"])


def _lookup_error(e: Exception) -> HTTPException:
    """Map catalog errors onto HTTP errors."""
    if isinstance(e, UnknownQuantityError):
        logger.warning("Conversion rejected: %s", e)
        return HTTPException(404, detail=[{"message": str(e), "quantity": e.quantity}])
    return HTTPException(422, detail=[{"message": str(e), "unit": e.unit}])


@router.post("/convert", response_model=ConvertResponse)
async def convert_value(req: ConvertRequest):
    """Convert one value between two units of a quantity."""
    try:
        q = get_quantity(req.quantity)
        source = resolve_unit(q.key, req.from_unit, settings.strict_units)
        target = resolve_unit(q.key, req.to_unit, settings.strict_units)
    except (UnknownQuantityError, UnresolvedUnitError) as e:
        raise _lookup_error(e)

    result = float("nan") if req.value is None else convert_units(source, target, req.value)
    return {
        "quantity": q.key.value,
        "from_unit": source.key,
        "to_unit": target.key,
        "value": finite_or_none(req.value),
        "result": finite_or_none(result),
        "formatted": format_number(result, settings.number_locale),
        "input_display": describe_value(req.value, source, settings.number_locale),
        "base": q.base,
    }


@router.post("/convert/all", response_model=list[UnitValueResponse])
async def convert_to_all_units(req: ConvertAllRequest):
    """Convert one value into every unit of its quantity."""
    value = float("nan") if req.value is None else req.value
    try:
        rows = convert_all(req.quantity, req.from_unit, value, strict=settings.strict_units)
    except (UnknownQuantityError, UnresolvedUnitError) as e:
        raise _lookup_error(e)

    return [
        {
            "key": unit.key,
            "name": unit.name,
            "result": finite_or_none(result),
            "formatted": format_number(result, settings.number_locale),
        }
        for unit, result in rows
    ]


@router.post("/format", response_model=FormatResponse)
async def format_value(req: FormatRequest):
    """Render a number the way conversion results are displayed."""
    value = float("nan") if req.value is None else req.value
    return {"formatted": format_number(value, settings.number_locale)}
