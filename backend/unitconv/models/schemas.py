"""Pydantic schemas for API request/response validation."""

from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel, field_validator


def finite_or_none(v: Optional[float]) -> Optional[float]:
    """JSON has no NaN/Infinity; such results are sent as null."""
    if v is None or not math.isfinite(v):
        return None
    return v


class ConvertRequest(BaseModel):
    quantity: str = "length"
    from_unit: str
    to_unit: str
    value: Optional[float] = 1.0

    @field_validator("from_unit", "to_unit")
    @classmethod
    def key_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Unit key cannot be empty")
        return v


class ConvertAllRequest(BaseModel):
    quantity: str = "length"
    from_unit: str
    value: Optional[float] = 1.0

    @field_validator("from_unit")
    @classmethod
    def key_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Unit key cannot be empty")
        return v


class FormatRequest(BaseModel):
    value: Optional[float] = None


class QuantityResponse(BaseModel):
    key: str
    label: str
    base: str
    default_from: str
    default_to: str


class UnitResponse(BaseModel):
    key: str
    name: str
    transform: dict


class ConvertResponse(BaseModel):
    quantity: str
    from_unit: str
    to_unit: str
    value: Optional[float]
    result: Optional[float]
    formatted: str
    input_display: str
    base: str


class UnitValueResponse(BaseModel):
    key: str
    name: str
    result: Optional[float]
    formatted: str


class FormatResponse(BaseModel):
    formatted: str
