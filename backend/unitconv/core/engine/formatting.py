"""Magnitude-scaled number formatting.

Values are scaled into a readable range and suffixed with the Vietnamese
magnitude word, e.g. ``2_500_000 -> "2,5 triệu"`` and
``0.0005 -> "0,5 phần nghìn"``. Ordinary values (zero, or between 1 and
1000 in magnitude) are printed as-is with up to 12 fraction digits.
"""

from __future__ import annotations

import math
from typing import Optional

from unitconv.core.catalog.quantity import Unit
from unitconv.utils.numbers import DEFAULT_LOCALE, render_decimal

NOT_A_NUMBER = "NaN"
EMPTY_VALUE = "(rỗng)"

SCALED_DIGITS = 2
PLAIN_DIGITS = 12

# (lower bound and divisor, suffix), checked in order
LARGE_BUCKETS = (
    (1e24, "triệu tỉ tỉ"),
    (1e21, "nghìn tỉ tỉ"),
    (1e18, "tỉ tỉ"),
    (1e15, "triệu tỉ"),
    (1e12, "nghìn tỉ"),
    (1e9, "tỉ"),
    (1e6, "triệu"),
    (1e3, "ngàn"),
)

# (exclusive upper bound, multiplier, suffix), checked in order
SMALL_BUCKETS = (
    (1e-6, 1e9, "phần tỉ"),
    (1e-3, 1e6, "phần triệu"),
    (1.0, 1e3, "phần nghìn"),
)


def _scale(value: float) -> tuple[float, str]:
    a = abs(value)
    for bound, suffix in LARGE_BUCKETS:
        if a >= bound:
            return value / bound, suffix
    if a > 0:
        for bound, factor, suffix in SMALL_BUCKETS:
            if a < bound:
                return value * factor, suffix
    return value, ""


def format_number(value: float, locale: Optional[str] = None) -> str:
    """Render ``value`` with a magnitude word and locale digit grouping.

    Non-finite values render as ``"NaN"``. Never raises.
    """
    if not math.isfinite(value):
        return NOT_A_NUMBER
    locale = locale or DEFAULT_LOCALE
    scaled, suffix = _scale(value)
    if not suffix:
        return render_decimal(scaled, PLAIN_DIGITS, locale)
    return f"{render_decimal(scaled, SCALED_DIGITS, locale)} {suffix}"


def describe_value(value: Optional[float], unit: Optional[Unit] = None, locale: Optional[str] = None) -> str:
    """Formatted value followed by the unit's display name."""
    if value is None:
        return EMPTY_VALUE
    text = format_number(value, locale)
    return f"{text} {unit.name}" if unit is not None else text
