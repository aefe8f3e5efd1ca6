"""Locale-style decimal rendering used by the result formatter."""

from __future__ import annotations

from decimal import Context, Decimal, ROUND_HALF_UP

# locale -> (group separator, decimal separator)
SEPARATORS = {
    "vi-VN": (".", ","),
    "en-US": (",", "."),
}

DEFAULT_LOCALE = "vi-VN"

# Wide enough to quantize any finite double without losing integer digits.
_CTX = Context(prec=400, rounding=ROUND_HALF_UP)


def round_half_up(value: float, max_fraction_digits: int) -> Decimal:
    """Round ``value`` to at most ``max_fraction_digits`` places.

    Rounds the shortest decimal that reproduces the float (its ``repr``),
    so 1.005 rounds to 1.01 rather than to the binary neighbour 1.00.
    """
    exp = Decimal(1).scaleb(-max_fraction_digits)
    return Decimal(repr(value)).quantize(exp, context=_CTX)


def render_decimal(value: float, max_fraction_digits: int = 2, locale: str = DEFAULT_LOCALE) -> str:
    """Render a finite float with digit grouping and no trailing zeros."""
    group, point = SEPARATORS.get(locale, SEPARATORS[DEFAULT_LOCALE])
    text = format(round_half_up(value, max_fraction_digits), ",f")
    whole, _, frac = text.partition(".")
    frac = frac.rstrip("0")
    whole = whole.replace(",", group)
    return f"{whole}{point}{frac}" if frac else whole
