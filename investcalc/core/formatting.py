"""Currency display helpers for projection results."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Dict

from investcalc.core.projection import ProjectionResult


def format_currency(
    value: float,
    prefix: str = "₹",
    decimal_scale: int = 0,
    thousand_separator: str = ",",
) -> str:
    """Render `value` like "₹423,970": groups of three, halves rounded away from zero."""
    if decimal_scale < 0:
        raise ValueError(f"decimal_scale must be >= 0, got {decimal_scale}")
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    exact = Decimal(repr(float(value)))
    with localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + decimal_scale + 2)
        amount = exact.quantize(Decimal(1).scaleb(-decimal_scale), rounding=ROUND_HALF_UP)

    sign = "-" if amount < 0 else ""
    digits = f"{abs(amount):,.{decimal_scale}f}"
    if thousand_separator != ",":
        digits = digits.replace(",", thousand_separator)
    return f"{sign}{prefix}{digits}"


def format_result(
    result: ProjectionResult,
    prefix: str = "₹",
    decimal_scale: int = 0,
) -> Dict[str, str]:
    """Format every field of a projection result, keyed by field name."""
    return {
        name: format_currency(value, prefix=prefix, decimal_scale=decimal_scale)
        for name, value in result.model_dump().items()
    }
