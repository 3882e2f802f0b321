"""Locale-aware rendering of plain numbers."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from sketchunits.core.locale.probe import decimal_separator
from sketchunits.host import get_host


def format_float(value: float, trim: bool = False, precision: Optional[int] = None) -> str:
    """Format ``value`` with the host's decimal separator.

    Args:
        value: Number to format
        trim: Drop trailing zeros after the separator, and the separator
            itself when nothing is left. The host does this for areas and volumes.
        precision: Number of decimals; defaults to the model's length precision

    Returns:
        The formatted number, e.g. ``"1,50"`` in a comma locale
    """
    if precision is None:
        precision = get_host().display_options().length_precision
    if precision < 0:
        raise ValueError(f"Precision must be non-negative, got {precision}")
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value {value!r}")

    # Halves round away from zero on the shortest repr, so 2.675 -> 2.68.
    exact = Decimal(repr(float(value)))
    with localcontext() as ctx:
        # Room for every integer digit plus the requested decimals.
        ctx.prec = max(ctx.prec, exact.adjusted() + precision + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)
        if rounded.is_zero():
            rounded = abs(rounded)
    num = f"{rounded:f}"

    if trim and "." in num:
        num = num.rstrip("0").rstrip(".")

    return num.replace(".", decimal_separator())
