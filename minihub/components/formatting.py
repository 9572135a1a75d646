"""Display formatting for currency and rates (pt-BR conventions)."""

from __future__ import annotations

import math
from typing import Optional

MISSING = "—"


def format_brl(value: Optional[float]) -> str:
    """Format ``value`` as Brazilian reais, e.g. ``R$ 269.567,15``.

    Thousands use a dot and decimals a comma.  Negative values carry the
    minus sign before the currency symbol; ``None`` and non-finite values
    render as a dash.
    """
    if value is None or not math.isfinite(value):
        return MISSING
    sign = "-" if value < 0 else ""
    integer_part, decimal_part = f"{abs(value):,.2f}".split(".")
    return f"{sign}R$ {integer_part.replace(',', '.')},{decimal_part}"


def format_pct(fraction: Optional[float], decimals: int = 2) -> str:
    """Render a fraction as a percentage string (0.0676 -> ``6.76%``)."""
    if fraction is None or not math.isfinite(fraction):
        return MISSING
    return f"{fraction * 100:.{decimals}f}%"


def format_number(value: Optional[float], decimals: int = 2) -> str:
    if value is None or not math.isfinite(value):
        return MISSING
    return f"{value:.{decimals}f}"


def format_pct_of_reference(percent: Optional[float], reference: str = "CDI") -> str:
    """Whole-number percentage of a reference rate (``126% do CDI``)."""
    text = format_number(percent, 0)
    if text == MISSING:
        return text
    return f"{text}% do {reference}"
