"""Everyday percentage helpers.

Three questions are covered:

* how much is ``x`` % of ``y``;
* what percentage of ``total`` is ``part``;
* the final price after a discount or increase of ``rate`` % on ``price``.

Example
-------

>>> percentage_of(10, 500)
50.0
>>> percent_of_total(25, 100)
25.0
>>> apply_change(10, 200, discount=True)
PercentChange(final_value=180.0, change_amount=20.0)
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional

_DECIMAL_RE = re.compile(r"^[\d.]*$")
_TRAILING_ZEROS_RE = re.compile(r"\.?0+$")


@dataclass(frozen=True)
class PercentChange:
    final_value: float
    change_amount: float


def percentage_of(x: float, y: float) -> float:
    return (x / 100) * y


def percent_of_total(part: float, total: float) -> float:
    """Share of ``total`` represented by ``part``, in percent (0 when total is 0)."""
    if total == 0:
        return 0.0
    return (part / total) * 100


def apply_change(rate: float, price: float, discount: bool = True) -> PercentChange:
    amount = percentage_of(rate, price)
    final = price - amount if discount else price + amount
    return PercentChange(final_value=final, change_amount=amount)


def is_decimal_text(text: str) -> bool:
    """True when ``text`` holds only digits and dots (the empty string included)."""
    return bool(_DECIMAL_RE.match(text))


def parse_decimal(text: Optional[str]) -> Optional[float]:
    """Parse a free-form field, returning ``None`` for empty or invalid input."""
    if not text or not is_decimal_text(text):
        return None
    try:
        return float(text)
    except ValueError:
        # e.g. "." or "1.2.3"
        return None


def format_result(value: Optional[float], unit: str = "", fallback: str = "Aguardando valores...") -> str:
    """Render ``value`` with up to four decimals, trailing zeros stripped."""
    if value is None or not math.isfinite(value):
        return fallback
    text = _TRAILING_ZEROS_RE.sub("", f"{value:.4f}")
    return f"{text}{unit}"


__all__ = [
    "PercentChange",
    "percentage_of",
    "percent_of_total",
    "apply_change",
    "is_decimal_text",
    "parse_decimal",
    "format_result",
]
