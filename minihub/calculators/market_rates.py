"""Market rates used by the passive-income planner.

Rates come from BrasilAPI's ``/taxas/v1`` endpoint, which returns a list of
records such as ``{"nome": "IPCA", "valor": 4.7}`` with values in percent.
Only two entries matter here:

* ``IPCA`` – twelve-month accumulated inflation.
* ``CDI`` – the short-term interbank reference rate.

The provider is best effort.  Each field falls back to a fixed default on its
own, so a payload that lacks ``IPCA`` still yields the fetched ``CDI``.  A
transport failure, a non-2xx status or an unreadable body yields both
defaults.  Nothing here raises: failures are logged and swallowed.

Example
-------

>>> parse_rates([{"nome": "CDI", "valor": 10.0}])
MarketRates(inflation_rate=0.047, reference_rate=0.1)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterable, Mapping, Optional

import requests

from minihub.config import (
    FALLBACK_RATES,
    INFLATION_KEY,
    RATES_URL,
    REFERENCE_KEY,
    REQUEST_TIMEOUT,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarketRates:
    """Inflation and reference rate, both as fractions (0.047 == 4.7%)."""

    inflation_rate: float
    reference_rate: float


FALLBACK = MarketRates(
    inflation_rate=FALLBACK_RATES["inflation_rate"],
    reference_rate=FALLBACK_RATES["reference_rate"],
)


def _find_rate(payload: Iterable, name: str) -> Optional[float]:
    """Return the ``valor`` of the first record named ``name`` as a fraction."""
    for entry in payload:
        if not isinstance(entry, Mapping) or entry.get("nome") != name:
            continue
        value = entry.get("valor")
        # bool is a Real subclass; a flag is not a rate
        if isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value):
            return float(value) / 100
        logger.warning("Entry %s has an invalid value %r", name, value)
        return None
    return None


def parse_rates(payload: Iterable) -> MarketRates:
    """Extract :class:`MarketRates` from a provider payload.

    Parameters
    ----------
    payload : iterable of mappings
        Records with ``nome`` and ``valor`` keys.

    Returns
    -------
    MarketRates
        Always complete; a missing entry is replaced by its fallback.
    """
    entries = list(payload)

    inflation = _find_rate(entries, INFLATION_KEY)
    if inflation is None:
        logger.warning("%s not found in rates payload, using fallback.", INFLATION_KEY)
        inflation = FALLBACK.inflation_rate

    reference = _find_rate(entries, REFERENCE_KEY)
    if reference is None:
        logger.warning("%s not found in rates payload, using fallback.", REFERENCE_KEY)
        reference = FALLBACK.reference_rate

    return MarketRates(inflation_rate=inflation, reference_rate=reference)


def fetch_market_rates(
    session: Optional[requests.Session] = None,
    url: str = RATES_URL,
    timeout: float = REQUEST_TIMEOUT,
) -> MarketRates:
    """Fetch current rates with a single GET, falling back on any failure.

    ``session`` may be any object exposing ``get(url, timeout=...)``; the
    module-level :func:`requests.get` is used when omitted.
    """
    getter = session.get if session is not None else requests.get
    try:
        resp = getter(url, timeout=timeout)
    except requests.RequestException as exc:
        logger.error("Error fetching rates (IPCA/CDI): %s", exc)
        return FALLBACK

    if not resp.ok:
        logger.error("Rates request failed with status %s: %s", resp.status_code, resp.text)
        return FALLBACK

    try:
        payload = resp.json()
    except ValueError as exc:
        logger.error("Rates response is not valid JSON: %s", exc)
        return FALLBACK

    if not isinstance(payload, list):
        logger.error("Unexpected rates payload type %s", type(payload).__name__)
        return FALLBACK

    rates = parse_rates(payload)
    logger.info(
        "Market rates loaded: inflation=%.4f reference=%.4f",
        rates.inflation_rate,
        rates.reference_rate,
    )
    return rates


__all__ = ["MarketRates", "FALLBACK", "parse_rates", "fetch_market_rates"]
