"""Passive-income planner.

Given the monthly income someone wants to live on and the gross real rate of
an inflation-indexed bond (Tesouro IPCA+ style, quoted as "IPCA + X%"), the
planner sizes the capital required and derives the minimum nominal rates
other instruments must pay to match that bond after tax:

* tax-exempt fixed-rate paper (LCI/LCA) – compounds the net real yield over
  inflation;
* taxable fixed-rate paper (CDB, Tesouro Prefixado) – the same rate grossed up
  for the 15 % income tax;
* taxable floating paper (post-fixed CDB) – the taxable rate expressed as a
  percentage of the CDI reference rate.

No rounding is applied; formatting belongs to the presentation layer.

Example
-------

>>> from minihub.calculators.market_rates import MarketRates
>>> res = compute_strategy(PlannerInput(1518, 0.0795), MarketRates(0.047, 0.11))
>>> round(res.required_capital, 2)
269567.15
>>> round(res.min_rate_percent_of_reference, 2)
125.94
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from minihub.calculators.market_rates import MarketRates
from minihub.config import TAX_RATE


class PlannerInputError(ValueError):
    """Raised when the planner inputs cannot produce a strategy."""


@dataclass(frozen=True)
class PlannerInput:
    desired_monthly_income: float
    gross_real_rate: float


@dataclass(frozen=True)
class PlannerResult:
    required_capital: float
    monthly_income_target: float
    net_real_yield: float
    gross_real_rate: float
    min_rate_tax_exempt: float
    min_rate_taxable: float
    min_rate_percent_of_reference: float


def _is_positive_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value) and value > 0


def net_real_yield(gross_real_rate: float, tax_rate: float = TAX_RATE) -> float:
    """Real yield left after income tax."""
    return gross_real_rate * (1 - tax_rate)


def _percent_of(rate: float, reference_rate: float) -> float:
    # A zero reference rate has no meaningful percentage; pass IEEE semantics
    # through (x/0 -> ±inf, 0/0 -> nan) for the display layer to handle.
    if reference_rate == 0:
        if rate == 0 or math.isnan(rate):
            return math.nan
        return math.copysign(math.inf, rate) * math.copysign(1.0, reference_rate)
    return (rate / reference_rate) * 100


def compute_strategy(planner_input: PlannerInput, rates: MarketRates) -> PlannerResult:
    """Size the capital and competitive rates for ``planner_input``.

    Parameters
    ----------
    planner_input : PlannerInput
        Desired monthly income (currency units) and gross real rate (fraction).
    rates : MarketRates
        Inflation and reference rate in effect.

    Returns
    -------
    PlannerResult
        Every derived figure, unrounded.

    Raises
    ------
    PlannerInputError
        If the income or the rate is not a positive finite number.  Nothing
        is computed in that case.
    """
    income = planner_input.desired_monthly_income
    gross = planner_input.gross_real_rate
    if not _is_positive_number(income):
        raise PlannerInputError("Por favor, preencha a Renda Mensal desejada.")
    if not _is_positive_number(gross):
        raise PlannerInputError("Por favor, preencha uma Taxa Real válida.")

    net = net_real_yield(gross)
    required_capital = (income * 12) / net
    min_exempt = (1 + net) * (1 + rates.inflation_rate) - 1
    min_taxable = min_exempt / (1 - TAX_RATE)
    pct_reference = _percent_of(min_taxable, rates.reference_rate)

    return PlannerResult(
        required_capital=required_capital,
        monthly_income_target=income,
        net_real_yield=net,
        gross_real_rate=gross,
        min_rate_tax_exempt=min_exempt,
        min_rate_taxable=min_taxable,
        min_rate_percent_of_reference=pct_reference,
    )


__all__ = [
    "PlannerInput",
    "PlannerResult",
    "PlannerInputError",
    "net_real_yield",
    "compute_strategy",
]
