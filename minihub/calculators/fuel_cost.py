# calculators/fuel_cost.py
from __future__ import annotations

import math
from dataclasses import dataclass

WEEKS_PER_MONTH = 4
MAX_DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class FuelCost:
    litres_daily: float = 0.0
    cost_daily: float = 0.0
    cost_weekly: float = 0.0
    cost_monthly: float = 0.0


def clamp_input(name: str, value) -> float:
    """Coerce a raw form value: unparseable -> 0, negatives -> 0, days capped at 7."""
    try:
        num = float(value)
    except (TypeError, ValueError):
        num = 0.0
    if math.isnan(num):
        num = 0.0
    if name == "days_per_week":
        num = min(num, MAX_DAYS_PER_WEEK)
    return max(num, 0.0)


def fuel_cost(daily_distance_km: float,
              km_per_litre: float,
              price_per_litre: float,
              days_per_week: float) -> FuelCost:
    """Estimate fuel spend from the average consumption of a vehicle.

    A month is taken as four weeks.  If any input is missing, zero or
    negative every figure is zero.  Results are rounded to cents.
    """
    values = (daily_distance_km, km_per_litre, price_per_litre, days_per_week)
    if any(not v or v <= 0 for v in values):
        return FuelCost()

    litres = daily_distance_km / km_per_litre
    daily = litres * price_per_litre
    weekly = daily * days_per_week
    monthly = weekly * WEEKS_PER_MONTH

    return FuelCost(
        litres_daily=round(litres, 2),
        cost_daily=round(daily, 2),
        cost_weekly=round(weekly, 2),
        cost_monthly=round(monthly, 2),
    )


__all__ = ["FuelCost", "clamp_input", "fuel_cost"]
