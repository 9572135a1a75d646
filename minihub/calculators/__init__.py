"""Pure calculators behind each MiniHub tool.

The `calculators` package contains small, focused modules, one per tool:

* ``market_rates`` – IPCA/CDI lookup from BrasilAPI with per-field fallbacks.
* ``passive_income`` – capital sizing and minimum competitive rates for a
  passive-income target.
* ``fuel_cost`` – daily, weekly and monthly fuel spend.
* ``percentage`` – percent-of, share-of-total and discount/increase helpers.
* ``password`` – random password generation from selectable character sets.

None of them touch Streamlit; the widgets live in ``minihub.components``.
"""

from . import market_rates, passive_income, fuel_cost, percentage, password  # noqa: F401

__all__ = ["market_rates", "passive_income", "fuel_cost", "percentage", "password"]
