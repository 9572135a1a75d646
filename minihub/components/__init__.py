"""Expose component submodules for convenience."""

from .catalogue import TOOL_CATEGORIES, get_tool_info
from .charts import min_rates_chart, fuel_cost_chart
from .tools import render_tool

__all__ = [
    "TOOL_CATEGORIES",
    "get_tool_info",
    "min_rates_chart",
    "fuel_cost_chart",
    "render_tool",
]
