# components/charts.py
# Plotly chart helpers used by the tools.
# All functions return a Plotly Figure that Streamlit can display with st.plotly_chart(...).

import math
from typing import Optional

import plotly.graph_objects as go

from minihub.calculators.fuel_cost import FuelCost
from minihub.calculators.passive_income import PlannerResult


# ---------- Minimum competitive rates ----------
def min_rates_chart(result: PlannerResult,
                    inflation_rate: float,
                    reference_rate: Optional[float] = None,
                    title: str = "Taxas Mínimas para Superar o Tesouro IPCA+") -> go.Figure:
    """Bars for the minimum nominal rates, with inflation (and CDI) as reference lines."""
    labels = ["Ganho real líquido", "LCI/LCA (isenta)", "CDB/Prefixado (IR 15%)"]
    values = [result.net_real_yield * 100, result.min_rate_tax_exempt * 100, result.min_rate_taxable * 100]

    fig = go.Figure(go.Bar(
        x=labels, y=values,
        text=[f"{v:.2f}%" for v in values], textposition="outside",
        hovertemplate="%{x}<br>%{y:.2f}% a.a.<extra></extra>",
    ))
    fig.add_hline(y=inflation_rate * 100, line_dash="dot",
                  annotation_text=f"IPCA {inflation_rate * 100:.2f}%")
    if reference_rate is not None and math.isfinite(reference_rate) and reference_rate > 0:
        fig.add_hline(y=reference_rate * 100, line_dash="dash",
                      annotation_text=f"CDI {reference_rate * 100:.2f}%")

    fig.update_layout(
        title=title,
        template="plotly_white",
        height=360,
        margin=dict(l=10, r=10, t=40, b=10),
        yaxis_title="% ao ano",
        showlegend=False,
    )
    return fig


# ---------- Fuel cost breakdown ----------
def fuel_cost_chart(costs: FuelCost, title: str = "Custo Estimado de Combustível") -> go.Figure:
    labels = ["Diário", "Semanal", "Mensal"]
    values = [costs.cost_daily, costs.cost_weekly, costs.cost_monthly]
    fig = go.Figure(go.Bar(
        x=labels, y=values,
        text=[f"R$ {v:.2f}" for v in values], textposition="outside",
        hovertemplate="%{x}<br>R$ %{y:,.2f}<extra></extra>",
    ))
    fig.update_layout(
        title=title,
        template="plotly_white",
        height=300,
        margin=dict(l=10, r=10, t=40, b=10),
        yaxis_title="Reais",
        showlegend=False,
    )
    return fig


__all__ = ["min_rates_chart", "fuel_cost_chart"]
