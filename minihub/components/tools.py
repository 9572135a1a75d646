"""Streamlit renderers for each tool and the dispatcher used by the shell."""

from __future__ import annotations

import logging
from typing import Callable, Dict

import streamlit as st

from minihub.calculators import fuel_cost as fuel
from minihub.calculators import percentage as pct
from minihub.calculators.market_rates import MarketRates
from minihub.calculators.passive_income import PlannerInput, PlannerInputError, compute_strategy
from minihub.calculators.password import enabled, generate_password
from minihub.components.catalogue import FUEL_COST, PASSIVE_INCOME, PASSWORD, PERCENTAGE, get_tool_info
from minihub.components.charts import fuel_cost_chart, min_rates_chart
from minihub.components.forms import (
    PASSWORD_KEY,
    PASSWORD_OPTIONS_KEY,
    PLANNER_RESULT_KEY,
    WIDGET_KEYS,
    fuel_form,
    password_form,
    percentage_inputs,
    planner_form,
)
from minihub.components.formatting import format_brl, format_pct, format_pct_of_reference
from minihub.components.report import build_strategy_pdf, strategy_csv, strategy_table
from minihub.config import DEFAULTS

logger = logging.getLogger(__name__)


# ---------- Passive income ----------
def _render_strategy(result, rates: MarketRates):
    st.markdown("### Estratégia Sugerida:")

    c1, c2, c3 = st.columns(3)
    c1.metric("Capital necessário", format_brl(result.required_capital))
    c2.metric("Ganho real líquido", format_pct(result.net_real_yield))
    c3.metric("Renda mensal", format_brl(result.monthly_income_target))

    st.markdown("#### FASE 1: ACUMULAÇÃO (Como chegar lá)")
    st.markdown(
        f"**Objetivo:** Atingir {format_brl(result.required_capital)} o mais rápido possível.\n\n"
        "**Estratégia:** Buscar o maior ganho líquido possível, reinvestindo 100% dos rendimentos. "
        f"O Tesouro IPCA+ que você informou rende **{format_pct(result.net_real_yield)}** acima da "
        "inflação (líquido). Para acelerar, busque opções que rendam mais que isso.\n\n"
        "**Recomendações (Taxas Mínimas para Superar o Tesouro IPCA+):**\n"
        f"- **LCIs/LCAs Prefixadas (Isentas de IR):** Acima de **{format_pct(result.min_rate_tax_exempt)} ao ano**. "
        "Sem imposto, a taxa nominal necessária é menor.\n"
        f"- **CDBs/Tesouro Prefixado (Com IR de 15%):** Acima de **{format_pct(result.min_rate_taxable)} ao ano**. "
        "Precisa render mais para compensar o imposto.\n"
        f"- **CDBs Pós-Fixados (Com IR de 15%):** Acima de "
        f"**{format_pct_of_reference(result.min_rate_percent_of_reference)}** "
        f"(considerando CDI de {format_pct(rates.reference_rate)}; se o CDI mudar, esse percentual também muda)."
    )
    st.plotly_chart(
        min_rates_chart(result, rates.inflation_rate, rates.reference_rate),
        width="stretch",
    )

    st.markdown("#### FASE 2: RENDA (Como viver do capital)")
    st.markdown(
        f"**Objetivo:** Sacar {format_brl(result.monthly_income_target)} por mês sem perder o poder de compra.\n\n"
        f"**Estratégia:** Investir o Capital-Alvo ({format_brl(result.required_capital)}) no "
        "**Tesouro IPCA+ com Juros Semestrais** com a taxa real bruta de "
        f"**{format_pct(result.gross_real_rate)}** que você informou.\n\n"
        "**Recomendação:** Este título protege o capital da inflação (IPCA) e deposita seu "
        '"salário" (os juros reais) na sua conta a cada 6 meses, já com o IR descontado.'
    )

    with st.expander("Resumo e exportação", expanded=False):
        st.dataframe(strategy_table(result, rates), width="stretch", hide_index=True)
        d1, d2 = st.columns(2)
        d1.download_button(
            "⬇️ CSV",
            data=strategy_csv(result, rates),
            file_name="estrategia_renda_passiva.csv",
            mime="text/csv",
        )
        d2.download_button(
            "⬇️ PDF",
            data=build_strategy_pdf(result, rates),
            file_name="estrategia_renda_passiva.pdf",
            mime="application/pdf",
        )


def render_passive_income(rates: MarketRates):
    st.session_state.setdefault(PLANNER_RESULT_KEY, None)
    values = planner_form(rates)

    if st.button("Calcular Capital Necessário", type="primary", key="planner_compute", width="stretch"):
        try:
            result = compute_strategy(PlannerInput(**values), rates)
        except PlannerInputError as exc:
            st.session_state[PLANNER_RESULT_KEY] = None
            logger.info("Planner input rejected: %s", exc)
            st.error(str(exc))
        else:
            st.session_state[PLANNER_RESULT_KEY] = result

    result = st.session_state[PLANNER_RESULT_KEY]
    if result is not None:
        _render_strategy(result, rates)


# ---------- Fuel cost ----------
def render_fuel_cost(rates: MarketRates = None):
    st.caption("Calcule o custo de combustível usando o consumo médio do seu veículo.")
    raw = fuel_form()
    values = {name: fuel.clamp_input(name, value) for name, value in raw.items()}
    costs = fuel.fuel_cost(**values)

    st.markdown("### Resultados do Cálculo")
    c1, c2 = st.columns(2)
    c1.metric("Litros Diários Necessários", f"{costs.litres_daily:.2f} L")
    c2.metric("Custo Diário Estimado", f"R$ {costs.cost_daily:.2f}")
    c1.metric("Custo Semanal Estimado", f"R$ {costs.cost_weekly:.2f}")
    c2.metric("Custo Mensal Estimado", f"R$ {costs.cost_monthly:.2f}")
    st.plotly_chart(fuel_cost_chart(costs), width="stretch")


# ---------- Password ----------
def _regenerate_password():
    length = st.session_state.get(WIDGET_KEYS["pw_length"], DEFAULTS["password"]["length"])
    options = st.session_state.get(PASSWORD_OPTIONS_KEY, {})
    st.session_state[PASSWORD_KEY] = generate_password(length, **options)


def render_password(rates: MarketRates = None):
    length, options = password_form(_regenerate_password)
    if PASSWORD_KEY not in st.session_state:
        st.session_state[PASSWORD_KEY] = generate_password(length, **options)

    disabled = not enabled(options) or length < 1
    st.button("Gerar Nova Senha", type="primary", disabled=disabled,
              on_click=_regenerate_password, width="stretch")

    password = st.session_state[PASSWORD_KEY]
    if password:
        st.code(password, language=None)
        st.caption("Use o botão de cópia no canto do quadro para copiar.")
    else:
        st.info("Selecione as opções")


# ---------- Percentage ----------
def _read(key: str):
    text = st.session_state.get(WIDGET_KEYS[key], "")
    value = pct.parse_decimal(text)
    if text and value is None:
        st.warning(f"Valor inválido: {text!r}. Use apenas números e ponto decimal.")
    return value


def _result_line(value):
    st.markdown(f"**= {pct.format_result(value, '', '...')}**")


def render_percentage(rates: MarketRates = None):
    st.markdown("##### 1. Porcentagem de um Valor")
    percentage_inputs("Quanto é", "Porcentagem", "% de", "pct_of_x", "pct_total_y", ("10", "500"))
    x, y = _read("pct_of_x"), _read("pct_total_y")
    _result_line(None if x is None or y is None else pct.percentage_of(x, y))

    st.markdown("##### 2. Porcentagem da Parte")
    percentage_inputs("O número", "Parte", "representa quantos % do total",
                      "pct_part_y", "pct_total_z", ("25", "100"))
    part, total = _read("pct_part_y"), _read("pct_total_z")
    _result_line(None if part is None or total is None else pct.percent_of_total(part, total))

    st.markdown("##### 3. Desconto ou Aumento")
    mode = st.radio("Modo", ["Desconto", "Aumento"], horizontal=True,
                    key=WIDGET_KEYS["pct_mode"], label_visibility="collapsed")
    is_discount = mode == "Desconto"
    percentage_inputs(f"Valor final após um {mode.lower()} de", "Taxa", "% no preço",
                      "pct_rate_x", "pct_price_y", ("10", "99.99"))
    rate, price = _read("pct_rate_x"), _read("pct_price_y")
    if rate is None or price is None:
        st.caption("Preencha a taxa e o preço para ver o resultado.")
        return
    change = pct.apply_change(rate, price, discount=is_discount)
    c1, c2 = st.columns(2)
    c1.metric("Valor Final", f"R$ {pct.format_result(change.final_value)}")
    c2.metric(f"Valor {'Economizado' if is_discount else 'Adicionado'}",
              f"R$ {pct.format_result(change.change_amount)}")


TOOL_RENDERERS: Dict[str, Callable[[MarketRates], None]] = {
    FUEL_COST: render_fuel_cost,
    PASSIVE_INCOME: render_passive_income,
    PERCENTAGE: render_percentage,
    PASSWORD: render_password,
}


def render_tool(title: str, rates: MarketRates) -> bool:
    """Render the tool named ``title``; returns False for unknown tools."""
    tool = get_tool_info(title)
    renderer = TOOL_RENDERERS.get(title)
    if tool is None or renderer is None:
        logger.warning("Unknown tool requested: %r", title)
        st.error("Ferramenta desconhecida.")
        return False

    st.markdown(
        f"<h2 style='color:{tool['colors']['text']}'>{tool['icon']} {tool['title']}</h2>",
        unsafe_allow_html=True,
    )
    renderer(rates)
    return True


__all__ = [
    "render_passive_income",
    "render_fuel_cost",
    "render_password",
    "render_percentage",
    "TOOL_RENDERERS",
    "render_tool",
]
