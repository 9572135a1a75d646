# components/forms.py
import streamlit as st

from minihub.calculators.market_rates import MarketRates
from minihub.calculators.password import toggle_option
from minihub.components.formatting import format_pct
from minihub.config import DEFAULTS

# Stable widget keys so callbacks can read and reset values
WIDGET_KEYS = {
    "planner_income": "in_planner_income",
    "planner_rate": "in_planner_rate_pct",

    "fuel_distance": "in_fuel_distance",
    "fuel_consumption": "in_fuel_consumption",
    "fuel_price": "in_fuel_price",
    "fuel_days": "in_fuel_days",

    "pw_length": "in_pw_length",
    "pw_upper": "in_pw_upper",
    "pw_digits": "in_pw_digits",
    "pw_symbols": "in_pw_symbols",
    "pw_lower": "in_pw_lower",

    "pct_of_x": "in_pct_of_x",
    "pct_total_y": "in_pct_total_y",
    "pct_part_y": "in_pct_part_y",
    "pct_total_z": "in_pct_total_z",
    "pct_rate_x": "in_pct_rate_x",
    "pct_price_y": "in_pct_price_y",
    "pct_mode": "in_pct_mode",
}

PLANNER_RESULT_KEY = "planner_result"
PASSWORD_KEY = "password"
PASSWORD_OPTIONS_KEY = "password_options"


def _clear_planner_result():
    st.session_state[PLANNER_RESULT_KEY] = None


def planner_form(rates: MarketRates) -> dict:
    """Inputs for the passive-income planner.

    Editing either field drops the previous result so a stale strategy is
    never shown next to new inputs.
    """
    defaults = DEFAULTS["planner"]
    income = st.number_input(
        "Quanto você quer ganhar de Renda Passiva por mês?",
        value=defaults["desired_monthly_income"],
        step=100.0, format="%.2f",
        key=WIDGET_KEYS["planner_income"],
        on_change=_clear_planner_result,
        help="Ex: 1518.00",
    )

    st.markdown("#### Dados do Mercado")
    st.text_input(
        "Inflação (IPCA) Acumulada 12 meses (%)",
        value=format_pct(rates.inflation_rate),
        disabled=True,
        help="Buscado automaticamente pela BrasilAPI.",
    )
    rate_pct = st.number_input(
        "Taxa Real Bruta do Título (Ex: IPCA+ X%)",
        value=defaults["gross_real_rate_pct"],
        step=0.05, format="%.2f",
        key=WIDGET_KEYS["planner_rate"],
        on_change=_clear_planner_result,
        help='Digite a taxa real (o "X%") que você encontrou no site do Tesouro.',
    )
    return {
        "desired_monthly_income": income,
        "gross_real_rate": None if rate_pct is None else rate_pct / 100,
    }


def fuel_form() -> dict:
    defaults = DEFAULTS["fuel"]
    c1, c2 = st.columns(2)
    distance = c1.number_input(
        "Distância Diária Total (Km)", min_value=0.0,
        value=defaults["daily_distance_km"], step=1.0,
        key=WIDGET_KEYS["fuel_distance"],
    )
    consumption = c2.number_input(
        "Consumo Médio (Km/L)", min_value=0.0,
        value=defaults["km_per_litre"], step=0.1,
        key=WIDGET_KEYS["fuel_consumption"],
    )
    price = c1.number_input(
        "Preço do Combustível (R$/L)", min_value=0.0,
        value=defaults["price_per_litre"], step=0.01, format="%.2f",
        key=WIDGET_KEYS["fuel_price"],
    )
    days = c2.number_input(
        "Frequência Semanal (dias)", min_value=1, max_value=7,
        value=defaults["days_per_week"], step=1,
        key=WIDGET_KEYS["fuel_days"],
    )
    return {
        "daily_distance_km": distance,
        "km_per_litre": consumption,
        "price_per_litre": price,
        "days_per_week": days,
    }


def _password_options_default() -> dict:
    d = DEFAULTS["password"]
    return {"lower": d["lower"], "upper": d["upper"], "digits": d["digits"], "symbols": d["symbols"]}


def _on_option_change(name: str, regenerate):
    key = WIDGET_KEYS[f"pw_{name}"]
    current = st.session_state.setdefault(PASSWORD_OPTIONS_KEY, _password_options_default())
    updated = toggle_option(current, name, st.session_state[key])
    # refused toggles snap the checkbox back
    st.session_state[key] = updated[name]
    st.session_state[PASSWORD_OPTIONS_KEY] = updated
    regenerate()


def password_form(regenerate) -> tuple:
    """Length slider and character-set checkboxes; ``regenerate`` runs on change."""
    d = DEFAULTS["password"]
    options = st.session_state.setdefault(PASSWORD_OPTIONS_KEY, _password_options_default())

    length = st.slider(
        "Comprimento da Senha:",
        min_value=d["min_length"], max_value=d["max_length"],
        value=d["length"],
        key=WIDGET_KEYS["pw_length"],
        on_change=regenerate,
    )
    labels = {
        "upper": "Maiúsculas (A-Z)",
        "digits": "Números (0-9)",
        "symbols": "Símbolos (!@#$)",
        "lower": "Minúsculas (a-z)",
    }
    cols = st.columns(2)
    for i, (name, label) in enumerate(labels.items()):
        # the change callback may overwrite this key
        st.session_state.setdefault(WIDGET_KEYS[f"pw_{name}"], options[name])
        cols[i % 2].checkbox(
            label,
            key=WIDGET_KEYS[f"pw_{name}"],
            on_change=_on_option_change,
            args=(name, regenerate),
        )
    return int(length), dict(st.session_state[PASSWORD_OPTIONS_KEY])


def percentage_inputs(prefix: str, first_label: str, second_label: str,
                      first_key: str, second_key: str,
                      placeholders=("10", "500")) -> tuple:
    """Two free-form decimal fields laid out inside a sentence."""
    c0, c1, c2, c3 = st.columns([1.2, 1, 1.6, 1])
    c0.markdown(prefix)
    first = c1.text_input(first_label, key=WIDGET_KEYS[first_key],
                          placeholder=placeholders[0], label_visibility="collapsed")
    c2.markdown(second_label)
    second = c3.text_input(second_label, key=WIDGET_KEYS[second_key],
                           placeholder=placeholders[1], label_visibility="collapsed")
    return first, second
