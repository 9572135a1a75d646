# app.py
import logging
import os

import streamlit as st

from minihub.calculators.market_rates import MarketRates, fetch_market_rates
from minihub.components.catalogue import CATEGORY_COLORS, TOOL_CATEGORIES
from minihub.components.tools import render_tool
from minihub.config import APP_NAME, APP_TAGLINE, LOG_LEVEL_ENV, RATES_TTL_SECONDS, log_level

logging.basicConfig(
    level=log_level(os.environ.get(LOG_LEVEL_ENV)),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("minihub.app")


# ---------- Page config ----------
st.set_page_config(
    page_title=f"{APP_NAME} – {APP_TAGLINE}",
    page_icon="⚙️",
    layout="centered",
    initial_sidebar_state="collapsed",
)

# Hide Streamlit's default menu and footer
HIDE_STREAMLIT_STYLE = """
    <style>
        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}
    </style>
"""
st.markdown(HIDE_STREAMLIT_STYLE, unsafe_allow_html=True)

st.markdown(
    """
<style>
.block-container { padding: 1.5rem 1rem; max-width: 900px; margin: auto; }

.minihub-header {
    text-align: center;
    padding: 1.25rem;
    border: 1px solid #E5E7EB;
    border-radius: 12px;
    background: #FFFFFF;
    box-shadow: 0 8px 20px rgba(0,0,0,0.08);
    margin-bottom: 2rem;
}
.minihub-header h1 { margin: 0; color: #111827; font-weight: 800; }
.minihub-header p { margin: 0.25rem 0 0; color: #6B7280; font-size: 1.1rem; }

.minihub-category {
    padding: 0.5rem 0.75rem;
    border-radius: 6px;
    font-weight: 700;
    font-size: 1.1rem;
    margin: 1rem 0 0.5rem;
}

.stButton>button { border-radius: 8px; justify-content: flex-start; }
div[data-testid="stMetric"] {
    background: #FFFFFF;
    border-radius: 12px;
    padding: 0.75rem;
    border: 1px solid #E5E7EB;
}
</style>
""",
    unsafe_allow_html=True,
)

# ---------- Session boot ----------
st.session_state.setdefault("selected_tool", None)


@st.cache_data(ttl=RATES_TTL_SECONDS, show_spinner=False)
def load_market_rates() -> MarketRates:
    """Market rates shared by every session, revalidated hourly."""
    return fetch_market_rates()


def _select_tool(title: str):
    st.session_state["selected_tool"] = title


def _back_to_list():
    st.session_state["selected_tool"] = None


# ---------- Header bar ----------
def header_bar():
    st.markdown(
        f"""
        <div class="minihub-header">
            <h1>⚙️ {APP_NAME}</h1>
            <p>{APP_TAGLINE}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )


def tool_list():
    st.subheader("Selecione uma Ferramenta")
    for category in TOOL_CATEGORIES:
        colors = CATEGORY_COLORS[category["id"]]
        st.markdown(
            f"<div class='minihub-category' style='background:{colors['bg']};"
            f"color:{colors['text']};border-left:4px solid {colors['primary']}'>"
            f"{category['name']}</div>",
            unsafe_allow_html=True,
        )
        for tool in category["tools"]:
            st.button(
                f"{tool['icon']}  {tool['title']}",
                key=f"tool_{tool['title']}",
                on_click=_select_tool,
                args=(tool["title"],),
                width="stretch",
            )


header_bar()

# Rates are fetched once and passed explicitly to the tools
with st.spinner("Buscando taxas de mercado..."):
    rates = load_market_rates()

selected = st.session_state["selected_tool"]
if selected is None:
    tool_list()
else:
    st.button("← Voltar para a Lista", on_click=_back_to_list)
    render_tool(selected, rates)
