"""End-to-end checks of the Streamlit shell and the planner flow."""

import pytest
import requests
from streamlit.testing.v1 import AppTest

from minihub.components.catalogue import FUEL_COST, PASSIVE_INCOME, PASSWORD, PERCENTAGE
from minihub.components.forms import WIDGET_KEYS

TIMEOUT = 30


@pytest.fixture
def offline(monkeypatch):
    """Make the rate provider unreachable so the fallback rates are used."""

    def fail(url, timeout=None):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(requests, "get", fail)


def _metric_values(at):
    return [m.value for m in at.metric]


def _open_planner():
    at = AppTest.from_file("../app.py", default_timeout=TIMEOUT)
    at.run()
    at.button(key=f"tool_{PASSIVE_INCOME}").click().run()
    return at


def test_list_view_shows_every_tool(offline):
    at = AppTest.from_file("../app.py", default_timeout=TIMEOUT)
    at.run()
    assert not at.exception
    keys = {b.key for b in at.button}
    assert f"tool_{PASSIVE_INCOME}" in keys


def test_planner_computes_only_on_click(offline):
    at = _open_planner()
    assert not at.exception
    assert _metric_values(at) == []

    at.button(key="planner_compute").click().run()
    assert "R$ 269.567,15" in _metric_values(at)
    assert not at.error


def test_rejected_input_shows_error_and_clears_result(offline):
    at = _open_planner()
    at.button(key="planner_compute").click().run()
    assert _metric_values(at)

    at.number_input(key=WIDGET_KEYS["planner_income"]).set_value(0.0).run()
    at.button(key="planner_compute").click().run()
    assert [e.value for e in at.error] == ["Por favor, preencha a Renda Mensal desejada."]
    assert _metric_values(at) == []


def test_editing_an_input_clears_the_result(offline):
    at = _open_planner()
    at.button(key="planner_compute").click().run()
    assert "R$ 269.567,15" in _metric_values(at)

    at.number_input(key=WIDGET_KEYS["planner_rate"]).set_value(6.0).run()
    assert _metric_values(at) == []


def test_unknown_tool_shows_error(offline):
    at = AppTest.from_file("../app.py", default_timeout=TIMEOUT)
    at.session_state["selected_tool"] = "Ferramenta inexistente"
    at.run()
    assert not at.exception
    assert [e.value for e in at.error] == ["Ferramenta desconhecida."]


def test_unknown_log_level_does_not_break_startup(offline, monkeypatch):
    monkeypatch.setenv("MINIHUB_LOG_LEVEL", "verbose")
    at = AppTest.from_file("../app.py", default_timeout=TIMEOUT)
    at.run()
    assert not at.exception


@pytest.mark.parametrize("title", [FUEL_COST, PASSWORD, PERCENTAGE])
def test_other_tools_render(offline, title):
    at = AppTest.from_file("../app.py", default_timeout=TIMEOUT)
    at.run()
    at.button(key=f"tool_{title}").click().run()
    assert not at.exception
    assert not at.error
