"""Tests for the market rate provider and its fallbacks."""

import logging
import math

import requests

from minihub.calculators import market_rates as mr
from minihub.config import RATES_URL

PAYLOAD = [
    {"nome": "Selic", "valor": 10.5},
    {"nome": "CDI", "valor": 10.4},
    {"nome": "IPCA", "valor": 4.5},
]


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text="", json_error=None):
        self._payload = payload
        self.status_code = status_code
        self.text = text
        self._json_error = json_error

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response


def test_parse_rates_converts_percent_to_fraction():
    rates = mr.parse_rates(PAYLOAD)
    assert math.isclose(rates.inflation_rate, 0.045, rel_tol=1e-12)
    assert math.isclose(rates.reference_rate, 0.104, rel_tol=1e-12)


def test_missing_ipca_falls_back_independently(caplog):
    payload = [{"nome": "CDI", "valor": 10.4}]
    with caplog.at_level(logging.WARNING):
        rates = mr.parse_rates(payload)
    assert rates.inflation_rate == 0.047
    assert math.isclose(rates.reference_rate, 0.104, rel_tol=1e-12)
    assert "IPCA" in caplog.text


def test_missing_cdi_falls_back_independently():
    rates = mr.parse_rates([{"nome": "IPCA", "valor": 5.0}])
    assert math.isclose(rates.inflation_rate, 0.05, rel_tol=1e-12)
    assert rates.reference_rate == 0.11


def test_non_numeric_value_is_treated_as_missing():
    rates = mr.parse_rates([{"nome": "IPCA", "valor": "4.5"}, {"nome": "CDI", "valor": None}])
    assert rates == mr.FALLBACK


def test_fetch_success_uses_single_get():
    session = FakeSession(FakeResponse(PAYLOAD))
    rates = mr.fetch_market_rates(session=session, timeout=3)
    assert session.calls == [(RATES_URL, 3)]
    assert math.isclose(rates.inflation_rate, 0.045, rel_tol=1e-12)
    assert math.isclose(rates.reference_rate, 0.104, rel_tol=1e-12)


def test_fetch_transport_error_returns_fallback(caplog):
    session = FakeSession(error=requests.ConnectionError("offline"))
    with caplog.at_level(logging.ERROR):
        rates = mr.fetch_market_rates(session=session)
    assert rates == mr.FALLBACK
    assert len(session.calls) == 1
    assert "offline" in caplog.text


def test_fetch_bad_status_returns_fallback():
    session = FakeSession(FakeResponse(PAYLOAD, status_code=503, text="unavailable"))
    assert mr.fetch_market_rates(session=session) == mr.FALLBACK


def test_fetch_invalid_json_returns_fallback():
    session = FakeSession(FakeResponse(json_error=ValueError("not json")))
    assert mr.fetch_market_rates(session=session) == mr.FALLBACK


def test_fetch_unexpected_payload_returns_fallback():
    session = FakeSession(FakeResponse({"erro": "x"}))
    assert mr.fetch_market_rates(session=session) == mr.FALLBACK


def test_fetch_defaults_to_requests_get(monkeypatch):
    calls = []

    def fake_get(url, timeout=None):
        calls.append(url)
        return FakeResponse([{"nome": "CDI", "valor": 11.0}])

    monkeypatch.setattr(mr.requests, "get", fake_get)
    rates = mr.fetch_market_rates()
    assert calls == [RATES_URL]
    assert rates.inflation_rate == 0.047
    assert rates.reference_rate == 0.11


def test_non_finite_values_fall_back():
    """NaN or infinite rates are rejected like any other bad value."""
    rates = mr.parse_rates([
        {"nome": "IPCA", "valor": float("nan")},
        {"nome": "CDI", "valor": float("inf")},
    ])
    assert rates == mr.FALLBACK


def test_fetch_with_nan_inflation_keeps_fetched_cdi():
    payload = [{"nome": "IPCA", "valor": float("nan")}, {"nome": "CDI", "valor": 10.4}]
    rates = mr.fetch_market_rates(session=FakeSession(FakeResponse(payload)))
    assert rates.inflation_rate == 0.047
    assert math.isclose(rates.reference_rate, 0.104, rel_tol=1e-12)
