"""Tests for the percentage helpers."""

import math

import pytest

from minihub.calculators import percentage as pct


def test_percentage_of():
    assert pct.percentage_of(10, 500) == 50.0
    assert math.isclose(pct.percentage_of(12.5, 80), 10.0)


def test_percent_of_total():
    assert pct.percent_of_total(25, 100) == 25.0
    assert pct.percent_of_total(1, 3) == pytest.approx(33.3333, rel=1e-5)


def test_percent_of_zero_total_is_zero():
    assert pct.percent_of_total(25, 0) == 0.0


def test_apply_discount_and_increase():
    discount = pct.apply_change(10, 200, discount=True)
    assert discount.final_value == 180.0
    assert discount.change_amount == 20.0

    increase = pct.apply_change(10, 200, discount=False)
    assert increase.final_value == 220.0
    assert increase.change_amount == 20.0


@pytest.mark.parametrize(
    "text, expected",
    [
        ("10", 10.0),
        ("99.99", 99.99),
        (".5", 0.5),
        ("", None),
        (None, None),
        ("abc", None),
        ("-5", None),
        ("1,5", None),
        (".", None),
        ("1.2.3", None),
    ],
)
def test_parse_decimal(text, expected):
    assert pct.parse_decimal(text) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (50.0, "50"),
        (10.5, "10.5"),
        (33.333333, "33.3333"),
        (0.0, "0"),
        (1000.0, "1000"),
        (0.12345, "0.1235"),
    ],
)
def test_format_result_strips_trailing_zeros(value, expected):
    assert pct.format_result(value) == expected


def test_format_result_fallbacks():
    assert pct.format_result(None) == "Aguardando valores..."
    assert pct.format_result(float("nan"), fallback="...") == "..."
    assert pct.format_result(float("inf"), fallback="...") == "..."
    assert pct.format_result(25.0, "%") == "25%"
