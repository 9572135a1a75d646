"""Tests for the password generator."""

import random
import string

import pytest

from minihub.calculators import password as pw


@pytest.mark.parametrize("length", [8, 16, 32])
def test_length_is_respected(length):
    assert len(pw.generate_password(length)) == length


def test_only_enabled_sets_are_used():
    result = pw.generate_password(200, lower=False, upper=False, digits=True, symbols=False)
    assert set(result) <= set(string.digits)

    result = pw.generate_password(200, lower=False, upper=False, digits=False, symbols=True)
    assert set(result) <= set(pw.CHARSETS["symbols"])


def test_default_sets_exclude_symbols():
    result = pw.generate_password(500)
    assert not set(result) & set(pw.CHARSETS["symbols"])
    assert set(result) <= set(string.ascii_letters + string.digits)


def test_empty_when_nothing_enabled_or_length_invalid():
    assert pw.generate_password(16, lower=False, upper=False, digits=False, symbols=False) == ""
    assert pw.generate_password(0) == ""
    assert pw.generate_password(-3) == ""


def test_seeded_rng_is_reproducible():
    first = pw.generate_password(24, symbols=True, rng=random.Random(7))
    second = pw.generate_password(24, symbols=True, rng=random.Random(7))
    assert first == second


def test_digits_are_not_weighted():
    assert pw.CHARSETS["digits"] == "0123456789"


def test_toggle_option_refuses_last_uncheck():
    options = {"lower": True, "upper": False, "digits": False, "symbols": False}
    assert pw.toggle_option(options, "lower", False) == options
    assert pw.toggle_option(options, "digits", True) == {
        "lower": True, "upper": False, "digits": True, "symbols": False,
    }


def test_toggle_option_does_not_mutate_input():
    options = {"lower": True, "upper": True, "digits": False, "symbols": False}
    updated = pw.toggle_option(options, "upper", False)
    assert options["upper"] is True
    assert updated["upper"] is False


def test_enabled():
    assert pw.enabled({"lower": True})
    assert not pw.enabled({"lower": False, "upper": False})
    assert not pw.enabled({})


def test_enabled_matches_toggle_guard():
    options = {"lower": True, "upper": False, "digits": False, "symbols": False}
    kept = pw.toggle_option(options, "lower", False)
    assert pw.enabled(kept)
