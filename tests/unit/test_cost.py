"""Tests for cost parsing and currency formatting."""

import pytest

from clubdesk.config import get_settings
from clubdesk.schemas import CostParts
from clubdesk.values import format_cost_number, format_currency, parse_cost

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("cost", "expected"),
    [
        (42, 42),
        (12.75, 12.75),
        ("125.50 ₴", 125.5),
        ("  300 грн", 300),
        ("-15.5", -15.5),
        ("abc", 0),
        ("", 0),
        ("1.2.3", 0),
        ({"amount": 10}, 10),
        ({"value": 7.5, "currency": "UAH"}, 7.5),
        ({"amount": 3, "value": 9}, 3),
        ({"amount": "10", "value": 4}, 4),
        ({}, 0),
        (None, 0),
    ],
)
def test_parse_cost(cost, expected):
    assert parse_cost(cost) == expected


def test_parse_cost_reads_model_parts():
    assert parse_cost(CostParts(value=55)) == 55
    assert parse_cost(CostParts(currency="UAH")) == 0


def test_parse_cost_does_not_treat_bool_as_number():
    assert parse_cost(True) == 0
    assert parse_cost({"amount": True, "value": 2}) == 2


def test_format_currency_defaults():
    assert format_currency(125.5) == "125.50 ₴"
    assert format_currency("99") == "99.00 ₴"
    assert format_currency({"amount": 10}) == "10.00 ₴"
    assert format_currency("n/a") == "0.00 ₴"


def test_format_currency_explicit_label_and_decimals():
    assert format_currency(1234.5678, "USD", 3) == "1234.568 USD"
    assert format_currency(7, decimals=0) == "7 ₴"


def test_format_cost_number():
    assert format_cost_number("125.5 ₴") == "125.50"
    assert format_cost_number(-3) == "-3.00"
    assert format_cost_number({"value": 1.5}, decimals=1) == "1.5"


def test_format_currency_uses_settings(monkeypatch):
    monkeypatch.setenv("CLUBDESK_CURRENCY_SYMBOL", "грн")
    monkeypatch.setenv("CLUBDESK_CURRENCY_DECIMALS", "1")
    get_settings.cache_clear()

    assert format_currency(10) == "10.0 грн"
    assert format_cost_number(2) == "2.0"
