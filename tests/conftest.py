"""Shared fixtures: isolated settings and valid entity payloads."""

import pytest

from clubdesk.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test with default settings in UTC, ignoring any local .env."""
    monkeypatch.chdir(tmp_path)
    for name in ("CURRENCY_SYMBOL", "CURRENCY_DECIMALS", "MISSING_VALUE", "LOG_LEVEL"):
        monkeypatch.delenv(f"CLUBDESK_{name}", raising=False)
    monkeypatch.setenv("CLUBDESK_TIMEZONE", "UTC")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client_payload():
    return {
        "phone": "+380 (67) 123-45-67",
        "full_name": "Олена Коваль",
        "birth": "1995-04-12",
    }


@pytest.fixture
def pc_payload():
    return {
        "cpu": "Ryzen 5 5600",
        "ram": 16,
        "videocard": "RTX 3060",
        "hard_disc": "SSD 512GB",
        "usb_amout": 4,
        "os": "Windows 11",
        "buy_date": "2024-03-01",
    }


@pytest.fixture
def session_payload():
    return {
        "pc_id": 3,
        "client_phone": "+380671234567",
        "Time": "2026-10-19T14:00:00",
        "Duration": {"hours": 2, "minutes": 30},
        "Cost": 125.5,
    }
