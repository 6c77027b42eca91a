from __future__ import annotations

import json

import pytest

from powerctl.lib.tibber.models import Home, PriceInfo
from powerctl.output import render_homes, render_prices

HOME = Home.model_validate(
    {
        "id": "home-123",
        "appNickname": "Test Home",
        "size": 100,
        "type": "APARTMENT",
        "features": {"realTimeConsumptionEnabled": True},
        "address": {"address1": "123 Test St", "postalCode": "12345", "city": "Oslo"},
    }
)

PRICES = PriceInfo.model_validate(
    {
        "current": {
            "total": 0.45,
            "energy": 0.35,
            "tax": 0.10,
            "startsAt": "2026-10-18T12:00:00+02:00",
            "level": "NORMAL",
            "currency": "NOK",
        },
        "today": [
            {
                "total": 0.40,
                "energy": 0.30,
                "tax": 0.10,
                "startsAt": "2026-10-18T00:00:00+02:00",
                "level": "CHEAP",
                "currency": "NOK",
            }
        ],
        "tomorrow": [],
    }
)


def test_render_homes_pretty() -> None:
    text = render_homes([HOME], "pretty")

    assert "Test Home [home-123]" in text
    assert "123 Test St, 12345, Oslo" in text
    assert "Real-time: yes" in text


def test_render_homes_pretty_empty() -> None:
    assert render_homes([], "pretty") == "No homes found."


def test_render_homes_json() -> None:
    data = json.loads(render_homes([HOME], "json"))

    assert data[0]["id"] == "home-123"
    assert data[0]["features"]["realTimeConsumptionEnabled"] is True


def test_render_prices_pretty() -> None:
    text = render_prices(PRICES, "pretty")

    assert text.startswith("Current: 2026-10-18 12:00 0.4500 NOK (NORMAL")
    assert "2026-10-18 00:00 0.4000 NOK (CHEAP" in text
    assert "Tomorrow: no prices published" in text


def test_render_prices_pretty_without_current() -> None:
    text = render_prices(PriceInfo(), "pretty")

    assert text.startswith("Current: no price available")


def test_render_prices_json() -> None:
    data = json.loads(render_prices(PRICES, "json"))

    assert data["current"]["total"] == 0.45
    assert data["current"]["startsAt"].startswith("2026-10-18T12:00:00")
    assert data["tomorrow"] == []


def test_unknown_format_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported output format"):
        render_prices(PRICES, "xml")


def test_render_prices_pretty_with_missing_amounts() -> None:
    info = PriceInfo.model_validate(
        {
            "current": {
                "total": 0.45,
                "energy": None,
                "tax": None,
                "startsAt": "2026-10-18T12:00:00+02:00",
                "level": None,
                "currency": "NOK",
            },
            "today": None,
            "tomorrow": None,
        }
    )

    text = render_prices(info, "pretty")

    assert text.startswith("Current: 2026-10-18 12:00 0.4500 NOK (UNKNOWN; energy -, tax -)")
    assert "Today: no prices published" in text


def test_render_homes_pretty_with_null_address() -> None:
    home = Home.model_validate({"id": "home-9", "address": None, "features": None})

    text = render_homes([home], "pretty")

    assert "Address:   -" in text
    assert "Real-time: no" in text
