"""Shared provider payload fixtures."""

from __future__ import annotations

from typing import Any

import pytest

# 2024-06-01 00:00:00 UTC
SUNRISE = 1717200000
SUNSET = 1717250000
NOW = 1717225000  # halfway between sunrise and sunset
IST_OFFSET = 19800  # +05:30


def forecast_entry(dt_txt: str, temp: float, main: str = "Clear", icon: str = "01d") -> dict[str, Any]:
    """One raw ``list[]`` entry of the forecast endpoint."""
    return {
        "dt": 0,
        "dt_txt": dt_txt,
        "main": {"temp": temp, "humidity": 40},
        "weather": [{"id": 800, "main": main, "description": main.lower(), "icon": icon}],
    }


@pytest.fixture
def current_payload() -> dict[str, Any]:
    return {
        "coord": {"lat": 28.6667, "lon": 77.2167},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        "main": {"temp": 31.6, "pressure": 1002, "humidity": 38},
        "visibility": 10000,
        "dt": NOW,
        "sys": {"country": "IN", "sunrise": SUNRISE, "sunset": SUNSET},
        "timezone": IST_OFFSET,
        "name": "Delhi",
        "cod": 200,
    }


@pytest.fixture
def forecast_payload() -> dict[str, Any]:
    return {
        "cod": "200",
        "list": [
            forecast_entry("2024-06-01 09:00:00", 22.0),
            forecast_entry("2024-06-01 12:00:00", 27.0),
            forecast_entry("2024-06-01 15:00:00", 30.4, "Clouds", "03d"),
            forecast_entry("2024-06-01 18:00:00", 28.0),
            forecast_entry("2024-06-01 21:00:00", 24.0, "Snow", "13n"),
            forecast_entry("2024-06-02 09:00:00", 20.0, "Clouds", "03d"),
            forecast_entry("2024-06-02 12:00:00", 26.0),
            forecast_entry("2024-06-03 00:00:00", 18.0, "Rain", "10n"),
        ],
        "city": {"id": 1273294, "name": "Delhi", "timezone": IST_OFFSET},
    }


@pytest.fixture
def air_payload() -> dict[str, Any]:
    return {
        "coord": {"lon": 77.2167, "lat": 28.6667},
        "list": [{"main": {"aqi": 3}, "components": {"pm2_5": 41.2}, "dt": NOW}],
    }
