"""5-day / 3-hour forecast by coordinates."""

from __future__ import annotations

from typing import Any

from weather_dashboard.config import get_settings
from weather_dashboard.datasources.openweather.client import FORECAST_PATH, get_json
from weather_dashboard.exceptions import FetchError


def fetch_forecast(lat: float, lon: float) -> dict[str, Any]:
    """
    Fetch the 3-hourly forecast for a location.

    Args:
        lat: Latitude.
        lon: Longitude.

    Returns:
        Raw API response dict with ``list`` (samples) and ``city`` keys.
    """
    params: dict[str, str | float] = {
        "lat": lat,
        "lon": lon,
        "units": get_settings().units,
    }
    return get_json(
        FORECAST_PATH,
        params,
        error=FetchError,
        fallback_message="Failed to fetch forecast",
    )
