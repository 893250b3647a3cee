"""Current air pollution by coordinates."""

from __future__ import annotations

from typing import Any

from weather_dashboard.datasources.openweather.client import AIR_POLLUTION_PATH, get_json
from weather_dashboard.exceptions import FetchError


def fetch_air_quality(lat: float, lon: float) -> dict[str, Any]:
    """Fetch the current air-quality record (``list[0].main.aqi`` on a 1-5 scale)."""
    return get_json(
        AIR_POLLUTION_PATH,
        {"lat": lat, "lon": lon},
        error=FetchError,
        fallback_message="Failed to fetch air quality",
    )
