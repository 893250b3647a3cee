"""Current weather by city name."""

from __future__ import annotations

from typing import Any

from weather_dashboard.config import get_settings
from weather_dashboard.datasources.openweather.client import CURRENT_WEATHER_PATH, get_json
from weather_dashboard.exceptions import NotFoundError


def fetch_current_weather(city: str) -> dict[str, Any]:
    """
    Fetch current conditions for a city.

    Args:
        city: City name as typed by the user (e.g. ``"Delhi"`` or ``"Paris,FR"``).

    Returns:
        Raw API response dict (``main``, ``weather``, ``sys``, ``coord``, ...).

    Raises:
        NotFoundError: The provider rejected the lookup.
        FetchError: The request could not be completed.
    """
    params = {"q": city, "units": get_settings().units}
    return get_json(
        CURRENT_WEATHER_PATH,
        params,
        error=NotFoundError,
        fallback_message="City not found",
    )
