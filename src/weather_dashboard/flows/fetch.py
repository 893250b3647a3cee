"""
Prefect flow for loading a city's weather from OpenWeatherMap.

Current weather is fetched first (it resolves the city to coordinates), then
the forecast and air quality are fetched concurrently. The load is
all-or-nothing: if any request fails nothing is written, so the last
successfully built dashboard stays as it was.

Run locally:
    python -m weather_dashboard.flows.fetch Paris
"""

from __future__ import annotations

import sys
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

from prefect import flow, task
from prefect.futures import wait

from weather_dashboard.config import get_settings
from weather_dashboard.datasources import openweather
from weather_dashboard.schemas import AirPollutionResponse, CurrentWeather, ForecastResponse
from weather_dashboard.store import LAST_CITY_KEY, DataStore

store = DataStore(Path(get_settings().data_dir))

# Relative paths within the store
CURRENT_PATH = Path("live/current.json")
FORECAST_PATH = Path("live/forecast.json")
AIR_QUALITY_PATH = Path("live/air_quality.json")

SOURCE = "openweathermap.org"


def resolve_city(city: str | None) -> str:
    """Pick the city to load: explicit argument, else last city, else the default."""
    if city is None:
        return store.get_preference(LAST_CITY_KEY) or get_settings().default_city
    name = city.strip()
    if not name:
        msg = "City name must not be blank"
        raise ValueError(msg)
    return name


@task(name="fetch-current-weather")
def fetch_current(city: str) -> dict[str, Any]:
    """Fetch current conditions (and coordinates) for a city."""
    return openweather.fetch_current_weather(city)


@task(name="fetch-forecast")
def fetch_forecast(lat: float, lon: float) -> dict[str, Any]:
    """Fetch and validate the 5-day / 3-hour forecast."""
    data = openweather.fetch_forecast(lat, lon)
    openweather.validate(ForecastResponse, data, "Failed to fetch forecast")
    return data


@task(name="fetch-air-quality")
def fetch_air_quality(lat: float, lon: float) -> dict[str, Any]:
    """Fetch and validate current air quality."""
    data = openweather.fetch_air_quality(lat, lon)
    openweather.validate(AirPollutionResponse, data, "Failed to fetch air quality")
    return data


@task(name="save-city")
def save_city(
    city: str,
    token: str,
    current: dict[str, Any],
    forecast: dict[str, Any],
    air_quality: dict[str, Any],
) -> Path | None:
    """Save all three payloads and remember the city for next time.

    Returns None without writing anything when a newer load holds the active
    request token. The three files are replaced together or not at all.
    """
    if not store.is_current_request(token):
        return None

    valid_until = datetime.now(UTC) + timedelta(minutes=get_settings().cache_minutes)
    written = store.write_batch(
        {CURRENT_PATH: current, FORECAST_PATH: forecast, AIR_QUALITY_PATH: air_quality},
        source=SOURCE,
        valid_until=valid_until,
        city=city,
    )
    store.set_preference(LAST_CITY_KEY, city)
    return written[AIR_QUALITY_PATH]


@flow(name="load-city", log_prints=True)
def load_city(city: str | None = None) -> dict[str, Any]:
    """
    Load weather, forecast, and air quality for one city.

    Args:
        city: City name. Defaults to the last loaded city, then the
            configured default city.

    Returns:
        Summary dict; ``stale`` is True when a newer load started while this
        one was in flight (its results are discarded).

    Raises:
        NotFoundError: Unknown city.
        FetchError: Forecast or air-quality request failed.
    """
    name = resolve_city(city)
    token = store.begin_request()

    print(f"Loading weather for {name}...")
    current = fetch_current(name)
    weather = openweather.validate(CurrentWeather, current, "City not found")
    lat, lon = weather.coord.lat, weather.coord.lon

    print(f"Fetching forecast and air quality for ({lat}, {lon})...")
    forecast_future = fetch_forecast.submit(lat, lon)
    air_future = fetch_air_quality.submit(lat, lon)
    wait([forecast_future, air_future])
    forecast = forecast_future.result()
    air_quality = air_future.result()

    output_path = save_city(name, token, current, forecast, air_quality)
    if output_path is None:
        print(f"A newer load started, discarding results for {name}.")
        return {"city": name, "stale": True}

    samples = len(forecast.get("list", []))
    print(f"Saved {samples} forecast samples for {weather.location_label} to {output_path.parent}")

    return {"city": name, "stale": False, "forecast_samples": samples}


if __name__ == "__main__":
    result = load_city(sys.argv[1] if len(sys.argv) > 1 else None)
    print(f"Flow complete: {result}")
