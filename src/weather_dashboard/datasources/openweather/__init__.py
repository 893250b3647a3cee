"""OpenWeatherMap 2.5 data source.

Public API:
  - current: fetch_current_weather (by city name)
  - forecast: fetch_forecast (5-day / 3-hour, by coordinates)
  - air_quality: fetch_air_quality (current AQI, by coordinates)
  - client: API paths, validate (raw dict -> schema model)
"""

from weather_dashboard.datasources.openweather.air_quality import fetch_air_quality
from weather_dashboard.datasources.openweather.client import (
    AIR_POLLUTION_PATH,
    CURRENT_WEATHER_PATH,
    FORECAST_PATH,
    validate,
)
from weather_dashboard.datasources.openweather.current import fetch_current_weather
from weather_dashboard.datasources.openweather.forecast import fetch_forecast

__all__ = [
    "AIR_POLLUTION_PATH",
    "CURRENT_WEATHER_PATH",
    "FORECAST_PATH",
    "fetch_air_quality",
    "fetch_current_weather",
    "fetch_forecast",
    "validate",
]
