"""
Application settings.

Values are read from environment variables prefixed with ``WEATHER_DASHBOARD_``
(or a local ``.env`` file), e.g.::

    WEATHER_DASHBOARD_API_KEY=abc123
    WEATHER_DASHBOARD_FORECAST_DAYS=5
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"


class Settings(BaseSettings):
    """Runtime configuration for the dashboard."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_DASHBOARD_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "weather-dashboard"
    app_env: str = "development"
    debug: bool = False

    # Provider
    api_key: str = Field(default="", description="OpenWeatherMap API key")
    api_base_url: str = OPENWEATHER_BASE_URL
    units: str = "metric"
    request_timeout: float = Field(default=30, gt=0)
    cache_minutes: int = Field(default=10, ge=0)

    # Dashboard
    default_city: str = "Delhi"
    forecast_days: int = Field(default=3, ge=1, le=5)
    icon_set: Literal["lucide", "openweather"] = "lucide"

    # Local paths / serving
    data_dir: str = "data"
    api_port: int = 8000


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (cached after first call)."""
    return Settings()
