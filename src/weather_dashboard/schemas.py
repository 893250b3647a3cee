"""
Provider response models.

Pydantic models for the three OpenWeatherMap 2.5 payloads the dashboard
consumes. Only the fields we render are declared; everything else in the
response is ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Shared
# =============================================================================


class _ProviderModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class Condition(_ProviderModel):
    """One entry of a ``weather`` array."""

    main: str
    description: str = ""
    icon: str = ""


class Coordinates(_ProviderModel):
    """Geographic point returned by the current-weather endpoint."""

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


# =============================================================================
# Current weather (/weather)
# =============================================================================


class CurrentMain(_ProviderModel):
    temp: float
    pressure: int | float
    humidity: int | float


class CurrentSys(_ProviderModel):
    country: str = ""
    sunrise: int
    sunset: int


class CurrentWeather(_ProviderModel):
    """Current conditions for a city."""

    name: str
    dt: int = Field(..., description="Observation time, epoch seconds (UTC)")
    timezone: int = Field(0, description="Offset from UTC in seconds")
    visibility: int | float = Field(0, description="Metres")
    coord: Coordinates
    main: CurrentMain
    weather: list[Condition] = Field(..., min_length=1)
    sys: CurrentSys

    @property
    def condition(self) -> Condition:
        """Primary condition (``weather[0]``)."""
        return self.weather[0]

    @property
    def location_label(self) -> str:
        """``"Name, CC"`` as shown on the current-weather card."""
        return f"{self.name}, {self.sys.country}" if self.sys.country else self.name


# =============================================================================
# Forecast (/forecast)
# =============================================================================


class ForecastMain(_ProviderModel):
    temp: float


class ForecastEntry(_ProviderModel):
    """One 3-hourly forecast sample."""

    dt_txt: str = Field(..., description="'YYYY-MM-DD HH:MM:SS' (UTC)")
    main: ForecastMain
    weather: list[Condition] = Field(..., min_length=1)


class ForecastCity(_ProviderModel):
    name: str = ""


class ForecastResponse(_ProviderModel):
    """5-day / 3-hour forecast."""

    city: ForecastCity = Field(default_factory=ForecastCity)
    entries: list[ForecastEntry] = Field(default_factory=list, alias="list")


# =============================================================================
# Air pollution (/air_pollution)
# =============================================================================


class AirQualityMain(_ProviderModel):
    aqi: int


class AirQualityRecord(_ProviderModel):
    main: AirQualityMain


class AirPollutionResponse(_ProviderModel):
    """Current air pollution; the first record holds the AQI (1-5)."""

    records: list[AirQualityRecord] = Field(..., min_length=1, alias="list")

    @property
    def aqi(self) -> int:
        return self.records[0].main.aqi
