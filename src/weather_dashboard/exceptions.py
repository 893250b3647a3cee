"""Error taxonomy for the dashboard.

Every error carries a user-facing ``message``. Lookup and network errors abort
a whole city load; the CLI surfaces ``message`` and leaves the last rendered
site alone.
"""

from __future__ import annotations


class WeatherDashboardError(Exception):
    """Base class for all dashboard errors."""

    default_message = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(WeatherDashboardError):
    """The provider could not find the requested city."""

    default_message = "City not found"


class FetchError(WeatherDashboardError):
    """A forecast or air-quality request failed."""

    default_message = "Failed to fetch weather data"


class InvalidIntervalError(WeatherDashboardError):
    """Sunset does not come after sunrise (degenerate or missing data)."""

    default_message = "Sunset must be after sunrise"


class EmptyInputError(WeatherDashboardError):
    """A strict caller required non-empty forecast input."""

    default_message = "No forecast samples"
