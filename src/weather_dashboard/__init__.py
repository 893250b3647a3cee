"""Weather Dashboard - current conditions, forecast, and air quality for a city.

Architecture::

    datasources/   OpenWeatherMap API (current weather, forecast, air pollution)
    store.py       JSON envelope cache + persisted preferences (last city)
    analysis/      Pure transforms (day bucketing, sun arc, AQI/UV classifiers)
    renderers/     Pure data -> HTML (current, forecast, timeline, air quality)
    flows/         Prefect orchestration (load-city fetches, build-dashboard renders)
    services/      Shared utilities (HTTP client with retry)

Data flow: datasources -> store (cache) -> analysis -> renderers -> derived/site/
"""

__version__ = "0.1.0"

from weather_dashboard.config import Settings

__all__ = ["Settings", "__version__"]
