"""OpenWeatherMap API client constants and shared request handling.

API docs:
  - Current weather: https://openweathermap.org/current
  - 5 day / 3 hour forecast: https://openweathermap.org/forecast5
  - Air pollution: https://openweathermap.org/api/air-pollution
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from weather_dashboard.config import get_settings
from weather_dashboard.exceptions import FetchError, WeatherDashboardError
from weather_dashboard.services.http import session

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

CURRENT_WEATHER_PATH = "weather"
FORECAST_PATH = "forecast"
AIR_POLLUTION_PATH = "air_pollution"


def provider_message(resp: requests.Response) -> str | None:
    """Extract the provider's ``message`` field from an error response, if any."""
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if message:
            return str(message)
    return None


def get_json(
    path: str,
    params: dict[str, Any],
    *,
    error: type[WeatherDashboardError],
    fallback_message: str,
) -> dict[str, Any]:
    """
    GET ``{api_base_url}/{path}`` and return the decoded JSON body.

    The API key is appended from settings. Non-2xx responses raise ``error``
    with the provider's ``message`` (or ``fallback_message``); transport
    failures raise ``FetchError``.
    """
    settings = get_settings()
    url = f"{settings.api_base_url.rstrip('/')}/{path}"
    query = {**params, "appid": settings.api_key}

    logger.debug("GET %s %s", url, params)
    try:
        resp = session.get(url, params=query)
    except requests.RequestException as exc:
        logger.warning("Request to %s failed: %s", url, exc)
        raise FetchError(fallback_message) from exc

    if not resp.ok:
        message = provider_message(resp) or fallback_message
        logger.warning("%s returned %s: %s", url, resp.status_code, message)
        raise error(message)

    try:
        result: dict[str, Any] = resp.json()
    except ValueError as exc:
        raise FetchError(fallback_message) from exc
    return result


def validate(model: type[ModelT], data: Any, fallback_message: str) -> ModelT:
    """Validate a raw payload into a schema model, mapping failures to ``FetchError``."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        logger.warning("Malformed %s payload: %s", model.__name__, exc)
        raise FetchError(fallback_message) from exc
