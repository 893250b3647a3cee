"""
Prefect flow for building the static dashboard from cached data.

Rendering reads only what ``load-city`` saved, so switching between the
3-day and 5-day forecast is a re-run with a different ``window_size`` and
never refetches.

Run locally:
    python -m weather_dashboard.flows.build
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, date, datetime, timedelta, timezone
from pathlib import Path
from typing import Any

from prefect import flow, task

from weather_dashboard.analysis.forecast import DEFAULT_TIME_SLOTS, TimeSlot
from weather_dashboard.config import get_settings
from weather_dashboard.datasources import openweather
from weather_dashboard.renderers import render_template
from weather_dashboard.renderers.air_quality import build_air_quality_html
from weather_dashboard.renderers.current import build_current_html, build_uv_html
from weather_dashboard.renderers.forecast import build_forecast_html, build_timeline_html
from weather_dashboard.renderers.weather_utils import IconSet
from weather_dashboard.schemas import AirPollutionResponse, CurrentWeather, ForecastResponse
from weather_dashboard.store import DataStore

store = DataStore(Path(get_settings().data_dir))

# Paths matching what fetch.py writes
CURRENT_PATH = Path("live/current.json")
FORECAST_PATH = Path("live/forecast.json")
AIR_QUALITY_PATH = Path("live/air_quality.json")
LIVE_PATHS = (CURRENT_PATH, FORECAST_PATH, AIR_QUALITY_PATH)


# =============================================================================
# Data loading tasks
# =============================================================================


@task(name="load-payloads")
def load_payloads() -> dict[str, Any] | None:
    """Load current weather, forecast, and air quality from the store.

    Returns None unless all three are present; a partial set is never rendered.
    ``fresh`` is False once any of them is past its ``valid_until``.
    """
    current = store.read(CURRENT_PATH)
    forecast = store.read(FORECAST_PATH)
    air_quality = store.read(AIR_QUALITY_PATH)
    if current is None or forecast is None or air_quality is None:
        return None

    raw = store.read_raw(CURRENT_PATH) or {}
    return {
        "fetched_at": raw.get("meta", {}).get("fetched_at", ""),
        "fresh": all(store.is_fresh(path) for path in LIVE_PATHS),
        "current": current,
        "forecast": forecast,
        "air_quality": air_quality,
    }


def format_updated(fetched_at: str, timezone_offset: int) -> str:
    """Fetch time in the city's local time, e.g. ``2024-06-01 14:05``."""
    if not fetched_at:
        return "unknown"
    fetched_dt = datetime.fromisoformat(fetched_at)
    local_dt = fetched_dt.astimezone(timezone(timedelta(seconds=timezone_offset)))
    return local_dt.strftime("%Y-%m-%d %H:%M")


# =============================================================================
# Main build task and flow
# =============================================================================


@task(name="build-html")
def build_html(
    payloads: dict[str, Any],
    today: str,
    window_size: int,
    icon_set: IconSet = "lucide",
    slots: Sequence[TimeSlot] = DEFAULT_TIME_SLOTS,
) -> str:
    """Build the dashboard page from the cached payloads."""
    current = openweather.validate(CurrentWeather, payloads["current"], "City not found")
    forecast = openweather.validate(
        ForecastResponse, payloads["forecast"], "Failed to fetch forecast"
    )
    air = openweather.validate(
        AirPollutionResponse, payloads["air_quality"], "Failed to fetch air quality"
    )

    return render_template(
        "base.html.j2",
        city=current.location_label,
        updated=format_updated(payloads.get("fetched_at", ""), current.timezone),
        out_of_date=not payloads.get("fresh", True),
        current_html=build_current_html(current),
        uv_html=build_uv_html(current),
        air_quality_html=build_air_quality_html(air),
        forecast_html=build_forecast_html(
            forecast, today=today, window_size=window_size, icon_set=icon_set
        ),
        timeline_html=build_timeline_html(forecast, today=today, slots=slots, icon_set=icon_set),
    )


@task(name="write-site")
def write_site(html: str) -> Path:
    """Write HTML to the site directory."""
    site_dir = store.derived / "site"
    site_dir.mkdir(parents=True, exist_ok=True)
    output_path = site_dir / "index.html"
    with output_path.open("w") as f:
        f.write(html)
    return output_path


@flow(name="build-dashboard", log_prints=True)
def build_dashboard(
    window_size: int | None = None,
    today: date | None = None,
) -> dict[str, Any]:
    """
    Build the static dashboard from the last loaded city.

    Args:
        window_size: Upcoming days to show (defaults to ``forecast_days``).
        today: Date treated as "today" (defaults to the current UTC date,
            which is the clock the provider's forecast timestamps use).
    """
    settings = get_settings()
    days = window_size if window_size is not None else settings.forecast_days
    today_str = (today or datetime.now(UTC).date()).isoformat()

    print("Loading cached weather data...")
    payloads = load_payloads()
    if not payloads:
        print("No weather data found. Run the load-city flow first.")
        return {"error": "no data"}

    if not payloads["fresh"]:
        print("Cached weather data is past its expiry; showing it anyway.")

    print(f"Building dashboard ({days}-day forecast, today={today_str})...")
    html = build_html(payloads, today=today_str, window_size=days, icon_set=settings.icon_set)

    print("Writing site...")
    output_path = write_site(html)

    print(f"Site built: {output_path}")
    return {
        "pages": 1,
        "output": str(output_path),
        "window_size": days,
        "fresh": payloads["fresh"],
    }


if __name__ == "__main__":
    result = build_dashboard()
    print(f"Flow complete: {result}")
