"""Current conditions, sun arc, and UV renderers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_dashboard.analysis.conditions import classify_uv, estimate_uv_index
from weather_dashboard.analysis.solar import ArcGeometry, solar_position
from weather_dashboard.renderers import render_template
from weather_dashboard.renderers.weather_utils import (
    format_time,
    format_visibility_km,
    round_temp,
)

if TYPE_CHECKING:
    from weather_dashboard.schemas import CurrentWeather

# Sun arc drawn in a 220x120 SVG viewBox: half circle resting on y=110.
SUN_ARC = ArcGeometry(center_x=110, center_y=110, radius=100)


def build_current_html(current: CurrentWeather, arc: ArcGeometry = SUN_ARC) -> str:
    """Build the current-weather card plus the sunrise/sunset arc."""
    offset = current.timezone
    position = solar_position(current.sys.sunrise, current.sys.sunset, current.dt, arc)

    sun = None
    if position is not None:
        sun = {
            "x": f"{position.x:.1f}",
            "y": f"{position.y:.1f}",
            "progress_pct": f"{position.progress * 100:.0f}",
        }

    return render_template(
        "current.html.j2",
        temp=round_temp(current.main.temp),
        description=current.condition.description,
        location=current.location_label,
        pressure=current.main.pressure,
        visibility_km=format_visibility_km(current.visibility),
        humidity=current.main.humidity,
        sunrise=format_time(current.sys.sunrise, offset),
        sunset=format_time(current.sys.sunset, offset),
        current_time=format_time(current.dt, offset),
        arc=arc,
        sun=sun,
    )


def build_uv_html(current: CurrentWeather) -> str:
    """Build the UV card from the estimated index."""
    uv = estimate_uv_index(current.condition.main)
    level, message = classify_uv(uv)
    return render_template(
        "uv.html.j2",
        uv=uv,
        level=level,
        message=message,
        badge_class="uv-" + level.lower().replace(" ", "-"),
    )
