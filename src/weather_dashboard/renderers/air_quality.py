"""Air-quality indicator renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_dashboard.analysis.conditions import air_quality_bar_percent, air_quality_label
from weather_dashboard.renderers import render_template

if TYPE_CHECKING:
    from weather_dashboard.schemas import AirPollutionResponse


def build_air_quality_html(air: AirPollutionResponse) -> str:
    """Build the AQI card: number, label, and indicator position on the bar."""
    aqi = air.aqi
    percent = min(max(air_quality_bar_percent(aqi), 0.0), 100.0)
    return render_template(
        "air_quality.html.j2",
        aqi=aqi,
        label=air_quality_label(aqi),
        indicator_left=f"{percent:.0f}",
    )
