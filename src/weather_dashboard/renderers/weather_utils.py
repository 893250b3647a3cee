"""Weather utility functions for renderers.

Pure conversion functions with no external dependencies.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime
from typing import Literal

IconSet = Literal["lucide", "openweather"]

# OpenWeatherMap "main" condition -> Lucide icon name
LUCIDE_ICONS: dict[str, str] = {
    "Clear": "sun",
    "Clouds": "cloud",
    "Rain": "cloud-rain",
    "Drizzle": "cloud-drizzle",
    "Thunderstorm": "cloud-lightning",
    "Snow": "cloud-snow",
    "Mist": "cloud-fog",
    "Smoke": "cloud-fog",
    "Haze": "cloud-fog",
    "Dust": "cloud-fog",
    "Fog": "cloud-fog",
    "Sand": "cloud-fog",
    "Ash": "cloud-fog",
    "Squall": "wind",
    "Tornado": "wind",
}

# The timeline uses a bolder snow glyph
LUCIDE_TIMELINE_ICONS: dict[str, str] = {**LUCIDE_ICONS, "Snow": "snowflake"}

DEFAULT_LUCIDE_ICON = "cloud"

OPENWEATHER_ICON_URL = "https://openweathermap.org/img/wn/{code}@2x.png"


def round_temp(value: float) -> int:
    """Round half up (``-0.5 -> 0``, ``2.5 -> 3``), matching how temps are displayed."""
    return math.floor(value + 0.5)


def icon_for(
    condition_main: str,
    icon_code: str = "",
    *,
    icon_set: IconSet = "lucide",
    timeline: bool = False,
) -> dict[str, str]:
    """
    Resolve the icon for a condition.

    Returns a dict the ``icon`` template macro understands: ``kind`` is
    ``"lucide"`` (with ``name``) or ``"img"`` (with ``src``). The
    ``openweather`` set falls back to Lucide when the sample has no icon code.
    """
    if icon_set == "openweather" and icon_code:
        return {
            "kind": "img",
            "src": OPENWEATHER_ICON_URL.format(code=icon_code),
            "alt": condition_main,
        }
    mapping = LUCIDE_TIMELINE_ICONS if timeline else LUCIDE_ICONS
    return {
        "kind": "lucide",
        "name": mapping.get(condition_main, DEFAULT_LUCIDE_ICON),
        "alt": condition_main,
    }


def format_time(unix_seconds: int, timezone_offset: int) -> str:
    """
    Format an epoch timestamp as local ``H:MM am/pm``.

    Args:
        unix_seconds: Epoch seconds (UTC).
        timezone_offset: City's offset from UTC in seconds.
    """
    local = datetime.fromtimestamp(unix_seconds + timezone_offset, tz=UTC)
    ampm = "pm" if local.hour >= 12 else "am"
    hours = local.hour % 12 or 12
    return f"{hours}:{local.minute:02d} {ampm}"


def format_visibility_km(metres: float) -> str:
    """Visibility in kilometres with one decimal."""
    return f"{metres / 1000:.1f}"
