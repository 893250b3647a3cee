"""Air-quality and UV classifiers.

The UV index is *estimated* from the weather condition keyword (the free API
tier has no UV data). It is a rough guide, not a measurement.
"""

from __future__ import annotations

# OpenWeatherMap AQI scale (1-5)
AQI_LABELS: dict[int, str] = {
    1: "Good",
    2: "Fair",
    3: "Moderate",
    4: "Poor",
    5: "Very Poor",
}

# First matching keyword wins; checked against the lower-cased condition.
UV_KEYWORDS: tuple[tuple[str, int], ...] = (
    ("clear", 8),
    ("cloud", 4),
    ("rain", 2),
)
DEFAULT_UV = 3


def air_quality_label(aqi: int) -> str:
    """Human-readable AQI label, ``"Unknown"`` outside 1-5."""
    return AQI_LABELS.get(aqi, "Unknown")


def air_quality_bar_percent(aqi: int) -> float:
    """Indicator position on the AQI bar: 0% = Good, 100% = Very Poor."""
    return (aqi - 1) / 4 * 100


def estimate_uv_index(condition_main: str) -> int:
    """Guess a UV index from the condition keyword (e.g. ``"Clear"`` -> 8)."""
    main = condition_main.lower()
    for keyword, uv in UV_KEYWORDS:
        if keyword in main:
            return uv
    return DEFAULT_UV


def classify_uv(uv: int) -> tuple[str, str]:
    """Return ``(level, message)`` for a UV index."""
    if uv >= 8:
        return "Very High", "Very high risk of UV rays"
    if uv >= 6:
        return "High", "High risk of UV rays"
    if uv >= 3:
        return "Moderate", "Moderate risk of UV rays"
    return "Low", "Low risk of UV rays"
