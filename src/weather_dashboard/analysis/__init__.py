"""Pure transforms from provider payloads to display-ready values.

Dependency rule: analysis/ imports from ``schemas`` and ``exceptions`` only.
It never fetches data or produces HTML, and never reads the system clock;
"today" and "now" are always passed in.

Modules:
  - forecast: 3-hourly samples -> day buckets, day summaries, timeline slots
  - solar: sunrise/sunset/now -> day progress and sun-arc position
  - conditions: AQI label / bar position, UV estimate and band
"""

from weather_dashboard.analysis.conditions import (
    air_quality_bar_percent,
    air_quality_label,
    classify_uv,
    estimate_uv_index,
)
from weather_dashboard.analysis.forecast import (
    DEFAULT_TIME_SLOTS,
    DaySummary,
    ForecastSample,
    SlotSample,
    TimeSlot,
    bucket_by_day,
    daily_time_slots,
    hottest_slot_index,
    samples_from_forecast,
    select_upcoming_days,
    summarize_day,
)
from weather_dashboard.analysis.solar import (
    ArcGeometry,
    SolarPosition,
    compute_arc_position,
    compute_progress,
    solar_position,
)

__all__ = [
    "DEFAULT_TIME_SLOTS",
    "ArcGeometry",
    "DaySummary",
    "ForecastSample",
    "SlotSample",
    "SolarPosition",
    "TimeSlot",
    "air_quality_bar_percent",
    "air_quality_label",
    "bucket_by_day",
    "classify_uv",
    "compute_arc_position",
    "compute_progress",
    "daily_time_slots",
    "estimate_uv_index",
    "hottest_slot_index",
    "samples_from_forecast",
    "select_upcoming_days",
    "solar_position",
    "summarize_day",
]
