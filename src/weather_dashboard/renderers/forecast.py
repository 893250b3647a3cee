"""Upcoming-days forecast and today's timeline renderers.

Both group the 3-hourly samples by day; the forecast list summarizes the
days after today, the timeline picks today's samples at fixed times.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_dashboard.analysis.forecast import (
    DEFAULT_TIME_SLOTS,
    bucket_by_day,
    daily_time_slots,
    hottest_slot_index,
    samples_from_forecast,
    select_upcoming_days,
    summarize_day,
)
from weather_dashboard.renderers import render_template
from weather_dashboard.renderers.date_utils import format_date_label
from weather_dashboard.renderers.weather_utils import IconSet, icon_for, round_temp

if TYPE_CHECKING:
    from collections.abc import Sequence

    from weather_dashboard.analysis.forecast import TimeSlot
    from weather_dashboard.schemas import ForecastResponse

# Window sizes offered by the "Next 5 Days" / "Show Less" toggle
COMPACT_WINDOW = 3
FULL_WINDOW = 5


def toggle_label(window_size: int) -> str:
    """Label for the button that switches to the other window size."""
    return "Show Less" if window_size > COMPACT_WINDOW else f"Next {FULL_WINDOW} Days"


def build_forecast_html(
    forecast: ForecastResponse,
    *,
    today: str,
    window_size: int = COMPACT_WINDOW,
    icon_set: IconSet = "lucide",
) -> str:
    """Build the forecast list and the "tomorrow" card.

    Args:
        forecast: Validated 5-day / 3-hour forecast.
        today: ISO date to exclude (the caller's notion of today).
        window_size: Maximum number of upcoming days to show.
        icon_set: ``"lucide"`` or ``"openweather"``.
    """
    buckets = bucket_by_day(samples_from_forecast(forecast))
    days = select_upcoming_days(buckets, today, window_size)

    if not days:
        return "<p>No forecast data available.</p>"

    summaries = [summarize_day(buckets[d]) for d in days]

    entries = []
    for summary in summaries:
        rep = summary.representative
        entries.append(
            {
                "date_label": format_date_label(summary.date),
                "condition": rep.condition_main,
                "max": round_temp(summary.max_temp),
                "min": round_temp(summary.min_temp),
                "icon": icon_for(rep.condition_main, rep.condition_icon, icon_set=icon_set),
            }
        )

    first = summaries[0]
    tomorrow = {
        "city": forecast.city.name,
        "temp": round_temp(first.max_temp),
        "condition": first.representative.condition_main,
    }

    return render_template(
        "forecast.html.j2",
        entries=entries,
        tomorrow=tomorrow,
        toggle_label=toggle_label(window_size),
    )


def build_timeline_html(
    forecast: ForecastResponse,
    *,
    today: str,
    slots: Sequence[TimeSlot] = DEFAULT_TIME_SLOTS,
    icon_set: IconSet = "lucide",
) -> str:
    """Build today's temperature timeline, highlighting the warmest slot."""
    buckets = bucket_by_day(samples_from_forecast(forecast))
    today_bucket = buckets.get(today, [])
    if not today_bucket:
        return "<p>No data for today</p>"

    chosen = daily_time_slots(today_bucket, slots)
    hottest = hottest_slot_index(chosen)

    items = []
    for idx, slot in enumerate(chosen):
        if slot is None:
            continue
        sample = slot.sample
        items.append(
            {
                "label": slot.label,
                "temp": round_temp(sample.temperature),
                "icon": icon_for(
                    sample.condition_main,
                    sample.condition_icon,
                    icon_set=icon_set,
                    timeline=True,
                ),
                "active": idx == hottest,
            }
        )

    return render_template("timeline.html.j2", items=items)
