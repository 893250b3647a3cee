"""Group 3-hourly forecast samples into calendar days.

The provider returns a flat, chronological list of samples stamped
``"YYYY-MM-DD HH:MM:SS"``. The forecast list and the "tomorrow" card need one
summary per upcoming day; the timeline needs today's samples at fixed times.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from weather_dashboard.exceptions import EmptyInputError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from weather_dashboard.schemas import ForecastResponse

MIDDAY = "12:00:00"


@dataclass(frozen=True)
class ForecastSample:
    """A single 3-hour forecast data point."""

    timestamp: str
    temperature: float
    condition_main: str
    condition_icon: str
    condition_description: str = ""

    @property
    def date(self) -> str:
        """Calendar date portion of the timestamp (``YYYY-MM-DD``)."""
        return self.timestamp.split(" ", 1)[0]

    @property
    def time_of_day(self) -> str:
        """Time portion of the timestamp (``HH:MM:SS``), empty if absent."""
        parts = self.timestamp.split(" ", 1)
        return parts[1] if len(parts) > 1 else ""


@dataclass(frozen=True)
class DaySummary:
    """
    Min/max temperature and representative sample for one day.

    Temperatures are unrounded; rounding is a presentation concern. The
    representative is picked by time slot, not by value, so it is not
    guaranteed to lie between ``min_temp`` and ``max_temp`` after rounding
    elsewhere.
    """

    date: str
    min_temp: float
    max_temp: float
    representative: ForecastSample


@dataclass(frozen=True)
class TimeSlot:
    """A named time of day on the timeline, e.g. ``Morning`` at ``09:00:00``."""

    label: str
    time: str


@dataclass(frozen=True)
class SlotSample:
    """The sample chosen for a timeline slot."""

    label: str
    sample: ForecastSample

    @property
    def temperature(self) -> float:
        return self.sample.temperature


DEFAULT_TIME_SLOTS: tuple[TimeSlot, ...] = (
    TimeSlot("Morning", "09:00:00"),
    TimeSlot("Afternoon", "15:00:00"),
    TimeSlot("Evening", "18:00:00"),
    TimeSlot("Night", "21:00:00"),
)


def samples_from_forecast(forecast: ForecastResponse) -> list[ForecastSample]:
    """Convert a validated forecast response into samples, preserving order."""
    return [
        ForecastSample(
            timestamp=entry.dt_txt,
            temperature=entry.main.temp,
            condition_main=entry.weather[0].main,
            condition_icon=entry.weather[0].icon,
            condition_description=entry.weather[0].description,
        )
        for entry in forecast.entries
    ]


def bucket_by_day(
    samples: Iterable[ForecastSample],
    *,
    require_non_empty: bool = False,
) -> dict[str, list[ForecastSample]]:
    """
    Group samples by calendar date.

    Keys appear in order of first occurrence and samples keep their input
    order within a bucket. Nothing is reordered or deduplicated.

    Args:
        samples: Forecast samples in provider (chronological) order.
        require_non_empty: Raise instead of returning ``{}`` for empty input.

    Raises:
        EmptyInputError: ``require_non_empty`` is set and there are no samples.
    """
    buckets: dict[str, list[ForecastSample]] = {}
    for sample in samples:
        buckets.setdefault(sample.date, []).append(sample)

    if require_non_empty and not buckets:
        raise EmptyInputError
    return buckets


def select_upcoming_days(
    buckets: Mapping[str, Sequence[ForecastSample]],
    today: str,
    window_size: int,
) -> list[str]:
    """
    Pick up to ``window_size`` dates after ``today``.

    ``today`` is excluded by exact string match; the remaining keys are
    returned in their original order. Fewer than ``window_size`` dates is
    not an error.
    """
    if window_size <= 0:
        return []
    return [d for d in buckets if d != today][:window_size]


def summarize_day(bucket: Sequence[ForecastSample]) -> DaySummary:
    """
    Summarize one day's samples.

    Min/max are taken over every sample of the day. The representative is the
    first ``12:00:00`` sample, falling back to the first sample of the bucket.
    """
    temps = [s.temperature for s in bucket]
    midday = next((s for s in bucket if s.time_of_day == MIDDAY), bucket[0])
    return DaySummary(
        date=bucket[0].date,
        min_temp=min(temps),
        max_temp=max(temps),
        representative=midday,
    )


def daily_time_slots(
    bucket: Sequence[ForecastSample],
    slots: Sequence[TimeSlot] = DEFAULT_TIME_SLOTS,
) -> list[SlotSample | None]:
    """
    Choose a sample for each timeline slot.

    Each slot takes the first sample whose time of day matches, or the
    bucket's last sample if none does. Every slot is ``None`` for an empty
    bucket. Callers pass the bucket for "today" (see ``bucket_by_day``).
    """
    if not bucket:
        return [None for _ in slots]

    chosen: list[SlotSample | None] = []
    for slot in slots:
        sample = next((s for s in bucket if slot.time in s.time_of_day), bucket[-1])
        chosen.append(SlotSample(label=slot.label, sample=sample))
    return chosen


def hottest_slot_index(slots: Sequence[SlotSample | None]) -> int | None:
    """Index of the warmest present slot; the earliest one wins ties."""
    best: int | None = None
    for idx, slot in enumerate(slots):
        if slot is None:
            continue
        current = slots[best] if best is not None else None
        if current is None or slot.temperature > current.temperature:
            best = idx
    return best
