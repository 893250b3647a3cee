"""Shared date-formatting helpers for renderers."""

from __future__ import annotations

from datetime import date


def format_date_label(date_str: str) -> str:
    """Forecast list label from an ISO date, e.g. ``2024-06-02`` -> ``June 2``."""
    d = date.fromisoformat(date_str)
    return f"{d.strftime('%B')} {d.day}"
