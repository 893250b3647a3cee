"""Sun position along the daylight arc.

Progress is the fraction of daylight elapsed between sunrise and sunset; the
marker is placed on the upper half of a circle, left (sunrise) to right
(sunset). Arc geometry always comes from the caller so this stays independent
of how the arc is drawn.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from weather_dashboard.exceptions import InvalidIntervalError


@dataclass(frozen=True)
class ArcGeometry:
    """Half-circle the sun marker travels along (same units as the output)."""

    center_x: float
    center_y: float
    radius: float


@dataclass(frozen=True)
class SolarPosition:
    progress: float
    angle_radians: float
    x: float
    y: float


def compute_progress(sunrise: float, sunset: float, now: float) -> float:
    """
    Fraction of daylight elapsed at ``now``, clamped to [0, 1].

    All three values are epoch seconds on the same clock.

    Raises:
        InvalidIntervalError: ``sunset`` is not after ``sunrise``.
    """
    if sunset <= sunrise:
        msg = f"Invalid daylight interval: sunrise={sunrise}, sunset={sunset}"
        raise InvalidIntervalError(msg)
    if now <= sunrise:
        return 0.0
    if now >= sunset:
        return 1.0
    return (now - sunrise) / (sunset - sunrise)


def compute_arc_position(progress: float, geometry: ArcGeometry) -> SolarPosition:
    """
    Map progress onto the arc.

    ``progress=0`` is the leftmost point (angle pi), ``progress=1`` the
    rightmost (angle 0). ``y`` grows downward, as in screen coordinates.
    """
    angle = math.pi * (1 - progress)
    return SolarPosition(
        progress=progress,
        angle_radians=angle,
        x=geometry.center_x + geometry.radius * math.cos(angle),
        y=geometry.center_y - geometry.radius * math.sin(angle),
    )


def solar_position(
    sunrise: float, sunset: float, now: float, geometry: ArcGeometry
) -> SolarPosition | None:
    """Arc position for ``now``, or None when sunrise/sunset are unusable."""
    try:
        progress = compute_progress(sunrise, sunset, now)
    except InvalidIntervalError:
        return None
    return compute_arc_position(progress, geometry)
