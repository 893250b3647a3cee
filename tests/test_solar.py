"""Tests for the sun-arc position module."""

from __future__ import annotations

import math

import pytest

from weather_dashboard.analysis.solar import (
    ArcGeometry,
    SolarPosition,
    compute_arc_position,
    compute_progress,
    solar_position,
)
from weather_dashboard.exceptions import InvalidIntervalError

GEOMETRY = ArcGeometry(center_x=100, center_y=100, radius=50)


class TestComputeProgress:
    """Test the clamped daylight fraction."""

    @pytest.mark.parametrize(
        ("now", "expected"),
        [(100, 0.0), (200, 1.0), (150, 0.5), (125, 0.25)],
    )
    def test_interpolation(self, now: float, expected: float) -> None:
        assert compute_progress(100, 200, now) == expected

    def test_before_sunrise(self) -> None:
        assert compute_progress(100, 200, 50) == 0.0

    def test_after_sunset(self) -> None:
        assert compute_progress(100, 200, 10_000) == 1.0

    def test_sunset_before_sunrise(self) -> None:
        with pytest.raises(InvalidIntervalError):
            compute_progress(200, 100, 150)

    def test_zero_length_day(self) -> None:
        with pytest.raises(InvalidIntervalError):
            compute_progress(100, 100, 100)


class TestComputeArcPosition:
    """Test placement on the half circle."""

    def test_sunrise_is_leftmost(self) -> None:
        pos = compute_arc_position(0.0, GEOMETRY)
        assert pos.angle_radians == pytest.approx(math.pi)
        assert pos.x == pytest.approx(50)
        assert pos.y == pytest.approx(100)

    def test_noon_is_top(self) -> None:
        pos = compute_arc_position(0.5, GEOMETRY)
        assert pos.x == pytest.approx(100)
        assert pos.y == pytest.approx(50)

    def test_sunset_is_rightmost(self) -> None:
        pos = compute_arc_position(1.0, GEOMETRY)
        assert pos.angle_radians == pytest.approx(0)
        assert pos.x == pytest.approx(150)
        assert pos.y == pytest.approx(100)

    def test_keeps_progress(self) -> None:
        assert compute_arc_position(0.25, GEOMETRY).progress == 0.25

    def test_stays_on_circle(self) -> None:
        for i in range(11):
            pos = compute_arc_position(i / 10, GEOMETRY)
            distance = math.hypot(pos.x - GEOMETRY.center_x, pos.y - GEOMETRY.center_y)
            assert distance == pytest.approx(GEOMETRY.radius)
            assert pos.y <= GEOMETRY.center_y + 1e-9


class TestSolarPosition:
    """Test the composed helper."""

    def test_valid_interval(self) -> None:
        pos = solar_position(100, 200, 150, GEOMETRY)
        assert isinstance(pos, SolarPosition)
        assert pos.progress == 0.5

    def test_invalid_interval_returns_none(self) -> None:
        assert solar_position(200, 100, 150, GEOMETRY) is None
