"""
Tests for the build-dashboard flow module.
"""

from __future__ import annotations

import json
from datetime import date
from typing import TYPE_CHECKING, Any

import pytest

from weather_dashboard.exceptions import FetchError
from weather_dashboard.flows import build
from weather_dashboard.store import DataStore

if TYPE_CHECKING:
    from pathlib import Path

FETCHED_AT = "2024-06-01T06:30:00+00:00"
FAR_FUTURE = "2999-01-01T00:00:00+00:00"


def write_envelope(
    base_dir: Path,
    path: str,
    data: object,
    source: str = "test",
    valid_until: str | None = None,
) -> None:
    """Write test data in the metadata envelope format."""
    full = base_dir / path
    full.parent.mkdir(parents=True, exist_ok=True)
    meta = {"source": source, "fetched_at": FETCHED_AT}
    if valid_until is not None:
        meta["valid_until"] = valid_until
    envelope = {"meta": meta, "data": data}
    full.write_text(json.dumps(envelope))


@pytest.fixture
def payloads(
    current_payload: dict[str, Any],
    forecast_payload: dict[str, Any],
    air_payload: dict[str, Any],
) -> dict[str, Any]:
    return {
        "fetched_at": FETCHED_AT,
        "current": current_payload,
        "forecast": forecast_payload,
        "air_quality": air_payload,
    }


@pytest.fixture
def cached_store(tmp_path: Path, payloads: dict[str, Any]) -> DataStore:
    """Store populated the way a successful load leaves it."""
    write_envelope(tmp_path, "live/current.json", payloads["current"])
    write_envelope(tmp_path, "live/forecast.json", payloads["forecast"])
    write_envelope(tmp_path, "live/air_quality.json", payloads["air_quality"])
    return DataStore(tmp_path)


class TestLoadPayloads:
    """Test loading cached payloads."""

    def test_all_present(
        self, cached_store: DataStore, monkeypatch: pytest.MonkeyPatch, payloads: dict[str, Any]
    ) -> None:
        monkeypatch.setattr(build, "store", cached_store)

        result = build.load_payloads()

        assert result == {**payloads, "fresh": False}

    def test_fresh_cache(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, payloads: dict[str, Any]
    ) -> None:
        for name in ("current", "forecast", "air_quality"):
            write_envelope(tmp_path, f"live/{name}.json", payloads[name], valid_until=FAR_FUTURE)
        monkeypatch.setattr(build, "store", DataStore(tmp_path))

        result = build.load_payloads()

        assert result is not None
        assert result["fresh"] is True

    def test_one_expired_file_is_not_fresh(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, payloads: dict[str, Any]
    ) -> None:
        expiry = {"current": FAR_FUTURE, "forecast": FAR_FUTURE, "air_quality": FETCHED_AT}
        for name, valid_until in expiry.items():
            write_envelope(tmp_path, f"live/{name}.json", payloads[name], valid_until=valid_until)
        monkeypatch.setattr(build, "store", DataStore(tmp_path))

        result = build.load_payloads()

        assert result is not None
        assert result["fresh"] is False

    def test_nothing_cached(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(build, "store", DataStore(tmp_path))
        assert build.load_payloads() is None

    def test_partial_cache(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, current_payload: dict[str, Any]
    ) -> None:
        """Current weather alone is not enough to render."""
        write_envelope(tmp_path, "live/current.json", current_payload)
        monkeypatch.setattr(build, "store", DataStore(tmp_path))
        assert build.load_payloads() is None


class TestFormatUpdated:
    """Test the "updated" timestamp."""

    def test_local_time(self) -> None:
        assert build.format_updated(FETCHED_AT, 19800) == "2024-06-01 12:00"

    def test_negative_offset(self) -> None:
        assert build.format_updated(FETCHED_AT, -7 * 3600) == "2024-05-31 23:30"

    def test_missing(self) -> None:
        assert build.format_updated("", 0) == "unknown"


class TestBuildHtml:
    """Test building the full page."""

    def test_full_page(self, payloads: dict[str, Any]) -> None:
        html = build.build_html(payloads, "2024-06-01", 3)

        assert html.startswith("<!DOCTYPE html>")
        assert "<h1>Delhi, IN</h1>" in html
        assert "Updated 2024-06-01 12:00" in html
        assert 'id="temp-value"' in html
        assert 'id="uv-value"' in html
        assert 'id="aqi-number"' in html
        assert 'id="forecast-list"' in html
        assert 'id="temp-timeline"' in html
        # Fragments are inserted as markup, not escaped text
        assert "&lt;div" not in html
        assert "stale-note" not in html

    def test_out_of_date_note(self, payloads: dict[str, Any]) -> None:
        """Expired cached data is still rendered, with a note."""
        html = build.build_html({**payloads, "fresh": False}, "2024-06-01", 3)

        assert 'id="stale-note"' in html
        assert "may be out of date" in html
        assert 'id="forecast-list"' in html

    def test_window_size(self, payloads: dict[str, Any]) -> None:
        compact = build.build_html(payloads, "2024-05-31", 1)
        full = build.build_html(payloads, "2024-05-31", 5)

        assert compact.count('class="forecast-item"') == 1
        assert full.count('class="forecast-item"') == 3
        assert "Next 5 Days" in compact
        assert "Show Less" in full

    def test_invalid_cached_payload(self, payloads: dict[str, Any]) -> None:
        payloads["air_quality"] = {"list": []}

        with pytest.raises(FetchError):
            build.build_html(payloads, "2024-06-01", 3)


class TestWriteSite:
    """Test writing the rendered page."""

    def test_write_site(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(build, "store", DataStore(tmp_path))

        path = build.write_site("<html>ok</html>")

        assert path == tmp_path / "derived" / "site" / "index.html"
        assert path.read_text() == "<html>ok</html>"


class TestBuildDashboardFlow:
    """Test the build-dashboard flow."""

    def test_no_data(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(build, "store", DataStore(tmp_path))

        result = build.build_dashboard(today=date(2024, 6, 1))

        assert result == {"error": "no data"}
        assert not (tmp_path / "derived").exists()

    def test_with_data(
        self, cached_store: DataStore, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(build, "store", cached_store)

        result = build.build_dashboard(window_size=5, today=date(2024, 6, 1))

        output = tmp_path / "derived" / "site" / "index.html"
        assert result == {"pages": 1, "output": str(output), "window_size": 5, "fresh": False}
        html = output.read_text()
        assert "may be out of date" in html
        assert "June 2" in html
        assert "June 1</p>" not in html
        assert "Show Less" in html

    def test_fresh_data_has_no_note(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, payloads: dict[str, Any]
    ) -> None:
        for name in ("current", "forecast", "air_quality"):
            write_envelope(tmp_path, f"live/{name}.json", payloads[name], valid_until=FAR_FUTURE)
        monkeypatch.setattr(build, "store", DataStore(tmp_path))

        result = build.build_dashboard(today=date(2024, 6, 1))

        assert result["fresh"] is True
        html = (tmp_path / "derived" / "site" / "index.html").read_text()
        assert "stale-note" not in html

    def test_window_defaults_to_settings(
        self, cached_store: DataStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(build, "store", cached_store)
        monkeypatch.setenv("WEATHER_DASHBOARD_FORECAST_DAYS", "2")
        build.get_settings.cache_clear()
        try:
            result = build.build_dashboard(today=date(2024, 6, 1))
        finally:
            build.get_settings.cache_clear()

        assert result["window_size"] == 2
