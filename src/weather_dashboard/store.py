"""Data store with freshness-aware caching and user preferences.

Manages read/write of JSON files organized into tiers:
  - live/: Provider payloads (current weather, forecast, air quality), short TTL
  - derived/: Computed outputs, always recomputed (the HTML dashboard)
  - preferences/: Small user state that survives between runs (last city)

Every JSON file in ``live/`` is wrapped in a metadata envelope with
``valid_until`` so the build can flag out-of-date inputs, and so a build
can re-render (e.g. 3 vs 5 days) without refetching.

A city load claims a request token before fetching; when a newer load has
started in the meantime, the older one must not overwrite the newer results.
"""

from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Mapping
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

PREFERENCES_PATH = Path("preferences/preferences.json")
ACTIVE_REQUEST_PATH = Path("preferences/active_request.json")

LAST_CITY_KEY = "last_city"


class DataStore:
    """Manages read/write of cached data files with TTL."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.live = base_dir / "live"
        self.derived = base_dir / "derived"
        self.preferences = base_dir / "preferences"

    def read(self, path: Path) -> dict[str, Any] | None:
        """Read data payload from a metadata-enveloped JSON file.

        Returns the ``data`` field, or None if the file doesn't exist.
        """
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            envelope: dict[str, Any] = json.load(f)
        return envelope.get("data", envelope)

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        """Read the full envelope (meta + data) from a JSON file."""
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            result: dict[str, Any] = json.load(f)
        return result

    def write(
        self,
        path: Path,
        data: Any,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Write data wrapped in a metadata envelope.

        Args:
            path: Relative path under base_dir (e.g. ``live/forecast.json``).
            data: Payload to store under the ``data`` key.
            source: Data source identifier (e.g. ``"openweathermap.org"``).
            valid_until: Expiry timestamp. None means derived/no-cache.
            **params: Extra metadata fields (city, coordinates, ...).

        Returns:
            Absolute path of the written file.
        """
        return self.write_batch({path: data}, source, valid_until, **params)[path]

    def write_batch(
        self,
        entries: Mapping[Path, Any],
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> dict[Path, Path]:
        """Write several envelopes so that either all of them land or none do.

        Every payload is serialized to a temporary file next to its target
        first; targets are only replaced once all of them serialized.

        Returns:
            Mapping of each relative path to the absolute path written.
        """
        meta: dict[str, Any] = {
            "source": source,
            "fetched_at": datetime.now(UTC).isoformat(),
        }
        if valid_until is not None:
            meta["valid_until"] = valid_until.isoformat()
        if params:
            meta.update(params)

        staged: dict[Path, Path] = {}
        try:
            for path, data in entries.items():
                full = self._resolve(path)
                full.parent.mkdir(parents=True, exist_ok=True)
                tmp = full.with_name(f".{full.name}.tmp")
                staged[path] = tmp
                with tmp.open("w") as f:
                    json.dump({"meta": meta, "data": data}, f, indent=2)
        except Exception:
            for tmp in staged.values():
                tmp.unlink(missing_ok=True)
            raise

        written: dict[Path, Path] = {}
        for path, tmp in staged.items():
            written[path] = tmp.replace(self._resolve(path))
        return written

    def is_fresh(self, path: Path) -> bool:
        """Check if a file exists and hasn't expired.

        Returns False if the file is missing, has no ``valid_until``, or
        the expiry time has passed.
        """
        raw = self.read_raw(path)
        if raw is None:
            return False

        valid_until = raw.get("meta", {}).get("valid_until")
        if valid_until is None:
            return False

        expiry = datetime.fromisoformat(valid_until)
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return datetime.now(UTC) < expiry

    # -------------------------------------------------------------------------
    # Preferences
    # -------------------------------------------------------------------------

    def get_preference(self, key: str, default: str | None = None) -> str | None:
        """Return a stored preference, or ``default`` if unset."""
        prefs = self._read_plain(PREFERENCES_PATH)
        value = prefs.get(key)
        return value if value is not None else default

    def set_preference(self, key: str, value: str) -> None:
        """Persist a single preference, keeping the others."""
        prefs = self._read_plain(PREFERENCES_PATH)
        prefs[key] = value
        self._write_plain(PREFERENCES_PATH, prefs)

    # -------------------------------------------------------------------------
    # Request tokens
    # -------------------------------------------------------------------------

    def begin_request(self) -> str:
        """Issue a token for a new load and mark it as the active one."""
        token = uuid.uuid4().hex
        self._write_plain(
            ACTIVE_REQUEST_PATH,
            {"token": token, "started_at": datetime.now(UTC).isoformat()},
        )
        logger.debug("Began request %s", token)
        return token

    def is_current_request(self, token: str) -> bool:
        """True if no newer load has started since ``token`` was issued."""
        return self._read_plain(ACTIVE_REQUEST_PATH).get("token") == token

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _read_plain(self, path: Path) -> dict[str, Any]:
        full = self._resolve(path)
        if not full.exists():
            return {}
        with full.open() as f:
            result: dict[str, Any] = json.load(f)
        return result

    def _write_plain(self, path: Path, data: dict[str, Any]) -> None:
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)
        with full.open("w") as f:
            json.dump(data, f, indent=2)

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full
