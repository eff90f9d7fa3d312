"""Disk cache for the release listing with a freshness window."""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable

import jsonschema

from create_tau_app.domain.errors import CacheUnavailableError
from create_tau_app.domain.release import ReleaseSet
from create_tau_app.ports.release_registry import ReleaseRegistry
from create_tau_app.resources import load_releases_schema
from create_tau_app.utils.console import Console

CACHE_EXPIRES = timedelta(hours=4)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CacheEntry:
    releases: ReleaseSet
    fetched_at: datetime

    @classmethod
    def from_file(cls, path: Path) -> "CacheEntry | None":
        """Load a cache entry, returning ``None`` when absent or unreadable."""

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            jsonschema.validate(data, load_releases_schema())
        except (OSError, json.JSONDecodeError, jsonschema.ValidationError):
            return None
        fetched_at = None
        if ts := data.get("fetched_at"):
            try:
                fetched_at = datetime.fromisoformat(ts)
            except ValueError:
                fetched_at = None
        if fetched_at is None:
            # Entries written without a timestamp age from their mtime.
            try:
                fetched_at = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
            except OSError:
                return None
        elif fetched_at.tzinfo is None:
            fetched_at = fetched_at.replace(tzinfo=timezone.utc)
        return cls(releases=ReleaseSet.from_dict(data), fetched_at=fetched_at)

    def to_dict(self) -> dict[str, Any]:
        data = self.releases.to_dict()
        data["fetched_at"] = self.fetched_at.isoformat()
        return data

    def is_fresh(self, now: datetime, ttl: timedelta) -> bool:
        # A timestamp ahead of the clock is never trusted.
        age = now - self.fetched_at
        return timedelta(0) <= age < ttl


class ReleaseCache:
    def __init__(
        self,
        registry: ReleaseRegistry,
        cache_file: Path,
        *,
        ttl: timedelta = CACHE_EXPIRES,
        clock: Callable[[], datetime] = _utc_now,
        console: Console | None = None,
    ) -> None:
        self._registry = registry
        self._cache_file = cache_file
        self._ttl = ttl
        self._clock = clock
        self._console = console or Console()

    def get_releases(self, force_refresh: bool = False) -> ReleaseSet:
        if not force_refresh:
            entry = CacheEntry.from_file(self._cache_file)
            if entry is not None and entry.is_fresh(self._clock(), self._ttl):
                self._console.verbose("Using cached release data.")
                return entry.releases

        self._console.verbose("Querying for available releases...")
        releases = self._registry.list_releases()
        self._console.verbose("Updating cached release data...")
        self._store(CacheEntry(releases=releases, fetched_at=self._clock()))
        return releases

    def _store(self, entry: CacheEntry) -> None:
        payload = json.dumps(entry.to_dict(), indent=2, ensure_ascii=False) + "\n"
        try:
            self._cache_file.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=".releases-", suffix=".json", dir=self._cache_file.parent
            )
        except OSError as exc:
            raise CacheUnavailableError(f"Could not write the release cache {self._cache_file}: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self._cache_file)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise CacheUnavailableError(f"Could not write the release cache {self._cache_file}: {exc}") from exc
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
