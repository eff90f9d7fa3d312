"""Domain model for published template releases."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Tuple

import semver

from create_tau_app.domain.errors import UnknownVersionError

LATEST_VERSION = "latest"


def parse_version(value: str) -> semver.Version | None:
    """Return the semantic version of a tag, or ``None`` if it is not one.

    A leading ``v`` or ``=`` is accepted, as release tags commonly carry one.
    """

    if not isinstance(value, str):
        return None
    candidate = value.strip()
    if candidate[:1] in ("v", "="):
        candidate = candidate[1:]
    try:
        return semver.Version.parse(candidate)
    except ValueError:
        return None


def is_semver(value: str) -> bool:
    return parse_version(value) is not None


def latest_of(tags: Iterable[str]) -> str | None:
    candidates: list[Tuple[semver.Version, str]] = []
    for tag in tags:
        parsed = parse_version(tag)
        if parsed is not None:
            candidates.append((parsed, tag))
    if not candidates:
        return None
    # Build metadata does not take part in precedence.
    return max(candidates, key=lambda item: item[0].replace(build=None))[1]


@dataclass(frozen=True)
class ReleaseSet:
    versions: Dict[str, str] = field(default_factory=dict)
    latest: str | None = None

    @classmethod
    def from_releases(cls, versions: Mapping[str, str]) -> "ReleaseSet":
        accepted = {tag: url for tag, url in versions.items() if parse_version(tag) is not None}
        return cls(versions=accepted, latest=latest_of(accepted))

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ReleaseSet":
        versions = {str(tag): str(url) for tag, url in (payload.get("versions") or {}).items()}
        return cls.from_releases(versions)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"versions": dict(self.versions)}
        if self.latest:
            data["latest"] = self.latest
        return data

    def resolve(self, requested: str) -> Tuple[str, str]:
        """Return ``(version, archive_url)`` for a requested version or ``latest``."""

        version = self.latest if requested == LATEST_VERSION else requested
        if not version or version not in self.versions:
            raise UnknownVersionError(f"The version, {version or requested}, does not exist.")
        return version, self.versions[version]


__all__ = ["LATEST_VERSION", "ReleaseSet", "is_semver", "latest_of", "parse_version"]
