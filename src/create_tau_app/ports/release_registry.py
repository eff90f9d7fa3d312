"""Port definition for release listing backends."""

from __future__ import annotations

from abc import ABC, abstractmethod

from create_tau_app.domain.release import ReleaseSet


class ReleaseRegistry(ABC):
    @abstractmethod
    def list_releases(self) -> ReleaseSet:
        """Return every published, non-draft, non-prerelease semver release."""
