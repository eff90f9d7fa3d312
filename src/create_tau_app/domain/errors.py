"""Failure taxonomy for application generation."""

from __future__ import annotations


class GenerateError(RuntimeError):
    """Base class for errors that abort a generate run."""

    code = "error"


class TargetExistsError(GenerateError):
    code = "target_exists"


class CacheUnavailableError(GenerateError):
    code = "cache_unavailable"


class RegistryUnavailableError(GenerateError):
    code = "registry_unavailable"


class NoValidReleasesError(GenerateError):
    code = "no_valid_releases"


class UnknownVersionError(GenerateError):
    code = "unknown_version"


class DownloadFailedError(GenerateError):
    code = "download_failed"


class UnpackFailedError(GenerateError):
    code = "unpack_failed"


class ManifestError(GenerateError):
    code = "manifest_invalid"


class CustomizationCancelledError(GenerateError):
    code = "cancelled"


class MoveFailedError(GenerateError):
    """Raised when the customized template cannot be moved into place.

    The temporary directory holding the generated files is preserved and its
    path is exposed as ``preserved_path``.
    """

    code = "move_failed"

    def __init__(self, message: str, preserved_path: str | None = None) -> None:
        super().__init__(message)
        self.preserved_path = preserved_path


__all__ = [
    "CacheUnavailableError",
    "CustomizationCancelledError",
    "DownloadFailedError",
    "GenerateError",
    "ManifestError",
    "MoveFailedError",
    "NoValidReleasesError",
    "RegistryUnavailableError",
    "TargetExistsError",
    "UnknownVersionError",
    "UnpackFailedError",
]
