"""Domain objects shared by the generator services."""

from .errors import (
    CacheUnavailableError,
    CustomizationCancelledError,
    DownloadFailedError,
    GenerateError,
    ManifestError,
    MoveFailedError,
    NoValidReleasesError,
    RegistryUnavailableError,
    TargetExistsError,
    UnknownVersionError,
    UnpackFailedError,
)
from .manifest import MANIFEST_FILENAME, REMOVED_FIELDS, PackageInfo, ProjectManifest
from .release import LATEST_VERSION, ReleaseSet, is_semver, latest_of, parse_version

__all__ = [
    "CacheUnavailableError",
    "CustomizationCancelledError",
    "DownloadFailedError",
    "GenerateError",
    "LATEST_VERSION",
    "MANIFEST_FILENAME",
    "ManifestError",
    "MoveFailedError",
    "NoValidReleasesError",
    "PackageInfo",
    "ProjectManifest",
    "REMOVED_FIELDS",
    "RegistryUnavailableError",
    "ReleaseSet",
    "TargetExistsError",
    "UnknownVersionError",
    "UnpackFailedError",
    "is_semver",
    "latest_of",
    "parse_version",
]
