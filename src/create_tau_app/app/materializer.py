"""Unpack release archives into a temporary template directory."""

from __future__ import annotations

import shutil
import tempfile
import zipfile
from pathlib import Path

from create_tau_app.domain.errors import UnpackFailedError

TEMP_PREFIX = "cta-"


class TemplateMaterializer:
    """Extract a release archive and expose its single top-level directory.

    Release archives produced by GitHub wrap every file in one directory named
    after the repository and commit. ``unpack`` returns that directory so callers
    never see the temporary wrapper around it.
    """

    def __init__(self, temp_root: Path | None = None) -> None:
        self._temp_root = temp_root

    def unpack(self, archive_path: Path) -> Path:
        workspace = Path(tempfile.mkdtemp(prefix=TEMP_PREFIX, dir=self._temp_root))
        try:
            return self._extract(archive_path, workspace)
        except BaseException:
            shutil.rmtree(workspace, ignore_errors=True)
            raise

    def discard(self, template_root: Path) -> None:
        """Remove the temporary wrapper once ``template_root`` has been moved away."""

        workspace = template_root.parent
        if not workspace.name.startswith(TEMP_PREFIX) or not workspace.exists():
            return
        if any(workspace.iterdir()):
            return
        workspace.rmdir()

    def _extract(self, archive_path: Path, workspace: Path) -> Path:
        try:
            with zipfile.ZipFile(archive_path) as archive:
                members = archive.namelist()
                if not members:
                    raise UnpackFailedError(f"Archive {archive_path} is empty")
                resolved_workspace = workspace.resolve()
                for member in members:
                    destination = (workspace / member).resolve()
                    if destination != resolved_workspace and resolved_workspace not in destination.parents:
                        raise UnpackFailedError(f"Archive entry escapes the template directory: {member}")
                archive.extractall(workspace)
        except UnpackFailedError:
            raise
        except (zipfile.BadZipFile, zipfile.LargeZipFile, OSError, RuntimeError, NotImplementedError, EOFError) as exc:
            raise UnpackFailedError(f"Archive {archive_path} could not be unpacked: {exc}") from exc

        entries = list(workspace.iterdir())
        if len(entries) != 1 or not entries[0].is_dir():
            names = ", ".join(sorted(entry.name for entry in entries)) or "nothing"
            raise UnpackFailedError(
                f"Archive {archive_path} must contain a single top-level directory (found {names})"
            )
        return entries[0]
