"""Application service generating a new project from a template release."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from create_tau_app.app.archive_cache import ArchiveCache
from create_tau_app.app.customizer import ProjectCustomizer
from create_tau_app.app.materializer import TemplateMaterializer
from create_tau_app.app.release_cache import ReleaseCache
from create_tau_app.domain.errors import CacheUnavailableError, MoveFailedError, TargetExistsError
from create_tau_app.domain.release import LATEST_VERSION
from create_tau_app.utils.console import Console


@dataclass(frozen=True)
class GenerateRequest:
    target: Path
    name: str
    version: str = LATEST_VERSION
    refresh: bool = False


@dataclass(frozen=True)
class GenerateResult:
    path: Path
    version: str


class GenerateService:
    def __init__(
        self,
        releases: ReleaseCache,
        archives: ArchiveCache,
        materializer: TemplateMaterializer,
        customizer: ProjectCustomizer,
        *,
        cache_dirs: Iterable[Path] = (),
        console: Console | None = None,
    ) -> None:
        self._releases = releases
        self._archives = archives
        self._materializer = materializer
        self._customizer = customizer
        self._cache_dirs = tuple(cache_dirs)
        self._console = console or Console()

    def generate(self, request: GenerateRequest) -> GenerateResult:
        target = request.target
        if target.exists():
            raise TargetExistsError("The target directory already exists.")

        self._console.log(f"Generating a new app using {request.version}...")
        self._prepare_cache()

        release_set = self._releases.get_releases(force_refresh=request.refresh)
        version, url = release_set.resolve(request.version)
        if version != request.version:
            self._console.verbose(f"Resolved {request.version} to {version}.")

        self._console.log("Preparing the template...")
        archive = self._archives.get_archive(version, url, force_refresh=request.refresh)
        template_root = self._materializer.unpack(archive)
        self._customizer.customize(request.name, template_root)

        self._move_into_place(template_root, target)
        self._materializer.discard(template_root)
        self._console.log(f"Created {target}")
        return GenerateResult(path=target, version=version)

    def _prepare_cache(self) -> None:
        for directory in self._cache_dirs:
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise CacheUnavailableError(f"Could not create the cache directory {directory}: {exc}") from exc

    def _move_into_place(self, template_root: Path, target: Path) -> None:
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(str(template_root), str(target))
        except OSError as exc:
            raise MoveFailedError(
                f"Could not move the generated app to {target}: {exc}. "
                f"The generated files were left in {template_root}.",
                preserved_path=str(template_root),
            ) from exc
