"""Disk cache of downloaded release archives, keyed by version."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import requests

from create_tau_app.domain.errors import DownloadFailedError
from create_tau_app.utils.console import Console

CHUNK_SIZE = 64 * 1024
USER_AGENT = "create-tau-app"


class ArchiveCache:
    def __init__(
        self,
        download_dir: Path,
        *,
        session: requests.Session | None = None,
        console: Console | None = None,
    ) -> None:
        self._download_dir = download_dir
        self._session = session or requests.Session()
        self._console = console or Console()

    def archive_path(self, version: str) -> Path:
        return self._download_dir / f"{version}.zip"

    def get_archive(self, version: str, url: str, force_refresh: bool = False) -> Path:
        target = self.archive_path(version)
        if not force_refresh and target.exists():
            self._console.verbose("Using cached template.")
            return target
        self._console.verbose("Downloading template...")
        self._download(url, target)
        return target

    def _download(self, url: str, target: Path) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.stem}-", suffix=".part", dir=target.parent)
        try:
            with os.fdopen(fd, "wb") as fh:
                try:
                    with self._session.get(
                        url,
                        stream=True,
                        headers={"User-Agent": USER_AGENT},
                        timeout=60,
                    ) as response:
                        if response.status_code >= 400:
                            raise DownloadFailedError(
                                f"Download of {url} failed with status {response.status_code}"
                            )
                        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                            if chunk:
                                fh.write(chunk)
                except requests.RequestException as exc:
                    raise DownloadFailedError(f"Download of {url} failed: {exc}") from exc
            os.replace(tmp_name, target)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise DownloadFailedError(f"Could not write {target}: {exc}") from exc
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
