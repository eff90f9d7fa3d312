"""Package manifest (``package.json``) of a generated application."""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from create_tau_app.domain.errors import ManifestError

MANIFEST_FILENAME = "package.json"
REMOVED_FIELDS = ("keywords", "bugs", "repository")


@dataclass(frozen=True)
class PackageInfo:
    name: str
    author: str
    description: str


@dataclass
class ProjectManifest:
    path: Path
    data: Dict[str, Any]

    @classmethod
    def load(cls, template_root: Path) -> "ProjectManifest":
        path = template_root / MANIFEST_FILENAME
        if not path.exists():
            raise ManifestError(f"Template is missing {MANIFEST_FILENAME}: {path}")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ManifestError(f"{MANIFEST_FILENAME} could not be read: {exc}") from exc
        if not isinstance(data, dict):
            raise ManifestError(f"{MANIFEST_FILENAME} must contain a JSON object")
        return cls(path=path, data=data)

    def apply(self, info: PackageInfo) -> None:
        # Existing keys keep their position; missing ones are appended.
        self.data["name"] = info.name
        self.data["author"] = info.author
        self.data["description"] = info.description
        for key in REMOVED_FIELDS:
            self.data.pop(key, None)

    def store(self) -> None:
        payload = json.dumps(self.data, indent=2, ensure_ascii=False) + "\n"
        fd, tmp_name = tempfile.mkstemp(prefix=".package-", suffix=".json", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise ManifestError(f"{MANIFEST_FILENAME} could not be written: {exc}") from exc


__all__ = ["MANIFEST_FILENAME", "PackageInfo", "ProjectManifest", "REMOVED_FIELDS"]
