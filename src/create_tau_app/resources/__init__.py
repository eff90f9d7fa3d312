"""Packaged resources for create-tau-app."""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict

__all__ = ["load_releases_schema"]


@lru_cache(maxsize=1)
def load_releases_schema() -> Dict[str, Any]:
    """Return the JSON schema describing ``releases.json``."""

    schema_resource = resources.files(__name__) / "releases.schema.json"
    return json.loads(schema_resource.read_text("utf-8"))
