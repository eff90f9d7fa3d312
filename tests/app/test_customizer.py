from __future__ import annotations

import json
from pathlib import Path

import pytest

from create_tau_app.app.customizer import ProjectCustomizer
from create_tau_app.domain.errors import CustomizationCancelledError

from doubles import ScriptedPrompter

ANSWERS = {"name": "my-app", "author": "Ada Lovelace", "description": "Engine notes"}


def _manifest(tmp_path: Path) -> Path:
    path = tmp_path / "package.json"
    path.write_text(
        json.dumps(
            {
                "name": "tau",
                "version": "1.0.0",
                "keywords": ["tau"],
                "bugs": {"url": "https://example.invalid"},
                "repository": "kherge/js.tau",
                "author": "Template Author",
                "description": "Template",
            }
        ),
        encoding="utf-8",
    )
    return path


def test_customize_rewrites_manifest(tmp_path: Path) -> None:
    path = _manifest(tmp_path)
    prompter = ScriptedPrompter(ANSWERS)

    ProjectCustomizer(prompter).customize("default-name", tmp_path)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert {"keywords", "bugs", "repository"}.isdisjoint(data)
    assert data["name"] == "my-app"
    assert data["author"] == "Ada Lovelace"
    assert data["description"] == "Engine notes"
    assert data["version"] == "1.0.0"


def test_customize_prefills_name(tmp_path: Path) -> None:
    _manifest(tmp_path)
    prompter = ScriptedPrompter(ANSWERS)

    ProjectCustomizer(prompter).customize("default-name", tmp_path)

    assert [q.name for q in prompter.questions] == ["name", "author", "description"]
    assert prompter.questions[0].initial == "default-name"
    assert prompter.questions[1].initial is None


def test_cancel_leaves_manifest_untouched(tmp_path: Path) -> None:
    path = _manifest(tmp_path)
    before = path.read_text(encoding="utf-8")

    with pytest.raises(CustomizationCancelledError):
        ProjectCustomizer(ScriptedPrompter(cancel=True)).customize("x", tmp_path)

    assert path.read_text(encoding="utf-8") == before
