"""Rewrite the template manifest with details collected from the user."""

from __future__ import annotations

from pathlib import Path
from typing import List

from create_tau_app.domain.errors import CustomizationCancelledError
from create_tau_app.domain.manifest import PackageInfo, ProjectManifest
from create_tau_app.ports.prompter import Prompter, Question


def build_questions(default_name: str) -> List[Question]:
    return [
        Question(
            name="name",
            message="Package name?",
            required_message="A package name is required.",
            initial=default_name or None,
        ),
        Question(
            name="author",
            message="Package author?",
            required_message="An author is required.",
        ),
        Question(
            name="description",
            message="Package description?",
            required_message="A package description is required.",
        ),
    ]


class ProjectCustomizer:
    def __init__(self, prompter: Prompter) -> None:
        self._prompter = prompter

    def customize(self, default_name: str, template_root: Path) -> None:
        result = self._prompter.ask(build_questions(default_name))
        if result.cancelled:
            raise CustomizationCancelledError("Cancelling package generation.")
        info = PackageInfo(
            name=result.answers["name"].strip(),
            author=result.answers["author"].strip(),
            description=result.answers["description"].strip(),
        )
        manifest = ProjectManifest.load(template_root)
        manifest.apply(info)
        manifest.store()
