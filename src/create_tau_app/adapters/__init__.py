"""Adapters for GitHub and the terminal."""

from .console_prompter import ConsolePrompter
from .github_registry import GitHubReleaseRegistry

__all__ = ["ConsolePrompter", "GitHubReleaseRegistry"]
