"""Ports implemented by adapters."""

from .prompter import PromptResult, Prompter, Question
from .release_registry import ReleaseRegistry

__all__ = ["PromptResult", "Prompter", "Question", "ReleaseRegistry"]
