"""Port definition for interactive question/answer sessions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Sequence


@dataclass(frozen=True)
class Question:
    name: str
    message: str
    required_message: str
    initial: str | None = None

    def validate(self, value: str) -> str | None:
        """Return an error message for an invalid answer, ``None`` otherwise."""

        if not value.strip():
            return self.required_message
        return None


@dataclass(frozen=True)
class PromptResult:
    answers: Dict[str, str] = field(default_factory=dict)
    cancelled: bool = False

    @classmethod
    def cancel(cls) -> "PromptResult":
        return cls(cancelled=True)


class Prompter(ABC):
    @abstractmethod
    def ask(self, questions: Sequence[Question]) -> PromptResult:
        """Ask every question in order and return the answers or a cancellation."""
