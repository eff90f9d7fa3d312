"""Prompter reading answers from the terminal."""

from __future__ import annotations

import sys
from typing import Callable, Dict, Sequence, TextIO

from create_tau_app.ports.prompter import PromptResult, Prompter, Question


class ConsolePrompter(Prompter):
    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self._input = input_func
        self._output = output

    def ask(self, questions: Sequence[Question]) -> PromptResult:
        answers: Dict[str, str] = {}
        try:
            for question in questions:
                answers[question.name] = self._ask_one(question)
        except (KeyboardInterrupt, EOFError):
            print("", file=self._output or sys.stdout)
            return PromptResult.cancel()
        return PromptResult(answers=answers)

    def _ask_one(self, question: Question) -> str:
        label = question.message
        if question.initial:
            label = f"{label} ({question.initial})"
        while True:
            response = self._input(f"{label} ").strip()
            if not response and question.initial:
                response = question.initial.strip()
            error = question.validate(response)
            if error is None:
                return response
            print(error, file=self._output or sys.stdout)
