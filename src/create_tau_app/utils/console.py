"""Prefixed console output for the generator."""

from __future__ import annotations

import sys
from typing import TextIO

PREFIX = "[create-tau-app]"


class Console:
    def __init__(
        self,
        *,
        verbose: bool = False,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._verbose = verbose
        self._stdout = stdout
        self._stderr = stderr

    def log(self, message: str) -> None:
        print(f"{PREFIX} {message}", file=self._stdout or sys.stdout)

    def verbose(self, message: str) -> None:
        if self._verbose:
            print(f"{PREFIX} {message}", file=self._stdout or sys.stdout)

    def error(self, message: str) -> None:
        print(f"{PREFIX} {message}", file=self._stderr or sys.stderr)
