from __future__ import annotations

from typing import Protocol

from .errors import InputClosedError


class LineIO(Protocol):
    def read(self, prompt: str = "") -> str: ...

    def write(self, text: str = "") -> None: ...


class Terminal:
    """Prompt-then-read and write-line over the process's stdin/stdout."""

    def read(self, prompt: str = "") -> str:
        try:
            return input(prompt)
        except EOFError as exc:
            raise InputClosedError("Input closed") from exc

    def write(self, text: str = "") -> None:
        print(text)
