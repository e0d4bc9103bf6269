from __future__ import annotations

from pathlib import Path
from typing import Iterable

from recipebox.errors import InputClosedError


def write_global_config(home: Path, content: str) -> Path:
    cfg_dir = home / ".config" / "recipebox"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    path = cfg_dir / "config.toml"
    path.write_text(content, encoding="utf-8")
    return path


def write_project_config(project: Path, content: str) -> Path:
    project.mkdir(parents=True, exist_ok=True)
    path = project / "recipebox.toml"
    path.write_text(content, encoding="utf-8")
    return path


class ScriptedTerminal:
    """Feeds canned answers to prompts and records everything written."""

    def __init__(self, answers: Iterable[str]) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def read(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise InputClosedError("script exhausted")
        return self.answers.pop(0)

    def write(self, text: str = "") -> None:
        self.lines.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)
