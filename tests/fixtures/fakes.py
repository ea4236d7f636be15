"""Test doubles for the scaffolder's command runner and user interaction."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Sequence

from gocli.errors import CommandError
from gocli.interaction import NoticeLevel, UserInteraction
from gocli.runner import CommandRunner


@dataclass
class RecordingRunner(CommandRunner):
    """Record commands instead of spawning processes.

    ``go mod init`` is simulated by writing a ``go.mod`` file and ``git init``
    by creating a ``.git`` directory. Commands starting with any prefix in
    ``failing`` raise :class:`CommandError`.
    """

    failing: Sequence[str] = ()
    calls: list[tuple[str, Path]] = field(default_factory=list)

    def run(self, command: str, cwd: str | Path) -> str:
        cwd = Path(cwd)
        self.calls.append((command, cwd))
        if any(command.startswith(prefix) for prefix in self.failing):
            raise CommandError(command, 1, "simulated failure")
        if command.startswith("go mod init"):
            module = command.split(" ", 3)[3].strip("'")
            (cwd / "go.mod").write_text(f"module {module}\n\ngo 1.22\n", encoding="utf-8")
        elif command == "git init":
            (cwd / ".git").mkdir()
        return ""

    @property
    def commands(self) -> list[str]:
        return [command for command, _ in self.calls]


@dataclass
class ScriptedInteraction(UserInteraction):
    """Answer prompts from fixed values and keep every notice."""

    name: str = "demo"
    git_init: bool = True
    template: str = "basic"
    questions: list[str] = field(default_factory=list)
    notices: list[tuple[NoticeLevel, str]] = field(default_factory=list)
    progress: list[str] = field(default_factory=list)

    def ask_text(self, message: str) -> str:
        self.questions.append(message)
        return self.name

    def ask_confirm(self, message: str, *, default: bool = True) -> bool:
        self.questions.append(message)
        return self.git_init

    def ask_choice(self, message: str, choices: Sequence[str], *, default: str) -> str:
        self.questions.append(message)
        return self.template

    @contextmanager
    def _progress(self, message: str) -> Iterator[None]:
        self.progress.append(message)
        yield

    def report_progress(self, message: str):
        return self._progress(message)

    def notify(self, message: str, *, level: NoticeLevel = NoticeLevel.INFO) -> None:
        self.notices.append((level, message))

    def messages(self, level: NoticeLevel) -> list[str]:
        return [message for notice_level, message in self.notices if notice_level is level]
