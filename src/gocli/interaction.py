"""User-facing prompts, progress display and notices."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager, nullcontext
from enum import Enum
from typing import Callable, Sequence, TypeVar

from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.style import Style

from .errors import PromptError

__all__ = ["NoticeLevel", "RichInteraction", "SilentInteraction", "UserInteraction"]

_T = TypeVar("_T")


class NoticeLevel(str, Enum):
    """Severity of a message shown through :meth:`UserInteraction.notify`."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


def _answer(ask: Callable[[], _T]) -> _T:
    try:
        return ask()
    except EOFError as exc:
        raise PromptError("EOF while reading an answer") from exc


class UserInteraction(ABC):
    """Everything the scaffolder needs from the person running it."""

    @abstractmethod
    def ask_text(self, message: str) -> str:
        """Ask for a non-empty line of text."""

    @abstractmethod
    def ask_confirm(self, message: str, *, default: bool = True) -> bool:
        """Ask a yes/no question."""

    @abstractmethod
    def ask_choice(self, message: str, choices: Sequence[str], *, default: str) -> str:
        """Ask the user to pick one of ``choices``."""

    @abstractmethod
    def report_progress(self, message: str) -> AbstractContextManager[object]:
        """Return a context manager that indicates work is in progress."""

    @abstractmethod
    def notify(self, message: str, *, level: NoticeLevel = NoticeLevel.INFO) -> None:
        """Show a one-line notice."""


class RichInteraction(UserInteraction):
    """Terminal interaction backed by ``rich`` prompts and a spinner."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        spinner: str = "dots",
    ) -> None:
        self._console = console or Console()
        self._spinner = spinner
        self._styles: dict[NoticeLevel, Style] = {
            NoticeLevel.INFO: Style(),
            NoticeLevel.SUCCESS: Style(color="green"),
            NoticeLevel.WARNING: Style(color="yellow"),
            NoticeLevel.ERROR: Style(color="red", bold=True),
        }

    def ask_text(self, message: str) -> str:
        while True:
            answer = _answer(lambda: Prompt.ask(message, console=self._console))
            if answer.strip():
                return answer
            self._console.print("Value is required", style=self._styles[NoticeLevel.ERROR])

    def ask_confirm(self, message: str, *, default: bool = True) -> bool:
        return _answer(lambda: Confirm.ask(message, console=self._console, default=default))

    def ask_choice(self, message: str, choices: Sequence[str], *, default: str) -> str:
        return _answer(
            lambda: Prompt.ask(
                message,
                console=self._console,
                choices=list(choices),
                default=default,
            )
        )

    def report_progress(self, message: str) -> AbstractContextManager[object]:
        return self._console.status(message, spinner=self._spinner)

    def notify(self, message: str, *, level: NoticeLevel = NoticeLevel.INFO) -> None:
        self._console.print(
            message,
            style=self._styles[level],
            markup=False,
            highlight=False,
            soft_wrap=True,
        )


class SilentInteraction(UserInteraction):
    """Interaction that never blocks: questions take their defaults.

    Without a default, :meth:`ask_text` returns an empty string, which the
    configuration model rejects. Progress and notices are dropped, except that
    warnings and errors are printed to ``console`` when one is given.
    """

    def __init__(self, *, text: str = "", console: Console | None = None) -> None:
        self._text = text
        self._console = console

    def ask_text(self, message: str) -> str:
        return self._text

    def ask_confirm(self, message: str, *, default: bool = True) -> bool:
        return default

    def ask_choice(self, message: str, choices: Sequence[str], *, default: str) -> str:
        return default

    def report_progress(self, message: str) -> AbstractContextManager[object]:
        return nullcontext()

    def notify(self, message: str, *, level: NoticeLevel = NoticeLevel.INFO) -> None:
        if self._console is None or level not in (NoticeLevel.WARNING, NoticeLevel.ERROR):
            return
        self._console.print(message, markup=False, highlight=False, soft_wrap=True)
