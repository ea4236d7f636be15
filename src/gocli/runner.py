"""Execution of external commands such as ``go mod init`` and ``git init``."""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from .errors import CommandError

__all__ = ["CommandRunner", "ShellCommandRunner"]

LOGGER = logging.getLogger(__name__)


class CommandRunner(ABC):
    """Runs shell commands on behalf of the scaffolder."""

    @abstractmethod
    def run(self, command: str, cwd: str | Path) -> str:
        """Run ``command`` inside ``cwd`` and return its combined output.

        Implementations raise :class:`~gocli.errors.CommandError` when the
        command fails.
        """


class ShellCommandRunner(CommandRunner):
    """Run commands through the system shell with stdout and stderr merged."""

    def __init__(self, *, timeout: float | None = None) -> None:
        self._timeout = timeout

    def run(self, command: str, cwd: str | Path) -> str:
        LOGGER.debug("running %r in %s", command, cwd)
        try:
            result = subprocess.run(
                command,
                shell=True,
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            output = exc.output if isinstance(exc.output, str) else ""
            raise CommandError(command, None, f"timed out after {self._timeout} seconds\n{output}") from exc
        except OSError as exc:
            raise CommandError(command, None, str(exc)) from exc

        if result.returncode != 0:
            LOGGER.debug("%r exited with %s", command, result.returncode)
            raise CommandError(command, result.returncode, result.stdout or "")
        return result.stdout or ""
