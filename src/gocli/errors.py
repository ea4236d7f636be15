"""Exception types raised while scaffolding a project."""

from __future__ import annotations


class ScaffoldError(RuntimeError):
    """Base class for failures reported to the user by the CLI."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ProjectNameError(ScaffoldError, ValueError):
    """Raised when the project name is missing or blank."""


class ConfigError(ScaffoldError):
    """Raised when a configuration file cannot be read or parsed."""


class PromptError(ScaffoldError):
    """Raised when an interactive question cannot be answered."""


class ProjectExistsError(ScaffoldError):
    """Raised when the target project directory is already present."""


class TemplateRenderingError(ScaffoldError):
    """Raised when a template placeholder cannot be evaluated."""


class CommandError(ScaffoldError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: str, returncode: int | None, output: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.output = output
        status = "could not be started" if returncode is None else f"exited with status {returncode}"
        message = f"error executing command '{command}': {status}"
        if output.strip():
            message = f"{message}, output: {output.strip()}"
        super().__init__(message)


__all__ = [
    "CommandError",
    "ConfigError",
    "ProjectExistsError",
    "ProjectNameError",
    "PromptError",
    "ScaffoldError",
    "TemplateRenderingError",
]
