"""Scaffold minimal Go projects.

The package asks for (or reads from a JSON file) a project name, whether to
initialise git, and one of a few source templates, then creates the project
directory by running ``go mod init``, writing ``main.go`` and a README, and
optionally running ``git init``.
"""

from __future__ import annotations

__version__ = "1.0.0"

from .config import ProjectConfig, ask_config, load_config, resolve_config
from .errors import (
    CommandError,
    ConfigError,
    ProjectExistsError,
    ProjectNameError,
    PromptError,
    ScaffoldError,
    TemplateRenderingError,
)
from .interaction import NoticeLevel, RichInteraction, SilentInteraction, UserInteraction
from .runner import CommandRunner, ShellCommandRunner
from .scaffold import ProjectScaffolder, ScaffoldCommands, ensure_new_directory
from .templates import Template, source_for

__all__ = [
    "CommandError",
    "CommandRunner",
    "ConfigError",
    "NoticeLevel",
    "ProjectConfig",
    "ProjectExistsError",
    "ProjectNameError",
    "ProjectScaffolder",
    "PromptError",
    "RichInteraction",
    "ScaffoldCommands",
    "ScaffoldError",
    "ShellCommandRunner",
    "SilentInteraction",
    "Template",
    "TemplateRenderingError",
    "UserInteraction",
    "ask_config",
    "ensure_new_directory",
    "load_config",
    "resolve_config",
    "source_for",
]
