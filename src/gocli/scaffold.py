"""Creation of the project directory and its files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import ProjectConfig
from .errors import CommandError, ProjectExistsError
from .interaction import NoticeLevel, SilentInteraction, UserInteraction
from .runner import CommandRunner, ShellCommandRunner
from .templates import render_string, write_readme, write_source

__all__ = ["ProjectScaffolder", "ScaffoldCommands", "ensure_new_directory"]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScaffoldCommands:
    """Shell commands run inside a freshly created project.

    ``module_init`` may reference ``{{ name }}``; use the ``quote`` filter so
    the project name reaches the shell as a single argument.
    """

    module_init: str = "go mod init {{ name|quote }}"
    vcs_init: str = "git init"


def ensure_new_directory(path: str | Path) -> Path:
    """Create ``path`` and its parents, refusing to reuse an existing path."""

    target = Path(path)
    if target.exists():
        raise ProjectExistsError(f"directory {target} already exists")
    target.mkdir(parents=True)
    LOGGER.debug("created %s", target)
    return target


@dataclass(slots=True)
class ProjectScaffolder:
    """Create a minimal Go project described by a :class:`ProjectConfig`."""

    runner: CommandRunner = field(default_factory=ShellCommandRunner)
    interaction: UserInteraction = field(default_factory=SilentInteraction)
    commands: ScaffoldCommands = field(default_factory=ScaffoldCommands)

    def create(self, config: ProjectConfig, base_dir: str | Path = ".") -> Path:
        """Create the project inside ``base_dir`` and return its directory.

        The directory must not exist yet. A failing module initialisation
        aborts the run and leaves the partially created directory behind; a
        failing git initialisation is only reported as a warning.
        """

        project_path = ensure_new_directory(Path(base_dir) / config.name)

        with self.interaction.report_progress(f"Creating project {config.name}..."):
            self.runner.run(render_string(self.commands.module_init, {"name": config.name}), project_path)
            write_source(project_path, config.template)
            if config.git_init:
                self._init_vcs(project_path)
            write_readme(project_path, config.name)

        self.interaction.notify(
            f"Go project {config.name} has been created successfully!",
            level=NoticeLevel.SUCCESS,
        )
        return project_path

    def _init_vcs(self, project_path: Path) -> None:
        try:
            self.runner.run(self.commands.vcs_init, project_path)
        except CommandError as exc:
            LOGGER.debug("git initialisation failed: %s", exc)
            self.interaction.notify(
                "Git is not installed or initialization failed.",
                level=NoticeLevel.WARNING,
            )
            return
        self.interaction.notify("Git repository initialized.", level=NoticeLevel.SUCCESS)
