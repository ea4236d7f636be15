"""Project configuration model and the ways of obtaining one."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from .errors import ConfigError, ProjectNameError
from .interaction import UserInteraction
from .templates import Template

__all__ = ["ProjectConfig", "ask_config", "load_config", "resolve_config"]

LOGGER = logging.getLogger(__name__)

_EMPTY_NAME = "empty_project_name"
_DASHED_NAME = "dashed_project_name"


class ProjectConfig(BaseModel):
    """Answers describing the project to create.

    Attributes
    ----------
    name:
        Name of the project. Used as the directory name, the Go module path
        and the README heading.
    git_init:
        Whether a git repository should be initialised in the new directory.
    template:
        Identifier of the source stub to write. Unknown identifiers are kept
        as given and fall back to ``basic`` when the stub is written.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    name: StrictStr = Field("", alias="projectName", validate_default=True, description="Project name.")
    git_init: StrictBool = Field(False, alias="gitInit", description="Initialise a git repository.")
    template: StrictStr = Field(Template.BASIC.value, description="Identifier of the source template.")

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError(_EMPTY_NAME, "project name must not be empty")
        if value.startswith("-"):
            raise PydanticCustomError(_DASHED_NAME, "project name must not start with '-'")
        return value

    @classmethod
    def from_answers(cls, name: str, git_init: bool, template: str) -> "ProjectConfig":
        """Build a configuration from interactive answers."""

        return _validate({"name": name, "git_init": git_init, "template": template})

    def to_json(self) -> str:
        """Serialise using the same keys as the configuration file."""

        return self.model_dump_json(by_alias=True)


def _validate(data: Mapping[str, Any] | str) -> ProjectConfig:
    try:
        if isinstance(data, str):
            return ProjectConfig.model_validate_json(data)
        return ProjectConfig.model_validate(data)
    except ValidationError as exc:
        for error in exc.errors():
            if error["type"] in (_EMPTY_NAME, _DASHED_NAME):
                raise ProjectNameError(error["msg"]) from exc
        raise ConfigError(f"malformed configuration: {exc}") from exc


def load_config(path: str | Path) -> ProjectConfig:
    """Read a JSON configuration file from ``path``."""

    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"could not read configuration file {config_path}: {exc}") from exc

    LOGGER.debug("loaded configuration from %s", config_path)
    return _validate(text)


def ask_config(interaction: UserInteraction) -> ProjectConfig:
    """Collect the configuration by asking the user."""

    name = interaction.ask_text("What is the project name?")
    git_init = interaction.ask_confirm("Do you want to initialize a Git repository?", default=True)
    template = interaction.ask_choice(
        "Choose a project template:",
        [template.value for template in Template],
        default=Template.BASIC.value,
    )
    return ProjectConfig.from_answers(name, git_init, template)


def resolve_config(path: str | Path | None, interaction: UserInteraction) -> ProjectConfig:
    """Load ``path`` when given, otherwise fall back to asking the user."""

    if path is not None:
        return load_config(path)
    return ask_config(interaction)
