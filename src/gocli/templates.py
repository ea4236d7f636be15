"""Source templates written into new projects."""

from __future__ import annotations

import logging
import re
import shlex
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Mapping

from .errors import TemplateRenderingError

__all__ = [
    "README_FILENAME",
    "SOURCE_FILENAME",
    "Template",
    "TemplateRenderingError",
    "render_readme",
    "render_string",
    "source_for",
    "write_readme",
    "write_source",
]

LOGGER = logging.getLogger(__name__)

SOURCE_FILENAME = "main.go"
README_FILENAME = "README.md"

README_TEMPLATE = "# {{ name }}\n\nYour project description here."

_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")

_FILTERS: Mapping[str, Callable[[Any], str]] = {
    "quote": lambda value: shlex.quote(str(value)),
}


class Template(str, Enum):
    """Identifiers of the available project templates."""

    BASIC = "basic"
    WEB_SERVER = "web-server"
    CLI_TOOL = "cli-tool"

    @classmethod
    def parse(cls, value: str) -> "Template":
        """Return the template for ``value``, falling back to :attr:`BASIC`."""

        try:
            return cls(value)
        except ValueError:
            LOGGER.debug("unknown template %r, using %s", value, cls.BASIC.value)
            return cls.BASIC


_SOURCES: dict[Template, str] = {
    Template.BASIC: """package main

import "fmt"

func main() {
	fmt.Println("Hello, world!")
}
""",
    Template.WEB_SERVER: """package main

import (
	"log"
	"net/http"
)

func main() {
	http.HandleFunc("/", func(w http.ResponseWriter, r *http.Request) {
		w.Write([]byte("Hello, web server!"))
	})
	log.Fatal(http.ListenAndServe(":8080", nil))
}
""",
    Template.CLI_TOOL: """package main

import (
	"flag"
	"fmt"
)

func main() {
	var name string
	flag.StringVar(&name, "name", "world", "name to greet")
	flag.Parse()
	fmt.Printf("Hello, %s!\\n", name)
}
""",
}


def render_string(template: str, context: Mapping[str, Any]) -> str:
    """Replace ``{{ key|filter }}`` placeholders in ``template`` with ``context`` values."""

    def substitute(match: re.Match[str]) -> str:
        key, *filters = [part.strip() for part in match.group("expression").split("|")]
        if key not in context:
            raise TemplateRenderingError(f"missing value for '{key}'")

        value: Any = context[key]
        for filter_name in filters:
            try:
                value = _FILTERS[filter_name](value)
            except KeyError as exc:
                raise TemplateRenderingError(f"unknown filter '{filter_name}'") from exc
        return str(value)

    return _PLACEHOLDER_PATTERN.sub(substitute, template)


def source_for(template_id: str) -> str:
    return _SOURCES[Template.parse(template_id)]


def render_readme(name: str) -> str:
    return render_string(README_TEMPLATE, {"name": name})


def _write(path: Path, content: str) -> Path:
    with path.open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(content)
    LOGGER.debug("wrote %s", path)
    return path


def write_source(project_path: str | Path, template_id: str) -> Path:
    """Write the stub selected by ``template_id`` and return its path."""

    return _write(Path(project_path) / SOURCE_FILENAME, source_for(template_id))


def write_readme(project_path: str | Path, name: str) -> Path:
    return _write(Path(project_path) / README_FILENAME, render_readme(name))
