"""Command line interface for go-cli."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from rich.console import Console

from . import __version__
from .config import resolve_config
from .errors import ConfigError, PromptError, ScaffoldError
from .interaction import RichInteraction, SilentInteraction, UserInteraction
from .runner import CommandRunner, ShellCommandRunner
from .scaffold import ProjectScaffolder

PROG = "go-cli"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description="A CLI tool for setting up Go projects")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s version {__version__}",
        help="Show version",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to a JSON configuration file",
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path("."),
        help="Directory in which the project directory is created",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only show warnings and errors (requires --config)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


def _error_prefix(exc: Exception) -> str:
    if isinstance(exc, ConfigError):
        return "Error reading configuration file"
    if isinstance(exc, PromptError):
        return "Error asking questions"
    return "Error during project setup"


def main(
    argv: Sequence[str] | None = None,
    *,
    interaction: UserInteraction | None = None,
    runner: CommandRunner | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.quiet and args.config is None:
        parser.error("--quiet requires --config")

    _configure_logging(args.verbose)
    if interaction is None:
        interaction = SilentInteraction(console=Console(stderr=True)) if args.quiet else RichInteraction()
    scaffolder = ProjectScaffolder(
        runner=runner or ShellCommandRunner(),
        interaction=interaction,
    )

    try:
        config = resolve_config(args.config, interaction)
        scaffolder.create(config, args.directory)
    except KeyboardInterrupt:
        Console(stderr=True).print("Aborted.", style="red")
        return 130
    except (ScaffoldError, OSError) as exc:
        Console(stderr=True).print(
            f"{_error_prefix(exc)}: {exc}",
            style="red",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
