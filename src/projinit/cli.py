"""Command line interface for projinit."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import NoReturn, Sequence

import click

from . import __version__
from .config import ScaffoldConfig, ToolAvailability
from .console import LOG_LEVELS, configure_logging
from .errors import CollisionError, MissingDependencyError, ScaffoldError, UsageError
from .executor import CommandExecutor, SubprocessExecutor
from .licenses import select_license
from .naming import validate_project_name
from .prompts import ConsolePrompter, Prompter, ask_remote_options
from .scaffold import VENV_DIR, ProjectScaffolder

__all__ = ["build_parser", "collect_config", "main"]


LOGGER = logging.getLogger(__name__)

PROG = "projinit"
LOG_LEVEL_ENV = "PROJINIT_LOG_LEVEL"
USAGE = f"Usage: {PROG} <project_name>"


class _ArgumentParser(argparse.ArgumentParser):
    """Report bad arguments as :class:`UsageError` so they exit with status 1."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description="Create a Python project with git, a virtual environment and test tooling",
    )
    parser.add_argument("project_name", nargs="?", help="Name of the project directory to create")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.environ.get(LOG_LEVEL_ENV, "INFO"),
        help=f"Console verbosity (default: ${LOG_LEVEL_ENV} or INFO)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def collect_config(
    project_name: str | None,
    *,
    executor: CommandExecutor,
    prompter: Prompter,
    base_dir: Path,
    extra_args: Sequence[str] = (),
) -> ScaffoldConfig:
    """Check the preconditions and gather every answer before anything is written."""

    tools = ToolAvailability.detect(executor)
    missing = tools.missing_required()
    if missing:
        raise MissingDependencyError(missing[0])

    if not project_name:
        raise UsageError("No project name provided.")
    if extra_args:
        raise UsageError(f"unrecognized arguments: {' '.join(extra_args)}")
    try:
        name = validate_project_name(project_name)
    except ValueError as exc:
        raise UsageError(str(exc)) from exc

    if (base_dir / name).exists():
        raise CollisionError(name)

    license_choice = select_license(prompter)
    remote = ask_remote_options(prompter) if tools.github_cli else None

    return ScaffoldConfig(
        project_name=name,
        base_dir=base_dir,
        license=license_choice,
        tools=tools,
        remote=remote,
    )


def _print_next_steps(config: ScaffoldConfig) -> None:
    click.echo("To get started:")
    click.echo(f"1. Navigate to the project directory: cd {config.project_name}")
    click.echo(f"2. Activate the virtual environment: source {VENV_DIR}/bin/activate")
    click.echo(
        "3. Install dependencies: pip install -r requirements.txt && pip install -r requirements-dev.txt"
    )
    click.echo("4. Start coding!")


def main(
    argv: Sequence[str] | None = None,
    *,
    executor: CommandExecutor | None = None,
    prompter: Prompter | None = None,
    base_dir: Path | None = None,
) -> int:
    parser = build_parser()
    try:
        args, extra_args = parser.parse_known_args(argv)
    except UsageError as exc:
        configure_logging()
        LOGGER.error("%s", exc)
        click.echo(USAGE)
        return 1
    configure_logging(args.log_level)

    executor = executor or SubprocessExecutor()
    prompter = prompter or ConsolePrompter()
    base_dir = base_dir or Path.cwd()

    try:
        config = collect_config(
            args.project_name,
            executor=executor,
            prompter=prompter,
            base_dir=base_dir,
            extra_args=extra_args,
        )
        ProjectScaffolder(executor).create(config)
    except UsageError as exc:
        LOGGER.error("%s", exc)
        click.echo(USAGE)
        return 1
    except (ScaffoldError, OSError) as exc:
        LOGGER.error("%s", exc)
        return 1
    except click.Abort:
        LOGGER.error("Aborted.")
        return 1

    _print_next_steps(config)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
