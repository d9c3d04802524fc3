"""Scaffold new Python projects.

A single command creates the project directory, initializes git, builds a
virtual environment with pytest, pytest-cov, pylint and black, writes their
configuration along with a Makefile, README and LICENSE, and can optionally
create a GitHub repository with a CI workflow.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import LicenseChoice, RemoteOptions, ScaffoldConfig, ToolAvailability
from .errors import (
    CollisionError,
    CommandError,
    MissingDependencyError,
    ScaffoldError,
    UsageError,
)
from .executor import CommandExecutor, CommandResult, SubprocessExecutor
from .prompts import ConsolePrompter, Prompter
from .scaffold import ProjectScaffolder
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "CollisionError",
    "CommandError",
    "CommandExecutor",
    "CommandResult",
    "ConsolePrompter",
    "LicenseChoice",
    "MissingDependencyError",
    "ProjectScaffolder",
    "Prompter",
    "RemoteOptions",
    "ScaffoldConfig",
    "ScaffoldError",
    "SubprocessExecutor",
    "TemplateRenderer",
    "TemplateRenderingError",
    "ToolAvailability",
    "UsageError",
]
