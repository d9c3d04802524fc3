"""Exception types raised while scaffolding a project."""

from __future__ import annotations

from typing import Sequence


class ScaffoldError(RuntimeError):
    """Base class for every error that aborts a scaffolding run."""


class MissingDependencyError(ScaffoldError):
    """Raised when a required command is not available on ``PATH``."""

    def __init__(self, tool: str) -> None:
        super().__init__(
            f"Required command '{tool}' is not installed. Please install it and try again."
        )
        self.tool = tool


class UsageError(ScaffoldError):
    """Raised when the command line does not name a usable project."""


class CollisionError(ScaffoldError):
    """Raised when the target project directory already exists."""

    def __init__(self, directory: str) -> None:
        super().__init__(f"Directory '{directory}' already exists.")
        self.directory = directory


class CommandError(ScaffoldError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command '{' '.join(self.command)}' failed with exit status {returncode}"
        detail = stderr.strip().splitlines()
        if detail:
            message = f"{message}: {detail[-1]}"
        super().__init__(message)


__all__ = [
    "CollisionError",
    "CommandError",
    "MissingDependencyError",
    "ScaffoldError",
    "UsageError",
]
