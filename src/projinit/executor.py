"""Running external commands."""

from __future__ import annotations

import logging
import shutil
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

__all__ = ["CommandExecutor", "CommandResult", "SubprocessExecutor"]


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Exit status and captured output of a finished command."""

    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandExecutor(ABC):
    """Locate and run external programs."""

    @abstractmethod
    def which(self, name: str) -> Optional[str]:
        """Return the resolved path of ``name`` or ``None`` when it is absent."""

    @abstractmethod
    def run(self, name: str, args: Sequence[str], *, cwd: Path | None = None) -> CommandResult:
        """Run ``name`` with ``args`` to completion and capture its output."""


class SubprocessExecutor(CommandExecutor):
    """Execute commands with :mod:`subprocess`, blocking until they exit."""

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name)

    def run(self, name: str, args: Sequence[str], *, cwd: Path | None = None) -> CommandResult:
        command = (name, *args)
        LOGGER.debug("Running %s", " ".join(command))
        try:
            completed = subprocess.run(
                command,
                cwd=cwd,
                capture_output=True,
                check=False,
                text=True,
            )
        except FileNotFoundError as exc:
            # Same status a shell reports for an unknown command.
            return CommandResult(args=command, returncode=127, stderr=str(exc))
        if completed.stdout:
            LOGGER.debug("%s", completed.stdout.rstrip())
        return CommandResult(
            args=command,
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
