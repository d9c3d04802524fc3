"""Immutable configuration assembled before any scaffolding step runs."""

from __future__ import annotations

from datetime import date
from enum import Enum
from pathlib import Path
from typing import List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .executor import CommandExecutor
from .naming import validate_project_name

GIT = "git"
PYTHON = "python3"
PIP = "pip3"
GITHUB_CLI = "gh"

REQUIRED_TOOLS = (GIT, PYTHON, PIP)

DEFAULT_COPYRIGHT_HOLDER = "[Your Name]"


class LicenseChoice(str, Enum):
    """Licenses offered by the interactive menu."""

    MIT = "MIT"
    APACHE = "Apache-2.0"
    GPL = "GPL-3.0"
    NONE = "None"


class ToolAvailability(BaseModel):
    """Which external commands were found on ``PATH`` at start-up."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    git: bool = Field(False, description="Whether the git client is available.")
    python: bool = Field(False, description="Whether the python3 interpreter is available.")
    pip: bool = Field(False, description="Whether the pip3 installer is available.")
    github_cli: bool = Field(False, description="Whether the optional GitHub CLI is available.")

    @classmethod
    def detect(cls, executor: CommandExecutor) -> "ToolAvailability":
        """Look up every known tool once through ``executor``."""

        return cls(
            git=executor.which(GIT) is not None,
            python=executor.which(PYTHON) is not None,
            pip=executor.which(PIP) is not None,
            github_cli=executor.which(GITHUB_CLI) is not None,
        )

    def missing_required(self) -> List[str]:
        """Return the names of absent required tools, in checking order."""

        flags = {GIT: self.git, PYTHON: self.python, PIP: self.pip}
        return [tool for tool in REQUIRED_TOOLS if not flags[tool]]


class RemoteOptions(BaseModel):
    """Answers collected for creating the hosted repository."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    owner: str = Field("", description="GitHub user or organisation owning the repository.")
    description: str = Field("", description="Repository description shown on GitHub.")
    private: bool = Field(False, description="Create a private rather than a public repository.")


class ScaffoldConfig(BaseModel):
    """Everything the scaffolder needs, fixed before the first side effect.

    Attributes
    ----------
    project_name:
        Directory name of the new project, also used as the README title and
        the remote repository name.
    base_dir:
        Directory in which the project directory is created.
    license:
        License written to ``LICENSE`` and named in the README.
    tools:
        Result of the start-up tool detection.
    remote:
        Remote repository answers, or ``None`` when no remote is wanted.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_name: str = Field(..., description="Name of the project directory.")
    base_dir: Path = Field(default_factory=Path.cwd, description="Parent directory of the project.")
    license: LicenseChoice = Field(LicenseChoice.MIT, description="Selected license.")
    tools: ToolAvailability = Field(default_factory=ToolAvailability, description="Detected tools.")
    remote: Optional[RemoteOptions] = Field(None, description="Remote repository options, if requested.")
    year: int = Field(default_factory=lambda: date.today().year, description="Copyright year.")
    copyright_holder: str = Field(DEFAULT_COPYRIGHT_HOLDER, description="Copyright holder placeholder.")

    @field_validator("project_name")
    @classmethod
    def check_project_name(cls, value: str) -> str:
        return validate_project_name(value)

    @property
    def project_dir(self) -> Path:
        return self.base_dir / self.project_name

    def context(self) -> Mapping[str, object]:
        """Return the values exposed to the file templates."""

        if self.license is LicenseChoice.NONE:
            license_notice = "This project is not licensed."
        else:
            license_notice = f"This project is licensed under the [{self.license.value} License](LICENSE)."
        return {
            "project_name": self.project_name,
            "license": self.license.value,
            "license_notice": license_notice,
            "year": self.year,
            "holder": self.copyright_holder,
        }


__all__ = [
    "DEFAULT_COPYRIGHT_HOLDER",
    "GIT",
    "GITHUB_CLI",
    "LicenseChoice",
    "PIP",
    "PYTHON",
    "REQUIRED_TOOLS",
    "RemoteOptions",
    "ScaffoldConfig",
    "ToolAvailability",
]
