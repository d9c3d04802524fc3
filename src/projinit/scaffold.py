"""Project scaffolding workflow."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Sequence

from . import templates
from .config import GIT, GITHUB_CLI, PYTHON, RemoteOptions, ScaffoldConfig
from .console import log_success
from .errors import CollisionError, CommandError
from .executor import CommandExecutor, CommandResult
from .licenses import render_license
from .naming import repository_slug
from .template import TemplateRenderer

__all__ = [
    "DEV_TOOLS",
    "INITIAL_COMMIT_MESSAGE",
    "ProjectScaffolder",
    "VENV_DIR",
    "WORKFLOW_PATH",
    "venv_executable",
]


LOGGER = logging.getLogger(__name__)

VENV_DIR = "venv"
DEFAULT_BRANCH = "main"
REMOTE_NAME = "origin"
DEV_TOOLS = ("pytest", "pytest-cov", "pylint", "black")
MANIFESTS = ("requirements.txt", "requirements-dev.txt")
WORKFLOW_PATH = ".github/workflows/python-app.yml"
INITIAL_COMMIT_MESSAGE = "Initial project setup with virtual environment and testing tools"
WORKFLOW_COMMIT_MESSAGE = "Add GitHub Actions CI workflow"


def venv_executable(venv: Path, name: str) -> str:
    """Return the path of ``name`` installed inside the virtual environment ``venv``."""

    bin_dir = "Scripts" if os.name == "nt" else "bin"
    return str(venv / bin_dir / name)


class ProjectScaffolder:
    """Create a new project directory with tooling, configuration and git history.

    Every step runs to completion before the next one starts. The first failing
    command raises :class:`~projinit.errors.CommandError` and the run stops;
    files and commits made by earlier steps are left in place.
    """

    def __init__(self, executor: CommandExecutor, renderer: TemplateRenderer | None = None) -> None:
        self.executor = executor
        self.renderer = renderer or TemplateRenderer()

    def create(self, config: ScaffoldConfig) -> Path:
        """Scaffold the project described by ``config`` and return its directory."""

        project_dir = config.project_dir
        if project_dir.exists():
            raise CollisionError(config.project_name)

        context = config.context()

        LOGGER.info("Creating project directory: %s", config.project_name)
        project_dir.mkdir()

        self._init_repository(project_dir)
        self._write_gitignore(project_dir)
        self._create_environment(project_dir)
        self._write_layout(project_dir)
        self._write_tool_configs(project_dir)
        self._write_makefile(project_dir)
        self._write_license(project_dir, config, context)
        self._write_readme(project_dir, context)

        if config.remote is not None:
            self._setup_remote(project_dir, config.project_name, config.remote)

        LOGGER.info("Making initial Git commit")
        self._git(project_dir, "add", ".")
        self._git(project_dir, "commit", "-m", INITIAL_COMMIT_MESSAGE)

        if config.remote is not None:
            self._git(project_dir, "push", "-u", REMOTE_NAME, DEFAULT_BRANCH)

        log_success(LOGGER, "Project '%s' has been successfully set up!", config.project_name)
        return project_dir

    def _run(self, name: str, args: Sequence[str], *, cwd: Path) -> CommandResult:
        result = self.executor.run(name, args, cwd=cwd)
        if not result.ok:
            raise CommandError((name, *args), result.returncode, result.stderr)
        return result

    def _git(self, project_dir: Path, *args: str) -> CommandResult:
        return self._run(GIT, args, cwd=project_dir)

    def _write(self, project_dir: Path, relative_path: str, content: str) -> Path:
        destination = project_dir / relative_path
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(content, encoding="utf-8")
        return destination

    def _init_repository(self, project_dir: Path) -> None:
        LOGGER.info("Initializing Git repository")
        self._git(project_dir, "init", "-b", DEFAULT_BRANCH)

    def _write_gitignore(self, project_dir: Path) -> None:
        LOGGER.info("Creating .gitignore file")
        self._write(project_dir, ".gitignore", templates.GITIGNORE)

    def _create_environment(self, project_dir: Path) -> None:
        LOGGER.info("Creating Python virtual environment")
        self._run(PYTHON, ["-m", "venv", VENV_DIR], cwd=project_dir)

        pip = venv_executable(project_dir / VENV_DIR, "pip")
        LOGGER.info("Upgrading pip")
        self._run(pip, ["install", "--upgrade", "pip"], cwd=project_dir)

        LOGGER.info("Installing %s", ", ".join(DEV_TOOLS))
        self._run(pip, ["install", *DEV_TOOLS], cwd=project_dir)

        # Runtime and development manifests hold the same pinned set.
        frozen = self._run(pip, ["freeze"], cwd=project_dir).stdout
        for manifest in MANIFESTS:
            LOGGER.info("Creating %s", manifest)
            self._write(project_dir, manifest, frozen)

    def _write_layout(self, project_dir: Path) -> None:
        LOGGER.info("Creating basic project structure")
        self._write(project_dir, "src/__init__.py", "")
        self._write(project_dir, "tests/__init__.py", "")
        LOGGER.info("Adding a sample test in tests/test_sample.py")
        self._write(project_dir, "tests/test_sample.py", templates.SAMPLE_TEST)

    def _write_tool_configs(self, project_dir: Path) -> None:
        LOGGER.info("Creating pytest configuration (pytest.ini)")
        self._write(project_dir, "pytest.ini", templates.PYTEST_INI)

        LOGGER.info("Creating pylint configuration (.pylintrc)")
        pylint = venv_executable(project_dir / VENV_DIR, "pylint")
        rcfile = self._run(pylint, ["--generate-rcfile"], cwd=project_dir).stdout
        self._write(project_dir, ".pylintrc", rcfile)

        LOGGER.info("Creating coverage configuration (.coveragerc)")
        self._write(project_dir, ".coveragerc", templates.COVERAGERC)

    def _write_makefile(self, project_dir: Path) -> None:
        LOGGER.info("Creating Makefile for common tasks")
        self._write(project_dir, "Makefile", templates.MAKEFILE)

    def _write_license(
        self, project_dir: Path, config: ScaffoldConfig, context: Mapping[str, object]
    ) -> None:
        text = render_license(config.license, context, self.renderer)
        if text is None:
            return
        LOGGER.info("Adding %s license", config.license.value)
        self._write(project_dir, "LICENSE", text)
        log_success(LOGGER, "%s license added.", config.license.value)

    def _write_readme(self, project_dir: Path, context: Mapping[str, object]) -> None:
        LOGGER.info("Creating README.md with setup instructions")
        self.renderer.write(project_dir / "README.md", templates.README_TEMPLATE, context)

    def _setup_remote(self, project_dir: Path, project_name: str, remote: RemoteOptions) -> None:
        LOGGER.info("Creating GitHub repository")
        visibility = "--private" if remote.private else "--public"
        self._run(
            GITHUB_CLI,
            [
                "repo",
                "create",
                repository_slug(project_name, remote.owner),
                visibility,
                "--source=.",
                "--description",
                remote.description,
                f"--remote={REMOTE_NAME}",
            ],
            cwd=project_dir,
        )

        LOGGER.info("Setting up GitHub Actions workflow")
        self._write(project_dir, WORKFLOW_PATH, templates.WORKFLOW)
        self._git(project_dir, "add", WORKFLOW_PATH)
        self._git(project_dir, "commit", "-m", WORKFLOW_COMMIT_MESSAGE)
        self._git(project_dir, "branch", "-M", DEFAULT_BRANCH)
        # An unborn branch cannot be pushed, so the upstream is set with the first commit.
        self._git(project_dir, "push", "-u", REMOTE_NAME, DEFAULT_BRANCH)
        log_success(LOGGER, "GitHub repository and CI workflow set up successfully.")
