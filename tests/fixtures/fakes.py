"""In-memory stand-ins for external commands and interactive prompts."""

from __future__ import annotations

from collections import deque
from pathlib import Path
from typing import Iterable, Mapping, Optional, Sequence

from projinit.executor import CommandExecutor, CommandResult, SubprocessExecutor
from projinit.prompts import Prompter

REQUIRED = ("git", "python3", "pip3")

FREEZE_OUTPUT = "black==24.4.2\npylint==3.2.3\npytest==8.2.2\npytest-cov==5.0.0\n"
RCFILE_OUTPUT = "[MAIN]\n\njobs=1\n"


class FakeExecutor(CommandExecutor):
    """Record commands instead of running them.

    ``failures`` maps a command prefix such as ``("git", "commit")`` to the
    exit status returned when a command starts with it. Program names are
    compared by basename so virtual environment binaries match ``"pip"``.
    """

    def __init__(
        self,
        tools: Iterable[str] = REQUIRED,
        *,
        failures: Mapping[tuple[str, ...], int] | None = None,
    ) -> None:
        self.tools = set(tools)
        self.failures = dict(failures or {})
        self.calls: list[tuple[tuple[str, ...], Optional[Path]]] = []
        self.looked_up: list[str] = []

    def which(self, name: str) -> Optional[str]:
        self.looked_up.append(name)
        return f"/usr/bin/{name}" if name in self.tools else None

    def run(self, name: str, args: Sequence[str], *, cwd: Path | None = None) -> CommandResult:
        command = (name, *args)
        self.calls.append((command, cwd))
        normalized = (Path(name).name, *args)

        for prefix, returncode in self.failures.items():
            if normalized[: len(prefix)] == prefix:
                return CommandResult(args=command, returncode=returncode, stderr="simulated failure\n")

        stdout = ""
        program = normalized[0]
        if program == "python3" and tuple(args[:2]) == ("-m", "venv") and cwd is not None:
            (cwd / args[2] / "bin").mkdir(parents=True, exist_ok=True)
        elif program == "pip" and tuple(args) == ("freeze",):
            stdout = FREEZE_OUTPUT
        elif program == "pylint":
            stdout = RCFILE_OUTPUT
        return CommandResult(args=command, returncode=0, stdout=stdout)

    @property
    def commands(self) -> list[tuple[str, ...]]:
        """Commands with program names reduced to their basename."""

        return [(Path(command[0]).name, *command[1:]) for command, _ in self.calls]

    def commands_of(self, program: str) -> list[tuple[str, ...]]:
        return [command for command in self.commands if command[0] == program]

    @property
    def commit_messages(self) -> list[str]:
        return [
            command[command.index("-m") + 1]
            for command in self.commands_of("git")
            if command[1] == "commit"
        ]


class GitOnlyExecutor(SubprocessExecutor):
    """Run git for real and hand every other command to a :class:`FakeExecutor`."""

    def __init__(self, fake: FakeExecutor | None = None) -> None:
        self.fake = fake or FakeExecutor()

    def which(self, name: str) -> Optional[str]:
        return self.fake.which(name)

    def run(self, name: str, args: Sequence[str], *, cwd: Path | None = None) -> CommandResult:
        if name == "git":
            return super().run(name, args, cwd=cwd)
        return self.fake.run(name, args, cwd=cwd)


class ScriptedPrompter(Prompter):
    """Answer questions from a fixed script and fail on unexpected ones."""

    def __init__(self, *answers: str) -> None:
        self.answers = deque(answers)
        self.questions: list[str] = []
        self.messages: list[str] = []

    def echo(self, message: str) -> None:
        self.messages.append(message)

    def ask(self, question: str) -> str:
        self.questions.append(question)
        if not self.answers:
            raise AssertionError(f"unexpected question: {question!r}")
        return self.answers.popleft()
