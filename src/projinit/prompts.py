"""Interactive questions asked before scaffolding starts."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Optional

import click

from .config import RemoteOptions

__all__ = ["ConsolePrompter", "Prompter", "ask_remote_options", "is_affirmative"]


_YES = re.compile(r"[Yy]")


class Prompter(ABC):
    """Source of answers to interactive questions."""

    @abstractmethod
    def echo(self, message: str) -> None:
        """Show ``message`` to the user without expecting an answer."""

    @abstractmethod
    def ask(self, question: str) -> str:
        """Return the raw answer to ``question``."""


class ConsolePrompter(Prompter):
    """Ask questions on the terminal with :mod:`click`."""

    def echo(self, message: str) -> None:
        click.echo(message)

    def ask(self, question: str) -> str:
        return click.prompt(question, default="", show_default=False, prompt_suffix=" ")


def is_affirmative(answer: str) -> bool:
    """Only a single ``y`` or ``Y`` counts as yes."""

    return bool(_YES.fullmatch(answer.strip()))


def ask_remote_options(prompter: Prompter) -> Optional[RemoteOptions]:
    """Ask whether to create a GitHub repository and collect its details."""

    answer = prompter.ask("Would you like to create a GitHub repository and set it as remote? (y/n):")
    if not is_affirmative(answer):
        return None

    owner = prompter.ask("Enter GitHub username:").strip()
    description = prompter.ask("Enter repository description:").strip()
    private = is_affirmative(prompter.ask("Is the repository private? (y/n):"))
    return RemoteOptions(owner=owner, description=description, private=private)
