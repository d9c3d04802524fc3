"""Validation helpers for project and repository names."""

from __future__ import annotations

import re

__all__ = ["repository_slug", "validate_project_name"]


_SEPARATORS = re.compile(r"[/\\]")
_RESERVED = {".", ".."}


def validate_project_name(name: str | None) -> str:
    """Return ``name`` stripped of surrounding whitespace.

    The name becomes a directory created next to the caller, so it must be a
    single path component. :class:`ValueError` is raised otherwise.
    """

    candidate = (name or "").strip()
    if not candidate:
        raise ValueError("project name must not be empty")
    if candidate in _RESERVED:
        raise ValueError(f"'{candidate}' is not a valid project name")
    if _SEPARATORS.search(candidate):
        raise ValueError(f"project name '{candidate}' must not contain path separators")
    return candidate


def repository_slug(name: str, owner: str = "") -> str:
    """Return the ``owner/name`` form understood by ``gh repo create``."""

    owner = owner.strip().strip("/")
    if not owner:
        return name
    return f"{owner}/{name}"
