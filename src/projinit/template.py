"""String templating for the generated project files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping, MutableMapping

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot evaluate a placeholder."""


def _apply_filter(value: Any, filter_name: str, filters: Mapping[str, Callable[[Any], Any]]) -> Any:
    try:
        filter_func = filters[filter_name]
    except KeyError as exc:
        raise TemplateRenderingError(f"unknown filter '{filter_name}'") from exc

    return filter_func(value)


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates with ``{{ key }}`` and ``{{ key|strip }}`` expressions.

    Every placeholder must name a key of the context; an unknown key raises
    :class:`TemplateRenderingError`. Templates that contain other ``{{ }}``
    syntax, such as the CI workflow, are written verbatim and never rendered.
    """

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.filters:
            self.filters["strip"] = lambda value: str(value).strip()

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render ``template`` using ``context``."""

        def substitute(match: re.Match[str]) -> str:
            key, *filters = [part.strip() for part in match.group("expression").split("|")]
            if key not in context:
                raise TemplateRenderingError(f"missing value for '{key}'")

            value = context[key]
            for filter_name in filters:
                value = _apply_filter(value, filter_name, self.filters)

            return str(value)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)

    def write(
        self,
        destination: str | Path,
        template: str,
        context: Mapping[str, Any],
        *,
        encoding: str = "utf-8",
    ) -> Path:
        """Render ``template`` into ``destination``, creating parent directories."""

        destination = Path(destination)
        rendered = self.render_string(template, context)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(rendered, encoding=encoding)
        return destination
