from __future__ import annotations

from pathlib import Path

import pytest

from projinit import templates
from projinit.template import TemplateRenderer, TemplateRenderingError


@pytest.fixture()
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


def test_render_string_with_strip_filter(renderer: TemplateRenderer):
    template = "Copyright (c) {{ year }} {{ holder|strip }}"
    context = {"year": 2026, "holder": "  Ada  "}
    assert renderer.render_string(template, context) == "Copyright (c) 2026 Ada"


def test_render_string_missing_key_raises(renderer: TemplateRenderer):
    with pytest.raises(TemplateRenderingError, match="missing value for 'missing'"):
        renderer.render_string("Hello {{ missing }}", {})


def test_unknown_filter_raises(renderer: TemplateRenderer):
    with pytest.raises(TemplateRenderingError, match="unknown filter 'upper'"):
        renderer.render_string("{{ name|upper }}", {"name": "demo"})


def test_readme_renders_every_placeholder(renderer: TemplateRenderer):
    context = {"project_name": "demo", "license_notice": "Not licensed."}
    rendered = renderer.render_string(templates.README_TEMPLATE, context)
    assert rendered.startswith("# demo\n")
    assert "Not licensed." in rendered
    assert "{{" not in rendered


def test_write_creates_parent_directories(tmp_path: Path, renderer: TemplateRenderer):
    destination = tmp_path / "nested" / "file.txt"
    result = renderer.write(destination, "Name: {{ name }}", {"name": "Demo"})
    assert result == destination
    assert destination.read_text(encoding="utf-8") == "Name: Demo"
