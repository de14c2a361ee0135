"""Tests for the Jinja2 template renderer (backend_forge.scaffolder.templates).

Covers:
- Template path helpers
- Custom filters (slugify, js_string)
- StrictUndefined behaviour
- Template coverage: matching stubs per language, one template per variant
"""

from __future__ import annotations

from pathlib import Path

import jinja2
import pytest

from backend_forge.config import Language
from backend_forge.scaffolder.templates import (
    TemplateRenderer,
    shared_template,
    source_template,
)
from backend_forge.scaffolder.variants import (
    DATABASE_PROFILES,
    LOGGER_PROFILES,
    VALIDATION_PROFILES,
)

pytestmark = pytest.mark.unit


def _templates(renderer: TemplateRenderer, prefix: str = "") -> list[str]:
    """Sorted POSIX paths of the .j2 files under *prefix*."""
    search_dir = renderer.template_dir / prefix
    return sorted(p.relative_to(renderer.template_dir).as_posix() for p in search_dir.rglob("*.j2"))


class TestTemplatePaths:
    def test_source_template_typescript(self, make_config):
        cfg = make_config(language=Language.TYPESCRIPT)
        assert source_template(cfg, "database/mongoose") == "typescript/database/mongoose.ts.j2"

    def test_source_template_javascript(self, make_config):
        cfg = make_config(language=Language.JAVASCRIPT)
        assert source_template(cfg, "server") == "javascript/server.js.j2"

    def test_shared_template(self):
        assert shared_template("README.md") == "shared/README.md.j2"


class TestFilters:
    def test_slugify(self, renderer: TemplateRenderer):
        out = renderer.env.from_string("{{ name | slugify }}").render({"name": "My_Shop.API"})
        assert out == "my-shop-api"

    def test_js_string_quotes(self, renderer: TemplateRenderer):
        out = renderer.env.from_string("{{ v | js_string }}").render({"v": "7d"})
        assert out == "'7d'"

    def test_js_string_escapes(self, renderer: TemplateRenderer):
        out = renderer.env.from_string("{{ v | js_string }}").render({"v": "it's a\\path"})
        assert out == "'it\\'s a\\\\path'"

    def test_no_html_escaping(self, renderer: TemplateRenderer):
        out = renderer.env.from_string("{{ v }}").render({"v": "a && b < c"})
        assert out == "a && b < c"


class TestStrictUndefined:
    def test_missing_variable_raises(self, renderer: TemplateRenderer):
        with pytest.raises(jinja2.UndefinedError):
            renderer.env.from_string("{{ missing }}").render({})


class TestDiscovery:
    def test_languages_have_same_stubs(self, renderer: TemplateRenderer):
        ts = {Path(p).relative_to("typescript").as_posix().replace(".ts.j2", "")
              for p in _templates(renderer, "typescript")}
        js = {Path(p).relative_to("javascript").as_posix().replace(".js.j2", "")
              for p in _templates(renderer, "javascript")}
        # Only TypeScript projects get the shared types module.
        assert ts - js == {"types"}
        assert js - ts == set()

    @pytest.mark.parametrize("language", list(Language))
    def test_every_variant_has_templates(self, renderer: TemplateRenderer, make_config, language):
        cfg = make_config(language=language)
        available = set(_templates(renderer, language.value))
        stems = []
        for profile in DATABASE_PROFILES.values():
            stems += [profile.connection_template, profile.models_template]
        for profile in VALIDATION_PROFILES.values():
            stems += [profile.docs_template, f"snippets/{profile.snippet}"]
        for profile in LOGGER_PROFILES.values():
            stems.append(profile.module_template)
        for stem in filter(None, stems):
            assert source_template(cfg, stem) in available

    def test_custom_template_dir(self, tmp_path: Path):
        (tmp_path / "hello.j2").write_text("Hello {{ name }}")
        renderer = TemplateRenderer(tmp_path)
        assert renderer.render("hello.j2", {"name": "forge"}) == "Hello forge"
        assert _templates(renderer) == ["hello.j2"]
