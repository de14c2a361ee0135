"""Shared pytest fixtures for the Backend Forge test suite.

Provides reusable fixtures for:
- Temporary working directories
- ProjectConfig factories for the common scenarios
- A shared TemplateRenderer
- Rendering a whole project in memory (no disk writes)
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from backend_forge.config import Database, Language, Logger, ProjectConfig, Validation
from backend_forge.scaffolder.generator import ProjectGenerator
from backend_forge.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Parent directory that projects are generated into (auto-cleanup)."""
    path = tmp_path / "workspace"
    path.mkdir()
    yield path


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def make_config(workdir: Path) -> Callable[..., ProjectConfig]:
    """Factory building a ``ProjectConfig`` rooted in ``workdir``.

    Any field can be overridden by keyword; everything else takes the model
    defaults (TypeScript, MongoDB, auth, Zod, Winston, error handling, Docker).
    """

    def _make(**overrides: Any) -> ProjectConfig:
        fields: dict[str, Any] = {"name": "test-api", "working_dir": workdir}
        fields.update(overrides)
        return ProjectConfig(**fields)

    return _make


@pytest.fixture
def default_config(make_config) -> ProjectConfig:
    """TypeScript + MongoDB + every optional feature enabled."""
    return make_config()


@pytest.fixture
def minimal_config(make_config) -> ProjectConfig:
    """JavaScript with every optional feature disabled."""
    return make_config(
        language=Language.JAVASCRIPT,
        database=Database.NONE,
        auth=False,
        validation=Validation.NONE,
        logger=Logger.NONE,
        error_handling=False,
        docker=False,
    )


@pytest.fixture
def relational_config(make_config) -> ProjectConfig:
    """TypeScript + PostgreSQL + Joi + Pino with everything enabled."""
    return make_config(
        database=Database.POSTGRESQL,
        validation=Validation.JOI,
        logger=Logger.PINO,
    )


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# In-memory rendering
# ---------------------------------------------------------------------------

@pytest.fixture
def render_project() -> Callable[[ProjectConfig], dict[str, str]]:
    """Return a helper mapping a config to ``{relative_path: content}``."""

    def _render(config: ProjectConfig) -> dict[str, str]:
        generator = ProjectGenerator(config)
        return {a.path: a.content for a in generator.iter_artifacts()}

    return _render
