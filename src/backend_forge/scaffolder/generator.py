"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and writes a complete Node/Express backend skeleton:
directory tree, ``package.json``, environment files, source stubs, folder
documentation, container files and README.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

from backend_forge.config import ProjectConfig

from .docker_gen import DockerGenerator
from .docs_gen import DocsGenerator
from .emitter import FileEmitter, GeneratedArtifact
from .env_gen import EnvGenerator
from .errors import ArtifactWriteError, ProjectExistsError
from .manifest import ManifestGenerator
from .planner import plan_directories
from .source_gen import SourceGenerator
from .templates import TemplateRenderer
from .variants import (
    LANGUAGE_LABELS,
    database_profile,
    logger_profile,
    validation_profile,
)


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``ProjectConfig``, generates a project directory containing:
    - ``package.json`` (and ``tsconfig.json`` for TypeScript)
    - ``.env`` / ``.env.example`` and the ``ENV`` constants module
    - Express ``server`` / ``app`` entry points and optional error utilities
    - Database connection, logger and Sequelize CLI files when selected
    - Annotated ``info`` stubs for each source folder
    - Dockerfile, docker-compose.yml and .dockerignore when enabled
    - README
    """

    def __init__(self, config: ProjectConfig, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.manifest_gen = ManifestGenerator(config)
        self.env_gen = EnvGenerator(self.renderer, config)
        self.source_gen = SourceGenerator(self.renderer, config)
        self.docs_gen = DocsGenerator(self.renderer, config)
        self.docker_gen = DockerGenerator(self.renderer, config)

    # -- Public API --------------------------------------------------------

    async def generate(self, on_write: Callable[[Path], None] | None = None) -> Path:
        """Generate the project under ``config.project_path``.

        Args:
            on_write: Optional callback invoked with each file path as soon as
                it has been written.

        Returns:
            Path to the generated project root.

        Raises:
            ProjectExistsError: If the target directory already exists.
                Nothing is written in that case.
            ArtifactWriteError: If a directory or file cannot be written.
                Files written before the failure are left in place.
        """
        project_root = self.config.project_path
        if await asyncio.to_thread(project_root.exists):
            raise ProjectExistsError(project_root)

        try:
            await asyncio.to_thread(project_root.mkdir, parents=True)
        except FileExistsError:
            raise ProjectExistsError(project_root) from None
        except OSError as exc:
            raise ArtifactWriteError(project_root, exc) from exc

        emitter = FileEmitter(project_root, on_write=on_write)
        await emitter.make_directories(plan_directories(self.config))

        for artifact in self.iter_artifacts():
            await emitter.write(artifact)

        return project_root

    def iter_artifacts(self) -> Iterator[GeneratedArtifact]:
        """Yield every file of the project, one at a time, in emission order.

        Pure: nothing is read from or written to disk.
        """
        context = self._build_context()
        steps: list[Callable[[], list[GeneratedArtifact]]] = [
            self.manifest_gen.generate_package_json,
            self.env_gen.generate_env_files,
            lambda: self.source_gen.generate_gitignore(context),
            self.manifest_gen.generate_tsconfig,
            self.env_gen.generate_env_module,
            lambda: self.source_gen.generate_error_utilities(context),
            lambda: self.source_gen.generate_entry_points(context),
            lambda: self.source_gen.generate_database(context),
            lambda: self.docs_gen.generate_models_info(context),
            lambda: self.source_gen.generate_logger(context),
            lambda: self.docs_gen.generate_validators_info(context),
            lambda: self.docs_gen.generate_folder_info(context),
            lambda: self.docker_gen.generate_all(context),
            lambda: self.docs_gen.generate_readme(context),
            lambda: self.source_gen.generate_types(context),
        ]
        for step in steps:
            yield from step()

    def preview(self) -> list[str]:
        """Return the relative paths of every file :meth:`generate` would write."""
        return [artifact.path for artifact in self.iter_artifacts()]

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the project config."""
        cfg = self.config
        return {
            "project_name": cfg.name,
            "language": cfg.language.value,
            "language_label": LANGUAGE_LABELS[cfg.language],
            "typed": cfg.typed,
            "ext": cfg.ext,
            "relational": cfg.is_relational,
            "auth": cfg.auth,
            "error_handling": cfg.error_handling,
            "docker": cfg.docker,
            "database": database_profile(cfg.database),
            "validation": validation_profile(cfg.validation),
            "logger": logger_profile(cfg.logger),
            "env_vars": self.env_gen.env_vars,
            "scripts": self.manifest_gen.scripts(),
        }
