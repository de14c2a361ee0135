"""Source stub generation.

Renders the runnable parts of the generated service: ``.gitignore``, the
error utilities, ``server``/``app`` entry points, the database connection
module (plus Sequelize CLI files for relational databases), the logger module
and the shared TypeScript types.
"""

from __future__ import annotations

from typing import Any

from backend_forge.config import ProjectConfig

from .emitter import GeneratedArtifact
from .templates import TemplateRenderer, shared_template, source_template
from .variants import database_profile, logger_profile


class SourceGenerator:
    """Generates the executable source files of a project.

    Every ``generate_*`` method returns a list of artifacts; an empty list
    means the feature is switched off for this configuration.
    """

    def __init__(self, renderer: TemplateRenderer, config: ProjectConfig) -> None:
        self.renderer = renderer
        self.config = config
        self.ext = config.ext

    def _render(self, stem: str, context: dict[str, Any]) -> str:
        return self.renderer.render(source_template(self.config, stem), context)

    # -- Always emitted ----------------------------------------------------

    def generate_gitignore(self, context: dict[str, Any]) -> list[GeneratedArtifact]:
        content = self.renderer.render(shared_template("gitignore"), context)
        return [GeneratedArtifact(".gitignore", content)]

    def generate_entry_points(self, context: dict[str, Any]) -> list[GeneratedArtifact]:
        """``src/server.<ext>`` followed by ``src/app.<ext>``."""
        return [
            GeneratedArtifact(f"src/server.{self.ext}", self._render("server", context)),
            GeneratedArtifact(f"src/app.{self.ext}", self._render("app", context)),
        ]

    # -- Gated -------------------------------------------------------------

    def generate_error_utilities(self, context: dict[str, Any]) -> list[GeneratedArtifact]:
        if not self.config.error_handling:
            return []
        return [
            GeneratedArtifact(f"src/utils/AppError.{self.ext}", self._render("AppError", context)),
            GeneratedArtifact(f"src/utils/response.{self.ext}", self._render("response", context)),
        ]

    def generate_database(self, context: dict[str, Any]) -> list[GeneratedArtifact]:
        """Connection module, plus Sequelize CLI wiring for relational databases."""
        profile = database_profile(self.config.database)
        if profile.connection_template is None:
            return []

        artifacts = [
            GeneratedArtifact(
                f"src/config/database.{self.ext}",
                self._render(profile.connection_template, context),
            )
        ]
        if profile.is_relational:
            artifacts.append(
                GeneratedArtifact(
                    ".sequelizerc",
                    self.renderer.render(shared_template("sequelizerc"), context),
                )
            )
            # Read by sequelize-cli, which loads plain CommonJS regardless of language.
            artifacts.append(
                GeneratedArtifact(
                    "config/database.js",
                    self.renderer.render(shared_template("sequelize-config.js"), context),
                )
            )
        return artifacts

    def generate_logger(self, context: dict[str, Any]) -> list[GeneratedArtifact]:
        profile = logger_profile(self.config.logger)
        if profile.module_template is None:
            return []
        return [
            GeneratedArtifact(
                f"src/config/logger.{self.ext}",
                self._render(profile.module_template, context),
            )
        ]

    def generate_types(self, context: dict[str, Any]) -> list[GeneratedArtifact]:
        if not self.config.typed:
            return []
        return [GeneratedArtifact("src/types/index.ts", self._render("types", context))]
