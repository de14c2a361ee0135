"""Documentation stubs: per-folder ``info`` files and the project README.

The folder stubs are annotated examples rather than working code.  They are
rendered against the active configuration so the examples only reference
libraries and helpers the project actually has.
"""

from __future__ import annotations

from typing import Any

from backend_forge.config import ProjectConfig

from .emitter import GeneratedArtifact
from .templates import TemplateRenderer, shared_template, source_template
from .variants import database_profile, logger_profile, validation_profile

# Folders that always receive an info stub, in emission order.
FOLDER_STUBS: tuple[str, ...] = ("routes", "controllers", "services", "middlewares")


class DocsGenerator:
    """Generates folder documentation stubs and ``README.md``."""

    def __init__(self, renderer: TemplateRenderer, config: ProjectConfig) -> None:
        self.renderer = renderer
        self.config = config
        self.ext = config.ext

    def _docs_context(self, context: dict[str, Any]) -> dict[str, Any]:
        cfg = self.config
        if cfg.error_handling:
            not_found = "if (!user) throw new AppError('User not found', 404);"
        else:
            not_found = "if (!user) throw new Error('User not found');"
        snippet = validation_profile(cfg.validation).snippet
        return {
            **context,
            "orm": database_profile(cfg.database).orm,
            "not_found": not_found,
            "guard": "authenticate, " if cfg.auth else "",
            "validation_snippet": source_template(cfg, f"snippets/{snippet}"),
        }

    def _info(self, folder: str, stem: str, context: dict[str, Any]) -> GeneratedArtifact:
        content = self.renderer.render(source_template(self.config, stem), context)
        return GeneratedArtifact(f"src/{folder}/info.{self.ext}", content)

    # -- Folder stubs ------------------------------------------------------

    def generate_models_info(self, context: dict[str, Any]) -> list[GeneratedArtifact]:
        profile = database_profile(self.config.database)
        if profile.models_template is None:
            return []
        return [self._info("models", profile.models_template, context)]

    def generate_validators_info(self, context: dict[str, Any]) -> list[GeneratedArtifact]:
        profile = validation_profile(self.config.validation)
        if profile.docs_template is None:
            return []
        return [self._info("validators", profile.docs_template, context)]

    def generate_folder_info(self, context: dict[str, Any]) -> list[GeneratedArtifact]:
        """Routes, controllers, services and middlewares stubs (always emitted)."""
        docs_ctx = self._docs_context(context)
        return [self._info(folder, f"info/{folder}", docs_ctx) for folder in FOLDER_STUBS]

    # -- README ------------------------------------------------------------

    def project_tree(self) -> list[str]:
        """Return the ``src/`` tree drawn in the README, one line per entry."""
        cfg = self.config
        ext = self.ext
        db = database_profile(cfg.database)

        config_files = [(f"env.{ext}", "Environment constants")]
        if db.enabled:
            config_files.append((f"database.{ext}", "Database connection"))
        if logger_profile(cfg.logger).enabled:
            config_files.append((f"logger.{ext}", "Logger setup"))

        utils_files: list[tuple[str, str]] = []
        if cfg.error_handling:
            utils_files = [
                (f"AppError.{ext}", "Custom error class"),
                (f"response.{ext}", "Response helpers"),
            ]

        entries: list[tuple[str, str, list[tuple[str, str]]]] = [
            ("config/", "Configuration files", config_files),
            ("routes/", "API routes", []),
            ("controllers/", "Route controllers", []),
            ("services/", "Business logic", []),
        ]
        if db.enabled:
            entries.append(("models/", "Database models", []))
        if db.is_relational:
            entries.append(("migrations/", "Database migrations", []))
            entries.append(("seeders/", "Database seeders", []))
        if validation_profile(cfg.validation).enabled:
            entries.append(("validators/", "Request validators", []))
        entries.append(("middlewares/", "Custom middleware", []))
        entries.append(("utils/", "Utility functions", utils_files))
        if cfg.typed:
            entries.append(("types/", "Shared TypeScript types", []))
        entries.append((f"app.{ext}", "Express app", []))
        entries.append((f"server.{ext}", "Server entry point", []))

        lines = ["src/"]
        for i, (name, note, children) in enumerate(entries):
            last = i == len(entries) - 1
            lines.append(f"{'└── ' if last else '├── '}{name:<16}# {note}")
            indent = "    " if last else "│   "
            for j, (child, child_note) in enumerate(children):
                branch = "└── " if j == len(children) - 1 else "├── "
                lines.append(f"{indent}{branch}{child:<12}# {child_note}")
        return lines

    def generate_readme(self, context: dict[str, Any]) -> list[GeneratedArtifact]:
        content = self.renderer.render(
            shared_template("README.md"), {**context, "tree": self.project_tree()}
        )
        return [GeneratedArtifact("README.md", content)]
