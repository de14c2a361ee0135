"""Directory planning for generated projects."""

from __future__ import annotations

from backend_forge.config import Database, ProjectConfig, Validation

BASE_DIRECTORIES: tuple[str, ...] = (
    "src",
    "src/config",
    "src/routes",
    "src/middlewares",
    "src/controllers",
    "src/services",
    "src/utils",
)


def plan_directories(config: ProjectConfig) -> list[str]:
    """Return the ordered list of directories to create under the project root.

    The base layout is fixed; optional folders follow in a stable order:
    ``types`` (TypeScript), ``models`` (any database), ``validators`` (any
    validation library), then ``migrations`` and ``seeders`` (relational
    databases only).
    """
    dirs = list(BASE_DIRECTORIES)
    if config.typed:
        dirs.append("src/types")
    if config.database is not Database.NONE:
        dirs.append("src/models")
    if config.validation is not Validation.NONE:
        dirs.append("src/validators")
    if config.is_relational:
        dirs.extend(["src/migrations", "src/seeders"])
    return dirs
