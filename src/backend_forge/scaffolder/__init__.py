"""Backend Forge scaffolder -- turns a ``ProjectConfig`` into a project tree.

Generation is a deterministic mapping from configuration to an ordered list of
``(path, content)`` artifacts, written once under ``config.project_path``.

Quick usage::

    from backend_forge.config import ProjectConfig
    from backend_forge.scaffolder import ProjectGenerator

    config = ProjectConfig(name="my-api", working_dir=Path("/tmp/output"))
    generator = ProjectGenerator(config)
    project_path = await generator.generate()
"""

from backend_forge.scaffolder.emitter import FileEmitter, GeneratedArtifact
from backend_forge.scaffolder.errors import (
    ArtifactWriteError,
    DependencyConflictError,
    ProjectExistsError,
    ScaffoldError,
)
from backend_forge.scaffolder.generator import ProjectGenerator
from backend_forge.scaffolder.templates import TemplateRenderer

__all__ = [
    "ArtifactWriteError",
    "DependencyConflictError",
    "FileEmitter",
    "GeneratedArtifact",
    "ProjectExistsError",
    "ProjectGenerator",
    "ScaffoldError",
    "TemplateRenderer",
]
