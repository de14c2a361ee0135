"""Container files: ``Dockerfile``, ``docker-compose.yml`` and ``.dockerignore``.

The compose file always has an ``app`` service.  When a database is selected
the matching service from the database profile is added, together with its
named volume and an ``environment`` override that points the app at the
database container instead of ``localhost``.
"""

from __future__ import annotations

from typing import Any

from backend_forge.config import ProjectConfig

from .emitter import GeneratedArtifact
from .templates import TemplateRenderer, shared_template
from .variants import database_profile


class DockerGenerator:
    """Generates the container build and orchestration files."""

    # Template name -> output file name, in emission order
    _DOCKER_FILES: dict[str, str] = {
        "Dockerfile": "Dockerfile",
        "docker-compose.yml": "docker-compose.yml",
        "dockerignore": ".dockerignore",
    }

    def __init__(self, renderer: TemplateRenderer, config: ProjectConfig) -> None:
        self.renderer = renderer
        self.config = config

    def compose_context(self, context: dict[str, Any]) -> dict[str, Any]:
        """Extend *context* with the database service block, if any."""
        service = database_profile(self.config.database).compose
        name = self.config.name
        return {
            **context,
            "service": service,
            "service_environment": service.environment_for(name) if service else [],
            "app_environment": service.app_environment_for(name) if service else [],
        }

    def generate_all(self, context: dict[str, Any]) -> list[GeneratedArtifact]:
        """Render every container file, or nothing when Docker is disabled."""
        if not self.config.docker:
            return []
        ctx = self.compose_context(context)
        return [
            GeneratedArtifact(output_name, self.renderer.render(shared_template(name), ctx))
            for name, output_name in self._DOCKER_FILES.items()
        ]
