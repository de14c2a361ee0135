"""Environment files and the env-constants module.

``.env``, ``.env.example`` and ``src/config/env.<ext>`` are all rendered from
one ordered list of ``EnvVar`` records, so the three can never disagree on
which variables exist or in what order they appear.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from backend_forge.config import Database, ProjectConfig

from .emitter import GeneratedArtifact
from .templates import TemplateRenderer, shared_template, source_template
from .variants import DatabaseProfile, database_profile


DB_PASSWORD_PLACEHOLDER = "your-db-password"
JWT_SECRET_PLACEHOLDER = "your-jwt-secret"


@dataclass(frozen=True)
class EnvVar:
    """One environment variable.

    Attributes:
        name: Variable name.
        value: Value written to ``.env``.
        kind: ``"string"`` or ``"number"``; numbers are parsed with
            ``parseInt`` in the env-constants module.
        default: Fallback used in the env-constants module.  ``None`` means
            the same as ``value``.
        group: Comment header the variable is written under, or ``None`` for
            the leading unheaded block.
        example: Placeholder written to ``.env.example`` in place of
            ``value``; set for secrets only.
    """

    name: str
    value: str
    kind: str = "string"
    default: str | None = None
    group: str | None = None
    example: str | None = None

    @property
    def code_default(self) -> str:
        return self.value if self.default is None else self.default

    def value_for(self, example: bool) -> str:
        if example and self.example is not None:
            return self.example
        return self.value


# ---------------------------------------------------------------------------
# Fragment builders
# ---------------------------------------------------------------------------

def _no_database_vars(config: ProjectConfig, profile: DatabaseProfile) -> list[EnvVar]:
    return []


def _document_vars(config: ProjectConfig, profile: DatabaseProfile) -> list[EnvVar]:
    uri = f"mongodb://localhost:{profile.default_port}/{config.name}"
    return [EnvVar("MONGODB_URI", uri, group="Database")]


def _relational_vars(config: ProjectConfig, profile: DatabaseProfile) -> list[EnvVar]:
    user = profile.default_user
    port = profile.default_port

    def url(password: str) -> str:
        return f"{profile.url_scheme}://{user}:{password}@localhost:{port}/{config.name}"

    return [
        EnvVar(
            "DATABASE_URL",
            url(profile.default_password or ""),
            default="",
            group="Database",
            example=url(DB_PASSWORD_PLACEHOLDER),
        ),
        EnvVar("DB_HOST", "localhost", group="Database"),
        EnvVar("DB_PORT", str(port), kind="number", group="Database"),
        EnvVar("DB_NAME", config.name, group="Database"),
        EnvVar("DB_USER", user or "", group="Database"),
        EnvVar(
            "DB_PASSWORD",
            profile.default_password or "",
            group="Database",
            example=DB_PASSWORD_PLACEHOLDER,
        ),
    ]


DATABASE_ENV_BUILDERS: dict[
    Database, Callable[[ProjectConfig, DatabaseProfile], list[EnvVar]]
] = {
    Database.NONE: _no_database_vars,
    Database.MONGODB: _document_vars,
    Database.POSTGRESQL: _relational_vars,
    Database.MYSQL: _relational_vars,
}

AUTH_VARS: tuple[EnvVar, ...] = (
    EnvVar(
        "JWT_SECRET",
        "your-super-secret-jwt-key-change-in-production",
        default="change-this-secret",
        group="JWT",
        example=JWT_SECRET_PLACEHOLDER,
    ),
    EnvVar("JWT_EXPIRES_IN", "7d", group="JWT"),
)


def build_env_vars(config: ProjectConfig) -> list[EnvVar]:
    """Return every environment variable for *config*, in file order."""
    env_vars = [
        EnvVar("NODE_ENV", "development"),
        EnvVar("PORT", "5000", kind="number"),
    ]
    builder = DATABASE_ENV_BUILDERS[config.database]
    env_vars.extend(builder(config, database_profile(config.database)))
    if config.auth:
        env_vars.extend(AUTH_VARS)
    env_vars.append(EnvVar("CORS_ORIGIN", "http://localhost:3000", group="CORS"))
    return env_vars


def group_sections(env_vars: list[EnvVar]) -> list[tuple[str | None, list[EnvVar]]]:
    """Split *env_vars* into consecutive ``(header, variables)`` runs."""
    sections: list[tuple[str | None, list[EnvVar]]] = []
    for var in env_vars:
        if sections and sections[-1][0] == var.group:
            sections[-1][1].append(var)
        else:
            sections.append((var.group, [var]))
    return sections


# ---------------------------------------------------------------------------
# EnvGenerator
# ---------------------------------------------------------------------------


class EnvGenerator:
    """Renders the dotenv files and the typed/untyped ``ENV`` module."""

    def __init__(self, renderer: TemplateRenderer, config: ProjectConfig) -> None:
        self.renderer = renderer
        self.config = config
        self.env_vars = build_env_vars(config)

    def generate_env_files(self) -> list[GeneratedArtifact]:
        """Return ``.env`` followed by ``.env.example``."""
        sections = group_sections(self.env_vars)
        template = shared_template("dotenv")
        return [
            GeneratedArtifact(
                ".env",
                self.renderer.render(template, {"sections": sections, "example": False}),
            ),
            GeneratedArtifact(
                ".env.example",
                self.renderer.render(template, {"sections": sections, "example": True}),
            ),
        ]

    def generate_env_module(self) -> list[GeneratedArtifact]:
        content = self.renderer.render(
            source_template(self.config, "env"), {"env_vars": self.env_vars}
        )
        return [GeneratedArtifact(f"src/config/env.{self.config.ext}", content)]
