"""Backend Forge configuration.

The configuration record that drives a single generation run. All choices are
held in an immutable Pydantic v2 model so they can be validated once, up
front, and then passed through every composer without anyone mutating them.
"""

from __future__ import annotations

import os
import re
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_PROJECT_NAME = "my-backend"

_PROJECT_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


# ---------------------------------------------------------------------------
# Choice enums
# ---------------------------------------------------------------------------


class Language(str, Enum):
    """Source language of the generated service."""

    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"


class Database(str, Enum):
    """Database / ORM pairing."""

    NONE = "none"
    MONGODB = "mongodb"
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"


class Validation(str, Enum):
    """Request validation library."""

    NONE = "none"
    ZOD = "zod"
    JOI = "joi"


class Logger(str, Enum):
    """Logging library wired into the generated service."""

    NONE = "none"
    WINSTON = "winston"
    PINO = "pino"


RELATIONAL_DATABASES: frozenset[Database] = frozenset(
    {Database.POSTGRESQL, Database.MYSQL}
)


# ---------------------------------------------------------------------------
# Configuration record
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Validated set of choices for one generation run.

    ``working_dir`` is always passed in explicitly; nothing downstream reads
    the process working directory.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name (directory and package.json name)")
    working_dir: Path = Field(..., description="Parent directory of the project")
    language: Language = Field(default=Language.TYPESCRIPT)
    database: Database = Field(default=Database.MONGODB)
    auth: bool = Field(default=True, description="Add JWT / bcrypt dependencies and env")
    validation: Validation = Field(default=Validation.ZOD)
    logger: Logger = Field(default=Logger.WINSTON)
    error_handling: bool = Field(
        default=True, description="Emit AppError + response helpers and wire them into app"
    )
    docker: bool = Field(default=True, description="Emit Dockerfile and docker-compose.yml")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("project name must not be empty")
        if not _PROJECT_NAME_RE.match(value):
            raise ValueError(
                f"invalid project name {value!r}: use letters, digits, '.', '_' or '-'"
            )
        return value

    # ------------------------------------------------------------------
    # Derived values (read-only properties)
    # ------------------------------------------------------------------

    @property
    def project_path(self) -> Path:
        """Absolute path of the directory that will be created."""
        return (self.working_dir / self.name).absolute()

    @property
    def typed(self) -> bool:
        return self.language is Language.TYPESCRIPT

    @property
    def ext(self) -> str:
        """Source file suffix shared by every emitted stub."""
        return "ts" if self.typed else "js"

    @property
    def is_relational(self) -> bool:
        return self.database in RELATIONAL_DATABASES


# ---------------------------------------------------------------------------
# Environment defaults
# ---------------------------------------------------------------------------

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

_ENUM_VARS: dict[str, tuple[str, type[Enum]]] = {
    "FORGE_LANGUAGE": ("language", Language),
    "FORGE_DATABASE": ("database", Database),
    "FORGE_VALIDATION": ("validation", Validation),
    "FORGE_LOGGER": ("logger", Logger),
}

_BOOL_VARS: dict[str, str] = {
    "FORGE_AUTH": "auth",
    "FORGE_ERROR_HANDLING": "error_handling",
    "FORGE_DOCKER": "docker",
}


def defaults_from_env(environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Read choice defaults from ``FORGE_*`` environment variables.

    Recognised variables (all optional):
        FORGE_LANGUAGE, FORGE_DATABASE, FORGE_VALIDATION, FORGE_LOGGER,
        FORGE_AUTH, FORGE_ERROR_HANDLING, FORGE_DOCKER.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        A dict keyed by ``ProjectConfig`` field name holding only the values
        that were set.

    Raises:
        ValueError: If a variable holds a value outside its allowed set.
    """
    env = os.environ if environ is None else environ
    defaults: dict[str, Any] = {}

    for var, (field_name, enum_cls) in _ENUM_VARS.items():
        raw = env.get(var, "").strip().lower()
        if not raw:
            continue
        try:
            defaults[field_name] = enum_cls(raw)
        except ValueError:
            allowed = ", ".join(m.value for m in enum_cls)
            raise ValueError(f"{var}={raw!r} is not one of: {allowed}") from None

    for var, field_name in _BOOL_VARS.items():
        raw = env.get(var, "").strip().lower()
        if not raw:
            continue
        if raw in _TRUE_VALUES:
            defaults[field_name] = True
        elif raw in _FALSE_VALUES:
            defaults[field_name] = False
        else:
            raise ValueError(f"{var}={raw!r} is not a boolean")

    return defaults
