"""Dependency manifest and TypeScript compiler configuration.

Produces ``package.json`` (always) and ``tsconfig.json`` (TypeScript only).
Dependencies are collected from each configuration dimension into a
``DependencySet``; the manifest is exactly the union of the enabled
contributions.
"""

from __future__ import annotations

import json
from typing import Any

from backend_forge.config import Language, ProjectConfig

from .emitter import GeneratedArtifact
from .errors import DependencyConflictError
from .variants import database_profile, logger_profile, validation_profile


# ---------------------------------------------------------------------------
# Contribution tables
# ---------------------------------------------------------------------------

BASE_DEPENDENCIES: dict[str, str] = {
    "express": "^4.18.2",
    "dotenv": "^16.3.1",
    "cors": "^2.8.5",
    "helmet": "^7.1.0",
}

BASE_DEV_DEPENDENCIES: dict[str, str] = {
    "nodemon": "^3.0.2",
}

LANGUAGE_DEV_DEPENDENCIES: dict[Language, dict[str, str]] = {
    Language.TYPESCRIPT: {
        "typescript": "^5.3.3",
        "@types/node": "^20.10.6",
        "@types/express": "^4.17.21",
        "@types/cors": "^2.8.17",
        "ts-node": "^10.9.2",
    },
    Language.JAVASCRIPT: {},
}

AUTH_DEPENDENCIES: dict[str, str] = {
    "jsonwebtoken": "^9.0.2",
    "bcryptjs": "^2.4.3",
}

AUTH_TYPE_DEPENDENCIES: dict[str, str] = {
    "@types/jsonwebtoken": "^9.0.5",
    "@types/bcryptjs": "^2.4.6",
}

ENTRY_POINTS: dict[Language, str] = {
    Language.TYPESCRIPT: "dist/server.js",
    Language.JAVASCRIPT: "src/server.js",
}

LANGUAGE_SCRIPTS: dict[Language, dict[str, str]] = {
    Language.TYPESCRIPT: {
        "start": "node dist/server.js",
        "dev": "nodemon --exec ts-node src/server.ts",
        "build": "tsc",
    },
    Language.JAVASCRIPT: {
        "start": "node src/server.js",
        "dev": "nodemon src/server.js",
    },
}

MIGRATION_SCRIPTS: dict[str, str] = {
    "db:migrate": "npx sequelize-cli db:migrate",
    "db:migrate:undo": "npx sequelize-cli db:migrate:undo",
    "db:seed": "npx sequelize-cli db:seed:all",
}

TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2020",
        "module": "commonjs",
        "lib": ["ES2020"],
        "outDir": "./dist",
        "rootDir": "./src",
        "strict": True,
        "esModuleInterop": True,
        "skipLibCheck": True,
        "forceConsistentCasingInFileNames": True,
        "resolveJsonModule": True,
        "moduleResolution": "node",
        "types": ["node"],
    },
    "include": ["src/**/*"],
    "exclude": ["node_modules", "dist"],
}


# ---------------------------------------------------------------------------
# DependencySet
# ---------------------------------------------------------------------------


class DependencySet:
    """Ordered name -> version mapping that remembers who added each package.

    Two different owners contributing the same package name is a table error
    and raises ``DependencyConflictError``.
    """

    def __init__(self) -> None:
        self._versions: dict[str, str] = {}
        self._owners: dict[str, str] = {}

    def add(self, name: str, version: str, owner: str) -> None:
        existing = self._owners.get(name)
        if existing is not None and existing != owner:
            raise DependencyConflictError(name, (existing, owner))
        self._versions[name] = version
        self._owners[name] = owner

    def update(self, packages: dict[str, str], owner: str) -> None:
        for name, version in packages.items():
            self.add(name, version, owner)

    def as_dict(self) -> dict[str, str]:
        return dict(self._versions)


# ---------------------------------------------------------------------------
# ManifestGenerator
# ---------------------------------------------------------------------------


class ManifestGenerator:
    """Builds ``package.json`` and ``tsconfig.json`` for a project."""

    def __init__(self, config: ProjectConfig) -> None:
        self.config = config

    def collect_dependencies(self) -> tuple[DependencySet, DependencySet]:
        """Return ``(dependencies, devDependencies)`` for the configuration.

        Raises:
            DependencyConflictError: If two dimensions contribute one package.
        """
        cfg = self.config
        deps = DependencySet()
        dev = DependencySet()

        deps.update(BASE_DEPENDENCIES, "base")
        dev.update(BASE_DEV_DEPENDENCIES, "base")
        dev.update(LANGUAGE_DEV_DEPENDENCIES[cfg.language], "language")

        db = database_profile(cfg.database)
        deps.update(db.dependencies, "database")
        dev.update(db.dev_dependencies, "database")

        if cfg.auth:
            deps.update(AUTH_DEPENDENCIES, "auth")
            if cfg.typed:
                dev.update(AUTH_TYPE_DEPENDENCIES, "auth")

        deps.update(validation_profile(cfg.validation).dependencies, "validation")
        deps.update(logger_profile(cfg.logger).dependencies, "logger")
        return deps, dev

    def scripts(self) -> dict[str, str]:
        scripts = dict(LANGUAGE_SCRIPTS[self.config.language])
        if self.config.is_relational:
            scripts.update(MIGRATION_SCRIPTS)
        return scripts

    def manifest(self) -> dict[str, Any]:
        """Return the ``package.json`` object with keys in emission order."""
        deps, dev = self.collect_dependencies()
        return {
            "name": self.config.name,
            "version": "1.0.0",
            "description": "Backend API",
            "main": ENTRY_POINTS[self.config.language],
            "scripts": self.scripts(),
            "dependencies": deps.as_dict(),
            "devDependencies": dev.as_dict(),
        }

    # -- Artifacts ---------------------------------------------------------

    def generate_package_json(self) -> list[GeneratedArtifact]:
        return [GeneratedArtifact("package.json", json.dumps(self.manifest(), indent=2))]

    def generate_tsconfig(self) -> list[GeneratedArtifact]:
        if not self.config.typed:
            return []
        return [GeneratedArtifact("tsconfig.json", json.dumps(TSCONFIG, indent=2))]
