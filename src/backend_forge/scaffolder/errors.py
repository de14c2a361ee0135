"""Exceptions raised while scaffolding a project."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every scaffolding failure."""


class ProjectExistsError(ScaffoldError):
    """Raised when the target project directory already exists.

    Detected before any filesystem mutation, so nothing has been written.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'Directory "{path}" already exists')


class ArtifactWriteError(ScaffoldError):
    """Raised when a directory or file cannot be written.

    Fatal for the run. Files written before the failure are left in place.
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Failed to write {path}: {reason}")


class DependencyConflictError(ScaffoldError):
    """Raised when two configuration dimensions contribute the same package."""

    def __init__(self, name: str, owners: tuple[str, str]) -> None:
        self.name = name
        self.owners = owners
        super().__init__(
            f"Dependency {name!r} contributed by both {owners[0]!r} and {owners[1]!r}"
        )
