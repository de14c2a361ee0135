"""Tests for directory planning (backend_forge.scaffolder.planner)."""

from __future__ import annotations

import pytest

from backend_forge.config import Database, Language, Validation
from backend_forge.scaffolder.planner import BASE_DIRECTORIES, plan_directories

pytestmark = pytest.mark.unit


def test_minimal_plan_is_base_layout(minimal_config):
    assert plan_directories(minimal_config) == list(BASE_DIRECTORIES)


def test_base_layout_always_first(relational_config):
    dirs = plan_directories(relational_config)
    assert dirs[: len(BASE_DIRECTORIES)] == list(BASE_DIRECTORIES)


def test_full_relational_typescript_order(relational_config):
    assert plan_directories(relational_config)[len(BASE_DIRECTORIES):] == [
        "src/types",
        "src/models",
        "src/validators",
        "src/migrations",
        "src/seeders",
    ]


def test_document_database_has_no_migration_folders(make_config):
    dirs = plan_directories(make_config(database=Database.MONGODB))
    assert "src/models" in dirs
    assert "src/migrations" not in dirs
    assert "src/seeders" not in dirs


@pytest.mark.parametrize(
    "overrides, present, absent",
    [
        ({"language": Language.JAVASCRIPT}, [], ["src/types"]),
        ({"database": Database.NONE}, [], ["src/models"]),
        ({"validation": Validation.NONE}, [], ["src/validators"]),
        ({"database": Database.MYSQL}, ["src/migrations", "src/seeders"], []),
    ],
)
def test_optional_folders(make_config, overrides, present, absent):
    dirs = plan_directories(make_config(**overrides))
    for rel in present:
        assert rel in dirs
    for rel in absent:
        assert rel not in dirs


def test_no_duplicates(relational_config):
    dirs = plan_directories(relational_config)
    assert len(dirs) == len(set(dirs))
