"""Shared fixtures: the test schema corpus and per-backend registries."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from json_schema_to_types.backends import create_backend
from json_schema_to_types.default_values import DefaultValueSynthesizer
from json_schema_to_types.schema_registry import SchemaRegistry, discover_schema_paths
from json_schema_to_types.type_resolver import TypeResolver

TEST_DATA = Path(__file__).parent / "test_data"
SCHEMAS_DIR = TEST_DATA / "schemas"
INVALID_DIR = TEST_DATA / "invalid"


@pytest.fixture
def schema_paths() -> list[str]:
    return discover_schema_paths(str(SCHEMAS_DIR))


@pytest.fixture
def write_schema(tmp_path):
    """Write a schema dict as <name>.json in a temporary directory and return its path."""

    def _write(name: str, schema: dict) -> str:
        path = tmp_path / f"{name}.json"
        path.write_text(json.dumps(schema))
        return str(path)

    return _write


def build(backend_name: str, paths: list[str] | None = None):
    """Build (registry, resolver, defaults) for a backend over some schema files."""
    backend = create_backend(backend_name)
    registry = SchemaRegistry(backend).load_all(paths or [])
    resolver = TypeResolver(backend, registry)
    return registry, resolver, DefaultValueSynthesizer(backend, resolver)
