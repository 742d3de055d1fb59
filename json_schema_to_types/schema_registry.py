"""
Schema registry.

Loads schema files, registers nested definitions as first-class schemas and
collects the enums of every property. The registry is filled once and then
frozen; everything downstream only reads from it.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .backends.base import BackendProfile
from .enum_collector import EnumCollector, EnumType
from .errors import SchemaParseError
from .utils import class_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Schema:
    """One registered message type."""

    key: str  # Absolute path, or "parentKey/definitionName" for nested definitions
    properties: dict[str, dict[str, Any]] = field(default_factory=dict)
    definitions: dict[str, dict[str, Any]] = field(default_factory=dict)
    required: tuple[str, ...] = ()
    description: str | None = None

    @property
    def name(self) -> str:
        """Type name of the schema (base name of the key without '.json')."""
        return class_name(self.key)

    def is_required(self, property_name: str) -> bool:
        return property_name in self.required


def discover_schema_paths(path: str) -> list[str]:
    """
    Expand a CLI path argument into schema file paths.

    A file is returned as is; a directory yields its immediate *.json files
    (not recursive), sorted by name.
    """
    p = Path(path)
    if p.is_file():
        return [str(p)]
    return [str(child) for child in sorted(p.glob("*.json")) if child.is_file()]


class SchemaRegistry:
    """Registry of all schemas of a run, keyed by path."""

    def __init__(self, backend: BackendProfile, enums: EnumCollector | None = None):
        """
        Initialize an empty registry.

        Args:
            backend: Backend whose enum naming rule is used for registered enums
            enums: Enum collector to fill (a new one when omitted)
        """
        self.backend = backend
        self.enums = enums if enums is not None else EnumCollector()
        self._schemas: dict[str, Schema] = {}
        self._frozen = False

    def load_all(self, paths: list[str]) -> SchemaRegistry:
        """Load every path, then freeze the registry and its enums."""
        for path in paths:
            self.load(path)
        self.freeze()
        logger.info("Loaded %d schemas and %d enums from %d files", len(self._schemas), len(self.enums), len(paths))
        return self

    def load(self, path: str) -> None:
        """Parse a schema file and register it under its absolute path."""
        key = os.path.abspath(path)
        logger.debug("Loading schema %s", path)
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SchemaParseError(path, f"Invalid JSON: {e}") from e
        except OSError as e:
            raise SchemaParseError(path, f"Cannot read schema: {e}") from e

        self.add_schema(key, raw)

    def add_schema(self, key: str, raw: Any) -> Schema:
        """
        Register a raw schema and, recursively, its definitions.

        Args:
            key: Registry key of the schema
            raw: Parsed JSON object

        Returns:
            The registered Schema
        """
        if self._frozen:
            raise RuntimeError(f"Cannot register schema {key}: the registry is frozen")
        if not isinstance(raw, dict):
            raise SchemaParseError(key, "Schema must be a JSON object")
        if key in self._schemas:
            raise SchemaParseError(key, "Schema registered twice")

        properties = raw.get("properties")
        if not isinstance(properties, dict):
            raise SchemaParseError(key, "Schema has no 'properties' object")

        schema = Schema(
            key=key,
            properties=properties,
            definitions=raw.get("definitions") or {},
            required=tuple(raw.get("required") or ()),
            description=raw.get("description"),
        )
        self._schemas[key] = schema

        for name, subschema in schema.definitions.items():
            self.add_schema(f"{key}/{name}", subschema)

        parent_type_name = schema.name
        for property_name, property in properties.items():
            self._register_enums(parent_type_name, property_name, property)

        return schema

    def _register_enums(self, parent_type_name: str, property_name: str, property: Any) -> None:
        """Register the enum of a property, looking through array items."""
        if not isinstance(property, dict):
            return
        enum = property.get("enum")
        if enum:
            name = self.backend.enum_name_for(parent_type_name, property_name)
            self.enums.register(name, enum)
        elif property.get("type") == "array":
            self._register_enums(parent_type_name, property_name, property.get("items"))

    def freeze(self) -> None:
        self._frozen = True
        self.enums.freeze()

    @property
    def schemas(self) -> list[Schema]:
        """All schemas, sorted by key."""
        return [self._schemas[key] for key in self.keys]

    @property
    def keys(self) -> list[str]:
        return sorted(self._schemas)

    @property
    def sorted_enums(self) -> list[EnumType]:
        return self.enums.enums

    def get(self, key: str) -> Schema | None:
        return self._schemas.get(key)

    def has_type(self, type_name: str) -> bool:
        """Whether a schema with this type name is registered."""
        return any(schema.name == type_name for schema in self._schemas.values())

    def __len__(self) -> int:
        return len(self._schemas)
