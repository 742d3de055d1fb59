"""
Errors raised while loading schemas and resolving types.

Every error is fatal for a run; the CLI turns them into a non-zero exit code.
Errors carry the schema path once it is known, so a diagnostic is
self-sufficient without a traceback.
"""

from __future__ import annotations

import json
from typing import Any


class CodegenError(Exception):
    """Base class for all generation errors."""

    # Schema file (or "file/definition" key) the error was raised for
    path: str | None = None

    def with_path(self, path: str) -> CodegenError:
        """Attach the schema path unless one is already known."""
        if self.path is None:
            self.path = path
        return self

    def __str__(self) -> str:
        message = super().__str__()
        if self.path is None:
            return message
        return f"{message}\npath: {self.path}"


class SchemaParseError(CodegenError):
    """A schema file could not be read or is not a supported JSON object."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(reason)


class UnsupportedSchemaShapeError(CodegenError):
    """A property has a shape no type or default value can be built for."""

    def __init__(self, parent_type: str, property_name: str | None, reason: str = "did not define 'type' or '$ref'"):
        self.parent_type = parent_type
        self.property_name = property_name
        self.reason = reason
        super().__init__(f"Property {parent_type}#{property_name} {reason}")


class UnknownScalarTypeMappingError(CodegenError):
    """The active backend has no mapping for a scalar JSON-Schema type."""

    def __init__(self, type_name: str, property: dict[str, Any], parent_type: str | None = None, property_name: str | None = None):
        self.type_name = type_name
        self.property = property
        self.parent_type = parent_type
        self.property_name = property_name
        location = f" (property {parent_type}#{property_name})" if parent_type is not None else ""
        super().__init__(f"No type mapping for JSONSchema type {type_name}{location}. Schema:\n{json.dumps(property, indent=2)}")


class UnknownBackendError(CodegenError):
    """No backend is registered under the requested name."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(f"Backend not supported: {name} (available: {', '.join(available)})")
