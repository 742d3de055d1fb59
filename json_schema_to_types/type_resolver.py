"""
Type resolution.

Maps a property schema to the type expression of the active backend.
"""

from __future__ import annotations

import logging
from typing import Any

from .backends.base import BackendProfile
from .errors import UnknownScalarTypeMappingError, UnsupportedSchemaShapeError
from .schema_registry import SchemaRegistry
from .utils import class_name

logger = logging.getLogger(__name__)


class TypeResolver:
    """Resolves property schemas to backend type names."""

    def __init__(self, backend: BackendProfile, registry: SchemaRegistry):
        """
        Initialize the resolver.

        Args:
            backend: Active backend profile
            registry: Frozen registry of the run
        """
        self.backend = backend
        self.registry = registry

    def resolve(self, parent_type: str, property_name: str | None, property: dict[str, Any]) -> str:
        """
        Resolve the type of a property.

        The first matching rule wins: $ref, then array, then scalar (or enum).

        Args:
            parent_type: Type name of the owning schema
            property_name: Name of the property (passed unchanged to array items)
            property: Property schema

        Returns:
            Language-specific type string (possibly empty for backends without enum types)

        Raises:
            UnknownScalarTypeMappingError: The scalar type has no mapping in the backend
            UnsupportedSchemaShapeError: The property has neither 'type' nor '$ref'
        """
        if not isinstance(property, dict):
            raise UnsupportedSchemaShapeError(parent_type, property_name, f"must be an object, got {property!r}")

        ref = property.get("$ref")
        if ref:
            return self.ref_type(ref)

        type_name = property.get("type")
        if type_name == "array":
            items = property.get("items")
            if items is None:
                raise UnsupportedSchemaShapeError(parent_type, property_name, "is an array without 'items'")
            return self.backend.array_type_for(self.resolve(parent_type, property_name, items))

        if type_name:
            scalar_type = self.scalar_type(property, parent_type, property_name)
            if property.get("enum"):
                return self.backend.enum_type_for(self.enum_name(parent_type, property_name))
            return scalar_type

        # Inline schema (not supported)
        raise UnsupportedSchemaShapeError(parent_type, property_name)

    def ref_type(self, ref: str) -> str:
        """Type for a $ref, named after the referenced file."""
        referenced = class_name(ref)
        if not self.registry.has_type(referenced):
            logger.debug("Reference %s points outside the loaded schemas", ref)
        return self.backend.ref_type_for(referenced)

    def scalar_type(self, property: dict[str, Any], parent_type: str | None = None, property_name: str | None = None) -> str:
        type_name = property.get("type")
        scalar_type = self.backend.TYPE_MAP.get(type_name)
        if scalar_type is None:
            raise UnknownScalarTypeMappingError(type_name, property, parent_type, property_name)
        return scalar_type

    def enum_name(self, parent_type: str, property_name: str | None) -> str:
        """Registered name of the enum held by a property."""
        if property_name is None:
            raise UnsupportedSchemaShapeError(parent_type, property_name, "has an enum but no property name")
        name = self.backend.enum_name_for(parent_type, property_name)
        if name not in self.registry.enums:
            logger.warning("Enum %s was not collected while loading schemas", name)
        return name

    def is_native_type(self, type_name: str) -> bool:
        """Whether a type name is one of the backend's scalar types.

        Diagnostic only; generation never depends on it.
        """
        logger.debug("NATIVE %s", type_name)
        return type_name in self.backend.TYPE_MAP.values()
