"""
Default value synthesis.

Builds the literal or expression a property is initialized with in the
generated constructors.
"""

from __future__ import annotations

import json
from typing import Any

from .backends.base import BackendProfile
from .errors import UnsupportedSchemaShapeError
from .schema_registry import Schema
from .type_resolver import TypeResolver


class DefaultValueSynthesizer:
    """Default values for properties, following the active backend's literals."""

    def __init__(self, backend: BackendProfile, resolver: TypeResolver):
        self.backend = backend
        self.resolver = resolver

    def default_value(self, parent_type: str, property_name: str, property: dict[str, Any], schema: Schema | None = None) -> str:
        """
        Default value for a property.

        Args:
            parent_type: Type name of the owning schema
            property_name: Name of the property
            property: Property schema
            schema: Owning schema, consulted by nullability-aware backends

        Returns:
            Default value expression

        Raises:
            UnsupportedSchemaShapeError: No default can be built for the property
        """
        backend = self.backend
        if backend.is_nullable(property_name, schema):
            return backend.NULL_LITERAL

        type_name = property.get("type")
        if type_name == "array" or "items" in property:
            return backend.EMPTY_ARRAY_LITERAL
        if type_name == "string":
            enum = property.get("enum")
            if enum:
                enum_type_name = self.resolver.resolve(parent_type, property_name, property)
                return backend.default_enum(enum_type_name, property_name, enum[0])
            return backend.EMPTY_STRING_LITERAL
        if type_name == "integer":
            return backend.ZERO_LITERAL
        if type_name == "boolean":
            return backend.FALSE_LITERAL
        if property.get("$ref"):
            return backend.default_instance(self.resolver.resolve(parent_type, property_name, property))

        raise UnsupportedSchemaShapeError(parent_type, property_name, f"has no default value for {json.dumps(property)}")
