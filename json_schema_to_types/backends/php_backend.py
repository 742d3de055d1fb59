"""
PHP backend.

The only nullability-aware backend: a property missing from the schema's
'required' list is nullable, defaults to null and is only hydrated when
present in the source array.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Any, Callable

from ..utils import capitalize, class_name, enum_constant
from .base import BackendProfile
from .java_backend import doc_comment_body

if TYPE_CHECKING:
    from ..default_values import DefaultValueSynthesizer
    from ..schema_registry import Schema
    from ..type_resolver import TypeResolver


class PhpBackend(BackendProfile):
    NAME = "php"

    TYPE_MAP = {
        "string": "string",
        "integer": "int",
        "boolean": "bool",
    }

    DESCRIPTION_INDENT = "        "

    def array_type_for(self, type_name: str) -> str:
        return "array"

    def enum_name_for(self, parent_type_name: str, property_name: str) -> str:
        return f"{class_name(parent_type_name)}\\{capitalize(property_name)}"

    def default_enum(self, enum_type_name: str, property_name: str, value: Any) -> str:
        return f"{enum_type_name}::{enum_constant(value)}"

    def is_nullable(self, property_name: str, schema: Schema | None) -> bool:
        required = schema.required if schema is not None else ()
        return property_name not in required

    def format_description(self, raw_description: str | None, indent_string: str | None = None) -> str:
        return doc_comment_body(raw_description, f"\n{self._indent(indent_string)}")

    def is_scalar(self, property: dict[str, Any]) -> bool:
        return "type" in property and property["type"] in self.TYPE_MAP

    def scalar_type_for(self, resolver: TypeResolver, property: dict[str, Any]) -> str:
        return resolver.scalar_type(property)

    def array_contents_type(self, resolver: TypeResolver, parent_type: str, property_name: str, property: dict[str, Any]) -> str:
        return resolver.resolve(parent_type, property_name, property["items"])

    def constructor_for(
        self,
        resolver: TypeResolver,
        parent_type: str,
        property: dict[str, Any],
        property_name: str,
        schema: Schema,
        arr_name: str,
    ) -> str:
        """
        Build the expression hydrating a property from an associative array.

        Args:
            resolver: Type resolver of the run
            parent_type: Type name of the owning schema
            property: Property schema
            property_name: Property name (key in the source array)
            schema: Owning schema
            arr_name: Name of the PHP source array variable

        Returns:
            A PHP expression, wrapped in an isset() check for nullable properties
        """
        constructor = self.non_nullable_constructor_for(resolver, parent_type, property, property_name, schema, arr_name)
        if self.is_nullable(property_name, schema):
            return f"isset(${arr_name}['{property_name}']) ? {constructor} : null"
        return constructor

    def non_nullable_constructor_for(
        self,
        resolver: TypeResolver,
        parent_type: str,
        property: dict[str, Any],
        property_name: str | None,
        schema: Schema,
        arr_name: str,
        enum_property_name: str | None = None,
    ) -> str:
        # Array members are read from the closure variable, not from a key
        source = arr_name if property_name is None else f"{arr_name}['{property_name}']"
        enum_property_name = enum_property_name or property_name

        if self.is_scalar(property):
            scalar_type = self.scalar_type_for(resolver, property)
            if property.get("enum"):
                enum_name = self.enum_name_for(parent_type, enum_property_name)
                return f"{enum_name}::from(({scalar_type}) ${source})"
            return f"({scalar_type}) ${source}"

        if property.get("type") == "array":
            items = property["items"]
            constructor = self.non_nullable_constructor_for(resolver, parent_type, items, None, schema, "member", enum_property_name)
            member_type = "mixed" if items.get("type") else "array"
            return f"array_values(array_map(fn ({member_type} $member) => {constructor}, ${source}))"

        type_name = resolver.resolve(parent_type, enum_property_name, property)
        return f"{type_name}::fromArray(${source})"

    @staticmethod
    def enum_namespace(enum_name: str) -> str:
        return enum_name.rpartition("\\")[0]

    @staticmethod
    def enum_short_name(enum_name: str) -> str:
        return enum_name.rpartition("\\")[2]

    def template_helpers(self, resolver: TypeResolver, defaults: DefaultValueSynthesizer) -> dict[str, Callable[..., Any]]:
        return {
            "enum_namespace": self.enum_namespace,
            "enum_short_name": self.enum_short_name,
            "is_scalar": self.is_scalar,
            "scalar_type_for": partial(self.scalar_type_for, resolver),
            "array_contents_type": partial(self.array_contents_type, resolver),
            "constructor_for": partial(self.constructor_for, resolver),
            "non_nullable_constructor_for": partial(self.non_nullable_constructor_for, resolver),
        }
