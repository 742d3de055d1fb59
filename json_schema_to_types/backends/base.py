"""
Base class for target language backends.

A backend supplies every language-specific rule used while resolving types
and synthesizing defaults: the scalar type table, the array, reference and
enum naming rules, the default literals and the description formatting.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable

from ..config import GeneratorConfig
from ..enum_collector import EnumCollector
from ..utils import enum_constant

if TYPE_CHECKING:
    from ..default_values import DefaultValueSynthesizer
    from ..schema_registry import Schema
    from ..type_resolver import TypeResolver


class BackendProfile(ABC):
    """Abstract base class for backends."""

    # Backend name used on the command line
    NAME: str = ""

    # Type mapping from schema scalar types to language types
    TYPE_MAP: dict[str, str] = {}

    # Default value literals
    EMPTY_ARRAY_LITERAL: str = "[]"
    EMPTY_STRING_LITERAL: str = "''"
    ZERO_LITERAL: str = "0"
    FALSE_LITERAL: str = "false"
    NULL_LITERAL: str = "null"

    # Joins description lines when the template does not pass an indent
    DESCRIPTION_INDENT: str = ""

    def __init__(self, config: GeneratorConfig | None = None):
        self.config = config or GeneratorConfig()

    @abstractmethod
    def array_type_for(self, type_name: str) -> str:
        """
        Wrap an element type into the language's sequence type.

        Args:
            type_name: Resolved element type

        Returns:
            Language-specific array type string
        """

    def ref_type_for(self, class_name: str) -> str:
        """Type used for a $ref to the schema named class_name."""
        return class_name

    def enum_name_for(self, parent_type_name: str, property_name: str) -> str:
        """Name under which the enum of a property is registered."""
        return EnumCollector.derive_name(parent_type_name, property_name)

    def enum_type_for(self, enum_name: str) -> str:
        """Type used for a property holding the enum named enum_name.

        An empty string means the language has no distinct enum type.
        """
        return enum_name

    def default_enum(self, enum_type_name: str, property_name: str, value: Any) -> str:
        return f"{enum_type_name}.{enum_constant(value)}"

    def default_instance(self, type_name: str) -> str:
        return f"new {type_name}()"

    def is_nullable(self, property_name: str, schema: Schema | None) -> bool:
        """Only nullability-aware backends override this."""
        return False

    def format_description(self, raw_description: str | None, indent_string: str | None = None) -> str:
        """Reflow a description into the language's comment convention."""
        if raw_description is None:
            return ""
        return f"\n{self._indent(indent_string)}".join(line.rstrip() for line in raw_description.split("\n"))

    def _indent(self, indent_string: str | None) -> str:
        if indent_string is not None:
            return indent_string
        return self.config.description_indent.get(self.NAME, self.DESCRIPTION_INDENT)

    def template_helpers(self, resolver: TypeResolver, defaults: DefaultValueSynthesizer) -> dict[str, Callable[..., Any]]:
        """Functions exposed to templates besides the generic ones."""
        return {}
