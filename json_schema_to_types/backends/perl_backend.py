"""
Perl backend.

Perl has no enum types: enum values are emitted as package constants named
after the property, so the enum type name is empty.
"""

from __future__ import annotations

from typing import Any

from ..utils import enum_constant
from .base import BackendProfile


class PerlBackend(BackendProfile):
    NAME = "perl"

    TYPE_MAP = {
        "integer": "number",
        "string": "string",
        "boolean": "boolean",
    }

    # An empty string evaluates to false
    FALSE_LITERAL = "''"

    def array_type_for(self, type_name: str) -> str:
        return f"[]{type_name}"

    def ref_type_for(self, class_name: str) -> str:
        return f"{self.config.perl_namespace}::{class_name}"

    def enum_type_for(self, enum_name: str) -> str:
        return ""

    def default_enum(self, enum_type_name: str, property_name: str, value: Any) -> str:
        return f"{property_name.upper()}_{enum_constant(value)}"

    def default_instance(self, type_name: str) -> str:
        return f"{type_name}->new()"
