"""Ruby backend: arrays are untyped and descriptions become '#' comments."""

from __future__ import annotations

from typing import Any

from ..utils import enum_constant
from .base import BackendProfile


class RubyBackend(BackendProfile):
    NAME = "ruby"

    TYPE_MAP = {
        "integer": "number",
        "string": "string",
        "boolean": "boolean",
    }

    DESCRIPTION_INDENT = "    "

    def array_type_for(self, type_name: str) -> str:
        return "[]"

    def default_enum(self, enum_type_name: str, property_name: str, value: Any) -> str:
        return f"{enum_type_name}::{enum_constant(value)}"

    def default_instance(self, type_name: str) -> str:
        return f"{type_name}.new"

    def format_description(self, raw_description: str | None, indent_string: str | None = None) -> str:
        if raw_description is None:
            return ""
        return f"\n{self._indent(indent_string)}".join(f"# {line}" for line in raw_description.split("\n"))
