"""TypeScript backend."""

from __future__ import annotations

from .base import BackendProfile
from .java_backend import doc_comment_body


class TypeScriptBackend(BackendProfile):
    NAME = "typescript"

    TYPE_MAP = {
        "integer": "number",
        "string": "string",
        "boolean": "boolean",
    }

    def array_type_for(self, type_name: str) -> str:
        return f"readonly {type_name}[]"

    def format_description(self, raw_description: str | None, indent_string: str | None = None) -> str:
        return doc_comment_body(raw_description, f"\n{self._indent(indent_string)}")
