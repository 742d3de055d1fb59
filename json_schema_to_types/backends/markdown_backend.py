"""
Markdown backend.

Renders documentation rather than code: references and enums become links
to the heading of the referenced type.
"""

from __future__ import annotations

from .base import BackendProfile


class MarkdownBackend(BackendProfile):
    NAME = "markdown"

    TYPE_MAP = {
        "integer": "integer",
        "string": "string",
        "boolean": "boolean",
    }

    def ref_type_for(self, class_name: str) -> str:
        return self._link(class_name)

    def enum_type_for(self, enum_name: str) -> str:
        return self._link(enum_name)

    def array_type_for(self, type_name: str) -> str:
        return f"{type_name}[]"

    @staticmethod
    def _link(name: str) -> str:
        return f"[{name}](#{name.lower()})"
