"""Java backend."""

from __future__ import annotations

from .base import BackendProfile


def doc_comment_body(raw_description: str | None, joiner: str) -> str:
    """Format a description as the body lines of a /** ... */ block.

    Lone '*' lines (blank continuation markers in the source) are dropped.
    """
    if raw_description is None:
        return ""
    lines = (line.strip() for line in raw_description.split("\n"))
    return joiner.join(f" * {line}".rstrip() for line in lines if line != "*")


class JavaBackend(BackendProfile):
    NAME = "java"

    TYPE_MAP = {
        "integer": "Long",
        "string": "String",
        "boolean": "Boolean",
    }

    def array_type_for(self, type_name: str) -> str:
        return f"java.util.List<{type_name}>"

    def format_description(self, raw_description: str | None, indent_string: str | None = None) -> str:
        return doc_comment_body(raw_description, f"\n{self._indent(indent_string)}")
