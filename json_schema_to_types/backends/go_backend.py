"""Go backend: references are pointers, arrays are slices."""

from __future__ import annotations

from .base import BackendProfile


class GoBackend(BackendProfile):
    NAME = "go"

    TYPE_MAP = {
        "integer": "int64",
        "string": "string",
        "boolean": "bool",
    }

    def ref_type_for(self, class_name: str) -> str:
        return f"*{class_name}"

    def array_type_for(self, type_name: str) -> str:
        return f"[]{type_name}"
