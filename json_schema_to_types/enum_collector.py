"""
Enum collection.

Every enum-valued property gets a type name derived from its owning type and
its property name. The collector keeps one entry per name for the whole run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .utils import capitalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnumType:
    """A named enum and its literal values, in source order."""

    name: str
    values: tuple[Any, ...]


class EnumCollector:
    """Name-keyed set of enums, filled while schemas load and frozen afterwards."""

    def __init__(self):
        self._enums: dict[str, EnumType] = {}
        self._frozen = False

    @staticmethod
    def derive_name(parent_type: str, property_name: str) -> str:
        return f"{parent_type}{capitalize(property_name)}"

    def register(self, name: str, values: list[Any]) -> EnumType:
        """
        Register an enum under a name.

        Registering a name twice is a no-op: the values of the first
        registration are kept.

        Args:
            name: Derived enum type name
            values: Enum literal values

        Returns:
            The surviving EnumType for this name
        """
        if self._frozen:
            raise RuntimeError(f"Cannot register enum {name}: the enum set is frozen")

        existing = self._enums.get(name)
        if existing is not None:
            if list(existing.values) != list(values):
                logger.debug("Enum %s registered again with different values %r, keeping %r", name, values, existing.values)
            return existing

        # Duplicate literals are dropped, the first occurrence keeps its position
        unique_values = tuple(dict.fromkeys(values))
        enum_type = EnumType(name=name, values=unique_values)
        self._enums[name] = enum_type
        logger.debug("Registered enum %s with %d values", name, len(unique_values))
        return enum_type

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def enums(self) -> list[EnumType]:
        """All enums, sorted by name."""
        return sorted(self._enums.values(), key=lambda e: e.name)

    def get(self, name: str) -> EnumType | None:
        return self._enums.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._enums

    def __len__(self) -> int:
        return len(self._enums)
