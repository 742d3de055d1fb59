"""
Backends: one profile per target language.

The set is closed; a run selects exactly one backend by name.
"""

from __future__ import annotations

from ..config import GeneratorConfig
from ..errors import UnknownBackendError
from .base import BackendProfile
from .go_backend import GoBackend
from .java_backend import JavaBackend
from .markdown_backend import MarkdownBackend
from .perl_backend import PerlBackend
from .php_backend import PhpBackend
from .ruby_backend import RubyBackend
from .typescript_backend import TypeScriptBackend

BACKENDS: dict[str, type[BackendProfile]] = {
    backend.NAME: backend
    for backend in (
        GoBackend,
        JavaBackend,
        MarkdownBackend,
        PerlBackend,
        PhpBackend,
        RubyBackend,
        TypeScriptBackend,
    )
}


def backend_names() -> list[str]:
    return sorted(BACKENDS)


def create_backend(name: str, config: GeneratorConfig | None = None) -> BackendProfile:
    """
    Instantiate the backend registered under a name (case-insensitive).

    Raises:
        UnknownBackendError: If no backend has this name
    """
    backend_class = BACKENDS.get(name.lower())
    if backend_class is None:
        raise UnknownBackendError(name, backend_names())
    return backend_class(config)


__all__ = [
    "BACKENDS",
    "BackendProfile",
    "GoBackend",
    "JavaBackend",
    "MarkdownBackend",
    "PerlBackend",
    "PhpBackend",
    "RubyBackend",
    "TypeScriptBackend",
    "backend_names",
    "create_backend",
]
