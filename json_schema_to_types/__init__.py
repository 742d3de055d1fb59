"""JSON Schema to Types

Generates per-language type models (classes, enums, default constructors)
from a directory of JSON Schema message definitions, so that one wire
format stays consistent across many language bindings.
"""

__version__ = "1.0.0"

from .backends import BACKENDS, BackendProfile, create_backend
from .config import GeneratorConfig, load_config
from .default_values import DefaultValueSynthesizer
from .enum_collector import EnumCollector, EnumType
from .errors import (
    CodegenError,
    SchemaParseError,
    UnknownBackendError,
    UnknownScalarTypeMappingError,
    UnsupportedSchemaShapeError,
)
from .generator import CodeGenerator
from .schema_registry import Schema, SchemaRegistry, discover_schema_paths
from .type_resolver import TypeResolver

__all__ = [
    "BACKENDS",
    "BackendProfile",
    "CodeGenerator",
    "CodegenError",
    "DefaultValueSynthesizer",
    "EnumCollector",
    "EnumType",
    "GeneratorConfig",
    "Schema",
    "SchemaParseError",
    "SchemaRegistry",
    "TypeResolver",
    "UnknownBackendError",
    "UnknownScalarTypeMappingError",
    "UnsupportedSchemaShapeError",
    "create_backend",
    "discover_schema_paths",
    "load_config",
]
