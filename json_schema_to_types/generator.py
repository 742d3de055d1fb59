"""
Generation driver.

Loads the schemas of a run, wires the backend, resolver and default value
synthesizer together and renders a jinja2 template over the sorted model.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, TextIO

import jinja2

from . import __version__
from .backends import BackendProfile, create_backend
from .config import GeneratorConfig
from .default_values import DefaultValueSynthesizer
from .errors import CodegenError
from .schema_registry import SchemaRegistry
from .type_resolver import TypeResolver
from .utils import capitalize, class_name, enum_constant, underscore

TEMPLATES_DIRECTORY = Path(__file__).parent.resolve() / "templates"

logger = logging.getLogger(__name__)


class CodeGenerator:
    """Generates type-model source text for one backend from a set of schema files."""

    def __init__(self, backend: str | BackendProfile, paths: list[str], config: GeneratorConfig | None = None, command_line: str = ""):
        """
        Load all schemas and prepare the rendering environment.

        Args:
            backend: Backend name or an already built backend
            paths: Schema file paths
            config: Generation config
            command_line: Command line shown in the generation comment
        """
        self.config = config or GeneratorConfig()
        self.backend = create_backend(backend, self.config) if isinstance(backend, str) else backend
        self.command_line = command_line

        self.registry = SchemaRegistry(self.backend).load_all(paths)
        self.resolver = TypeResolver(self.backend, self.registry)
        self.defaults = DefaultValueSynthesizer(self.backend, self.resolver)

        templates_directory = Path(self.config.templates_directory) if self.config.templates_directory else TEMPLATES_DIRECTORY
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(templates_directory)),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.jinja_env.filters["capitalize_first"] = capitalize
        self.jinja_env.filters["underscore"] = underscore
        self.jinja_env.filters["enum_constant"] = enum_constant

    @property
    def schemas(self):
        return self.registry.schemas

    @property
    def enums(self):
        return self.registry.sorted_enums

    def check(self) -> None:
        """Resolve the type of every property so unsupported schemas fail before rendering."""
        for schema in self.schemas:
            for property_name, property in schema.properties.items():
                try:
                    self.resolver.resolve(schema.name, property_name, property)
                except CodegenError as e:
                    raise e.with_path(schema.key)

    def generation_comment(self) -> str:
        if not self.config.add_generation_comment:
            return ""
        comment = f"Generated by json_schema_to_types {__version__}. DO NOT EDIT."
        if self.command_line:
            comment = f"{comment}\nCommand: {self.command_line}"
        return comment

    def template_context(self) -> dict[str, Any]:
        context: dict[str, Any] = {
            "backend": self.backend,
            "schemas": self.schemas,
            "enums": self.enums,
            "generation_comment": self.generation_comment(),
            "type_for": self.resolver.resolve,
            "default_value": self.defaults.default_value,
            "is_native_type": self.resolver.is_native_type,
            "array_type_for": self.backend.array_type_for,
            "format_description": self.backend.format_description,
            "is_nullable": self.backend.is_nullable,
            "class_name": class_name,
            "enum_constant": enum_constant,
            "capitalize": capitalize,
            "underscore": underscore,
        }
        context.update(self.backend.template_helpers(self.resolver, self.defaults))
        return context

    def render(self, template_name: str) -> str:
        """Render a template over the sorted schemas and enums."""
        self.check()
        template = self.jinja_env.get_template(template_name)
        logger.debug("Rendering %s with backend %s", template_name, self.backend.NAME)
        return template.render(self.template_context())

    def generate(self, template_name: str, stream: TextIO | None = None) -> None:
        """Render a template and write the text to a stream (stdout by default)."""
        output = self.render(template_name)
        (stream or sys.stdout).write(output)
