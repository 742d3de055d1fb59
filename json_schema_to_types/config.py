"""
Configuration for a generation run.

A config is built once at startup (from defaults, a JSON file or CLI flags)
and handed to the backend and the generator; nothing mutates it afterwards.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field


@dataclass
class GeneratorConfig:
    """Configuration options for code generation."""

    # Directory holding the templates (empty = the packaged templates directory)
    templates_directory: str = ""

    # Add generation comment at top of rendered output
    add_generation_comment: bool = True

    # Package namespace prefixed to referenced types by the Perl backend
    perl_namespace: str = "Messages"

    # Per-backend override of the indentation used between description lines
    description_indent: dict[str, str] = field(default_factory=dict)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary, ignoring unknown keys."""
        config = GeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "templates_directory": self.templates_directory,
            "add_generation_comment": self.add_generation_comment,
            "perl_namespace": self.perl_namespace,
            "description_indent": dict(self.description_indent),
        }


def load_config(path: str) -> GeneratorConfig:
    """Load a config from a JSON file."""
    with open(path) as f:
        return GeneratorConfig.from_dict(json.load(f))
