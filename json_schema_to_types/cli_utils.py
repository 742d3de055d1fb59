"""
Command line shown in the generation comment of rendered output.
"""

from __future__ import annotations

import os

PROGRAM_NAME = "json_schema_to_types"


def format_command_line(backend: str, schema_path: str, template_name: str, config: str | None = None, templates_dir: str | None = None) -> str:
    """
    Format the invocation of a run for the generation comment.

    Paths are shown by base name so the output does not depend on where the
    schemas are checked out.

    Args:
        backend: Backend name as given on the command line
        schema_path: Schema file or directory
        template_name: Template rendered by the run
        config: Config file, if any
        templates_dir: Templates directory override, if any

    Returns:
        Command line string

    Examples:
        >>> format_command_line("go", "/src/schemas/", "go.go.jinja2")
        'json_schema_to_types go schemas go.go.jinja2'
    """
    parts = [PROGRAM_NAME, backend.lower(), _display_path(schema_path), template_name]
    if config:
        parts.extend(["--config", _display_path(config)])
    if templates_dir:
        parts.extend(["--templates-dir", _display_path(templates_dir)])
    return " ".join(parts)


def _display_path(path: str) -> str:
    return os.path.basename(os.path.normpath(str(path)))
