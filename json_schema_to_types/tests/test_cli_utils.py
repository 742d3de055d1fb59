#!/usr/bin/env python3

import pytest

from json_schema_to_types.cli_utils import format_command_line


class TestCliUtils:
    """Test cases for CLI utilities"""

    def test_positionals_only(self):
        """Positionals are listed in order, paths by name only"""
        assert format_command_line("go", "/work/messages/schemas", "go.go.jinja2") == "json_schema_to_types go schemas go.go.jinja2"

    def test_trailing_separator_is_ignored(self):
        assert format_command_line("go", "/work/messages/schemas/", "go.go.jinja2") == "json_schema_to_types go schemas go.go.jinja2"

    def test_backend_name_is_lower_cased(self):
        assert format_command_line("TypeScript", "Source.json", "typescript.ts.jinja2") == "json_schema_to_types typescript Source.json typescript.ts.jinja2"

    def test_options_follow_positionals(self):
        command_line = format_command_line("php", "/work/Envelope.json", "php.php.jinja2", config="/etc/codegen/php.json", templates_dir="/work/my_templates")
        assert command_line == "json_schema_to_types php Envelope.json php.php.jinja2 --config php.json --templates-dir my_templates"

    def test_unset_options_are_omitted(self):
        command_line = format_command_line("perl", "schemas", "perl.pm.jinja2", config=None, templates_dir="")
        assert command_line == "json_schema_to_types perl schemas perl.pm.jinja2"


if __name__ == "__main__":
    pytest.main([__file__])
