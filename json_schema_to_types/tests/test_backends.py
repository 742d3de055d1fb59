"""Backend selection, description formatting and the PHP constructor helpers."""

from __future__ import annotations

from unittest import TestCase

import pytest
from conftest import build

from json_schema_to_types.backends import BACKENDS, GoBackend, PhpBackend, create_backend
from json_schema_to_types.config import GeneratorConfig
from json_schema_to_types.errors import UnknownBackendError
from json_schema_to_types.schema_registry import Schema

DESCRIPTION = "Attaches a document.\n  *  \nThe body is encoded.  "


class TestCreateBackend(TestCase):
    def test_all_backends_registered(self):
        self.assertEqual(sorted(BACKENDS), ["go", "java", "markdown", "perl", "php", "ruby", "typescript"])

    def test_lookup_is_case_insensitive(self):
        self.assertIsInstance(create_backend("Go"), GoBackend)
        self.assertIsInstance(create_backend("PHP"), PhpBackend)

    def test_unknown_backend(self):
        with self.assertRaises(UnknownBackendError) as cm:
            create_backend("cobol")
        self.assertIn("cobol", str(cm.exception))
        self.assertIn("typescript", str(cm.exception))

    def test_config_reaches_backend(self):
        config = GeneratorConfig(perl_namespace="Cucumber::Messages")
        backend = create_backend("perl", config)
        self.assertEqual(backend.ref_type_for("Envelope"), "Cucumber::Messages::Envelope")


class TestFormatDescription(TestCase):
    def test_none_is_empty(self):
        for name in BACKENDS:
            self.assertEqual(create_backend(name).format_description(None), "")

    def test_java_drops_lone_star_lines(self):
        formatted = create_backend("java").format_description(DESCRIPTION, "    ")
        self.assertEqual(formatted, " * Attaches a document.\n     * The body is encoded.")

    def test_typescript_drops_lone_star_lines(self):
        formatted = create_backend("typescript").format_description(DESCRIPTION)
        self.assertEqual(formatted, " * Attaches a document.\n * The body is encoded.")

    def test_php_uses_default_indent(self):
        formatted = create_backend("php").format_description("First\nSecond")
        self.assertEqual(formatted, " * First\n         * Second")

    def test_ruby_comments_every_line(self):
        formatted = create_backend("ruby").format_description("First\nSecond")
        self.assertEqual(formatted, "# First\n    # Second")

    def test_plain_backends_keep_lines(self):
        formatted = create_backend("perl").format_description("First  \nSecond")
        self.assertEqual(formatted, "First\nSecond")

    def test_indent_override_from_config(self):
        config = GeneratorConfig(description_indent={"ruby": "  "})
        formatted = create_backend("ruby", config).format_description("First\nSecond")
        self.assertEqual(formatted, "# First\n  # Second")


class TestPhpNullability(TestCase):
    def test_nullable_when_not_required(self):
        backend = create_backend("php")
        schema = Schema(key="/s/Source.json", required=("uri",))
        self.assertFalse(backend.is_nullable("uri", schema))
        self.assertTrue(backend.is_nullable("lines", schema))

    def test_other_backends_never_nullable(self):
        schema = Schema(key="/s/Source.json")
        for name in BACKENDS:
            if name != "php":
                self.assertFalse(create_backend(name).is_nullable("lines", schema))


SOURCE = Schema(
    key="/s/Source.json",
    properties={
        "uri": {"type": "string"},
        "mediaType": {"type": "string", "enum": ["text/plain"]},
        "lines": {"type": "array", "items": {"type": "integer"}},
        "location": {"$ref": "./Location.json"},
        "ranges": {"type": "array", "items": {"$ref": "./Range.json"}},
    },
    required=("uri", "mediaType", "ranges"),
)


@pytest.mark.parametrize(
    "property_name,expected",
    [
        ("uri", "(string) $arr['uri']"),
        ("mediaType", "Source\\MediaType::from((string) $arr['mediaType'])"),
        ("lines", "isset($arr['lines']) ? array_values(array_map(fn (mixed $member) => (int) $member, $arr['lines'])) : null"),
        ("location", "isset($arr['location']) ? Location::fromArray($arr['location']) : null"),
        ("ranges", "array_values(array_map(fn (array $member) => Range::fromArray($member), $arr['ranges']))"),
    ],
)
def test_php_constructor_for(property_name, expected):
    _, resolver, _ = build("php")
    backend = resolver.backend
    constructor = backend.constructor_for(resolver, "Source", SOURCE.properties[property_name], property_name, SOURCE, "arr")
    assert constructor == expected


def test_php_template_helpers_are_bound_to_resolver():
    _, resolver, defaults = build("php")
    helpers = resolver.backend.template_helpers(resolver, defaults)

    assert helpers["is_scalar"]({"type": "string"})
    assert not helpers["is_scalar"]({"type": "array", "items": {"type": "string"}})
    assert helpers["scalar_type_for"]({"type": "integer"}) == "int"
    assert helpers["array_contents_type"]("Source", "ranges", SOURCE.properties["ranges"]) == "Range"
    assert helpers["enum_namespace"]("Source\\MediaType") == "Source"
    assert helpers["enum_short_name"]("Source\\MediaType") == "MediaType"


def test_php_enum_in_array_items_uses_property_name():
    _, resolver, _ = build("php")
    property = {"type": "array", "items": {"type": "string", "enum": ["a"]}}
    schema = Schema(key="/s/Tag.json", properties={"kinds": property}, required=("kinds",))
    constructor = resolver.backend.constructor_for(resolver, "Tag", property, "kinds", schema, "arr")
    assert constructor == "array_values(array_map(fn (mixed $member) => Tag\\Kinds::from((string) $member), $arr['kinds']))"
