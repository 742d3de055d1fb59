"""
Naming helpers shared by the registry, the resolver and the templates.
"""

import os
import re

_ENUM_CONSTANT_SEPARATORS = re.compile(r"[./+]")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def capitalize(text: str) -> str:
    """Uppercase the first character only, leaving the rest untouched.

    Examples:
        "mediaType" -> "MediaType"
        "id" -> "Id"
    """
    return text[:1].upper() + text[1:]


def class_name(ref: str) -> str:
    """Return the type name for a schema key or a $ref: its base name without '.json'.

    Examples:
        "/schemas/Envelope.json" -> "Envelope"
        "/schemas/Envelope.json/Meta" -> "Meta"
        "./Source.json" -> "Source"
    """
    return os.path.basename(ref).removesuffix(".json")


def enum_constant(value) -> str:
    """Turn an enum literal into a constant identifier.

    Examples:
        "text/x.cucumber.gherkin+plain" -> "TEXT_X_CUCUMBER_GHERKIN_PLAIN"
        "x" -> "X"
    """
    return _ENUM_CONSTANT_SEPARATORS.sub("_", str(value)).upper()


def underscore(camel_cased_word: str) -> str:
    """Convert CamelCase to snake_case, keeping acronyms together.

    Examples:
        "TestCaseStarted" -> "test_case_started"
        "HTTPResponse" -> "http_response"
    """
    if not re.search(r"[A-Z-]", camel_cased_word):
        return camel_cased_word
    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", camel_cased_word)
    word = _WORD_BOUNDARY.sub(r"\1_\2", word)
    return word.replace("-", "_").lower()
