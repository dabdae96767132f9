"""Unit tests for parser and generator lookup."""

import pytest

from schema2script.factory.generator_factory import get_generator
from schema2script.factory.parser_factory import format_from_path, get_parser
from schema2script.generators import OracleGenerator, SqlGenerator
from schema2script.parsers import JsonParser, XMLParser
from schema2script.utils.error_handling import SchemaParseError, UnsupportedFormatError


class TestGetGenerator:

    @pytest.mark.parametrize("name, expected", [
        ("mysql", SqlGenerator),
        ("MySQL", SqlGenerator),
        ("oracle", OracleGenerator),
        ("ORACLE", OracleGenerator),
    ])
    def test_known_dialects(self, name, expected):
        assert isinstance(get_generator(name), expected)

    def test_unknown_dialect(self):
        with pytest.raises(UnsupportedFormatError, match="Unsupported format: postgres"):
            get_generator("postgres")

    def test_null_dialect(self):
        with pytest.raises(UnsupportedFormatError, match="Format cannot be null."):
            get_generator(None)

    def test_unsupported_format_is_a_parse_error(self):
        with pytest.raises(SchemaParseError):
            get_generator("")


class TestGetParser:

    @pytest.mark.parametrize("name, expected", [
        ("json", JsonParser),
        ("JSON", JsonParser),
        ("xml", XMLParser),
        ("Xml", XMLParser),
    ])
    def test_known_formats(self, name, expected):
        assert isinstance(get_parser(name), expected)

    def test_unknown_format(self):
        with pytest.raises(UnsupportedFormatError, match="Unsupported format: yaml"):
            get_parser("yaml")

    def test_null_format(self):
        with pytest.raises(UnsupportedFormatError, match="Format cannot be null."):
            get_parser(None)

    def test_error_context_carries_format(self):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            get_parser("csv")

        assert exc_info.value.context.operation == "get_parser"
        assert exc_info.value.context.format_name == "csv"


class TestFormatFromPath:

    @pytest.mark.parametrize("path, expected", [
        ("schema.json", "json"),
        ("dir/schema.XML", "XML"),
        ("archive.tar.json", "json"),
        ("README", ""),
    ])
    def test_extension(self, path, expected):
        assert format_from_path(path) == expected
