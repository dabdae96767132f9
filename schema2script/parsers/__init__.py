"""Schema parsers, one per input format."""

from .base import SchemaParser
from .json_parser import JsonParser
from .xml_parser import XMLParser

__all__ = ["SchemaParser", "JsonParser", "XMLParser"]
