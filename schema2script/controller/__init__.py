"""Editing session controller and view collaborators."""

from .schema_controller import (
    SchemaController,
    SchemaView,
    ConsoleView,
    summarize_table,
    PARSE_FAILED_MESSAGE,
    NO_FILE_MESSAGE,
    NO_SCRIPT_MESSAGE,
)

__all__ = [
    "SchemaController",
    "SchemaView",
    "ConsoleView",
    "summarize_table",
    "PARSE_FAILED_MESSAGE",
    "NO_FILE_MESSAGE",
    "NO_SCRIPT_MESSAGE",
]
