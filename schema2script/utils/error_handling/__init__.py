"""Standardized error handling utilities.

Provides the error kinds raised by parsers, generators and the schema
container, plus consistent logging and error response creation.
"""

from .errors import (
    ErrorContext,
    SchemaParseError,
    UnsupportedFormatError,
    InvalidArgumentError,
)
from .handlers import (
    handle_error,
    log_error_with_context,
    create_error_response,
)

__all__ = [
    "ErrorContext",
    "SchemaParseError",
    "UnsupportedFormatError",
    "InvalidArgumentError",
    "handle_error",
    "log_error_with_context",
    "create_error_response",
]
