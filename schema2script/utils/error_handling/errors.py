"""Error kinds raised by the schema pipeline."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ErrorContext:
    """Context information for error handling."""
    operation: str
    table_name: Optional[str] = None
    column_name: Optional[str] = None
    related_table: Optional[str] = None
    format_name: Optional[str] = None
    additional_context: Dict[str, Any] = field(default_factory=dict)


@dataclass(eq=False)
class SchemaParseError(Exception):
    """Parsing or generation failure.

    Raised for malformed schema documents, unsupported format selectors and
    tables that cannot be rendered (blank name, no columns).
    """
    message: str
    context: Optional[ErrorContext] = None
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.cause is not None:
            self.__cause__ = self.cause

    def __str__(self) -> str:
        if self.context is not None:
            return f"[{self.context.operation}] {self.message}"
        return self.message


class UnsupportedFormatError(SchemaParseError):
    """No parser or generator is registered for the requested format."""


class InvalidArgumentError(ValueError):
    """A required argument was missing (e.g. adding a ``None`` table)."""
