"""Dialect name -> SQL generator."""

from typing import Callable, Dict, Optional

from schema2script.generators import OracleGenerator, SchemaGenerator, SqlGenerator
from schema2script.utils.error_handling import ErrorContext, UnsupportedFormatError
from schema2script.utils.logging import get_logger

logger = get_logger(__name__)

GENERATORS: Dict[str, Callable[[], SchemaGenerator]] = {
    "mysql": SqlGenerator,
    "oracle": OracleGenerator,
}


def get_generator(format_name: Optional[str]) -> SchemaGenerator:
    """
    Resolve a generator for a case-insensitive dialect name.

    Raises:
        UnsupportedFormatError: If format_name is None or not registered
    """
    context = ErrorContext(operation="get_generator", format_name=format_name)
    if format_name is None:
        raise UnsupportedFormatError("Format cannot be null.", context=context)

    generator_cls = GENERATORS.get(format_name.lower())
    if generator_cls is None:
        raise UnsupportedFormatError(f"Unsupported format: {format_name}", context=context)

    logger.debug(f"Returning {generator_cls.__name__} for format {format_name}")
    return generator_cls()
