"""Input format name -> schema parser."""

from pathlib import Path
from typing import Callable, Dict, Optional, Union

from schema2script.parsers import JsonParser, SchemaParser, XMLParser
from schema2script.utils.error_handling import ErrorContext, UnsupportedFormatError
from schema2script.utils.logging import get_logger

logger = get_logger(__name__)

PARSERS: Dict[str, Callable[[], SchemaParser]] = {
    "json": JsonParser,
    "xml": XMLParser,
}


def get_parser(format_name: Optional[str]) -> SchemaParser:
    """
    Resolve a parser for a case-insensitive format name.

    Raises:
        UnsupportedFormatError: If format_name is None or not registered
    """
    logger.info(f"Requesting parser for format: {format_name}")
    context = ErrorContext(operation="get_parser", format_name=format_name)
    if format_name is None:
        logger.error("Format cannot be null.")
        raise UnsupportedFormatError("Format cannot be null.", context=context)

    parser_cls = PARSERS.get(format_name.lower())
    if parser_cls is None:
        logger.error(f"Unsupported format: {format_name}")
        raise UnsupportedFormatError(f"Unsupported format: {format_name}", context=context)

    logger.debug(f"Returning {parser_cls.__name__}.")
    return parser_cls()


def format_from_path(path: Union[str, Path]) -> str:
    """File extension without the dot, or "" when there is none."""
    return Path(path).suffix[1:]
