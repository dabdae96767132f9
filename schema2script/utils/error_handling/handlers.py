"""Standardized error handling for schema operations.

Provides consistent error logging and error response creation.
"""

from typing import Dict, Any, Optional
from datetime import datetime
import traceback

from schema2script.utils.logging import get_logger
from .errors import ErrorContext, SchemaParseError

logger = get_logger(__name__)


def log_error_with_context(
    error: BaseException,
    context: ErrorContext,
    level: str = "error"
) -> None:
    """
    Log error with full context information.

    Args:
        error: The exception that occurred
        context: Error context information
        level: Log level ("error", "warning", "critical")
    """
    log_msg_parts = [f"Error in {context.operation}"]

    if context.format_name:
        log_msg_parts.append(f"Format: {context.format_name}")
    if context.table_name:
        log_msg_parts.append(f"Table: {context.table_name}")
    if context.column_name:
        log_msg_parts.append(f"Column: {context.column_name}")
    if context.related_table:
        log_msg_parts.append(f"Related table: {context.related_table}")

    log_msg = " | ".join(log_msg_parts)

    if level == "critical":
        logger.critical(f"{log_msg}: {error}", exc_info=error)
    elif level == "warning":
        logger.warning(f"{log_msg}: {error}", exc_info=error)
    else:
        logger.error(f"{log_msg}: {error}", exc_info=error)

    if context.additional_context:
        logger.debug(f"Additional context: {context.additional_context}")


def create_error_response(
    error: BaseException,
    context: ErrorContext,
    include_traceback: bool = False,
) -> Dict[str, Any]:
    """
    Create standardized error response dictionary.

    Args:
        error: The exception that occurred
        context: Error context information
        include_traceback: If True, attach the (truncated) traceback

    Returns:
        Dictionary with error information
    """
    message = error.message if isinstance(error, SchemaParseError) else str(error)
    error_response = {
        "success": False,
        "error": {
            "type": type(error).__name__,
            "message": message,
            "operation": context.operation,
            "timestamp": datetime.now().isoformat(),
        }
    }

    if context.format_name:
        error_response["error"]["format_name"] = context.format_name
    if context.table_name:
        error_response["error"]["table_name"] = context.table_name
    if context.column_name:
        error_response["error"]["column_name"] = context.column_name
    if context.related_table:
        error_response["error"]["related_table"] = context.related_table

    if include_traceback and error.__traceback__ is not None:
        tb_str = "".join(traceback.format_tb(error.__traceback__))
        error_response["error"]["traceback"] = tb_str[-500:]

    if context.additional_context:
        error_response["error"]["additional_context"] = context.additional_context

    return error_response


def handle_error(
    error: BaseException,
    context: ErrorContext,
    log_level: str = "error",
    reraise: bool = False
) -> Optional[Dict[str, Any]]:
    """
    Handle an error with standardized logging and response creation.

    Args:
        error: The exception that occurred
        context: Error context information
        log_level: Log level ("error", "warning", "critical")
        reraise: If True, re-raise after logging; errors that are not already
            a SchemaParseError are wrapped in one

    Returns:
        Error response dictionary

    Raises:
        SchemaParseError: If reraise=True
    """
    log_error_with_context(error, context, level=log_level)

    error_response = create_error_response(error, context)

    if reraise:
        if isinstance(error, SchemaParseError):
            raise error
        raise SchemaParseError(message=str(error), context=context, cause=error) from error

    return error_response
