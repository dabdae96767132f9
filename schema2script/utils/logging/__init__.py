"""Logging utilities for schema2script."""

from .setup import setup_logging, get_logger, clear_log_file, resolve_log_path

__all__ = ["setup_logging", "get_logger", "clear_log_file", "resolve_log_path"]
