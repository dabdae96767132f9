"""Setup logging configuration.

Relative log file paths resolve against the current working directory, the
same way the storage paths in config.yaml do.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

DEFAULT_LOG_FILE = "logs/schema2script.log"

FORMATS = {
    "detailed": "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
    "simple": "%(levelname)s | %(name)s | %(message)s",
}


def resolve_log_path(log_file: Optional[Union[str, Path]] = None) -> Path:
    """Absolute location of ``log_file`` (default ``logs/schema2script.log``)."""
    log_path = Path(log_file or DEFAULT_LOG_FILE)
    if not log_path.is_absolute():
        log_path = Path.cwd() / log_path
    return log_path


def clear_log_file(log_file: Optional[Union[str, Path]] = None) -> None:
    """Delete the log file if it exists; a locked file is kept and appended to."""
    log_path = resolve_log_path(log_file)
    try:
        log_path.unlink()
    except FileNotFoundError:
        pass
    except PermissionError:
        logging.getLogger(__name__).warning(
            f"Cannot clear log file {log_path} - file is locked. Continuing without clearing."
        )


def setup_logging(
    level: str = "INFO",
    format_type: str = "detailed",
    log_to_file: bool = False,
    log_file: Optional[Union[str, Path]] = None,
    clear_existing: bool = False,
) -> None:
    """
    Configure the root logger: stdout always, plus a UTF-8 file when asked.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: "simple" or "detailed"
        log_to_file: Whether to log to file
        log_file: Log file path; relative paths resolve against the working directory
        clear_existing: Whether to clear the log file before setting up logging
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(
        fmt=FORMATS.get(format_type, FORMATS["simple"]),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_to_file:
        if clear_existing:
            clear_log_file(log_file)
        log_path = resolve_log_path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (pass ``__name__``)."""
    return logging.getLogger(name)
