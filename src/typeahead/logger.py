"""Logging configuration for the typeahead project using loguru."""

import os
import sys
from loguru import logger
from typing import Optional

from typeahead.utils import get_project_root

# Store the configured log file path to ensure consistency
_log_file_path: Optional[str] = None


def setup_logger(
    log_file: Optional[str] = None,
    log_level: str = "INFO",
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
    console_output: bool = False,
) -> None:
    """
    Configure loguru logger with file and console output.

    Args:
        log_file: Path to the log file (if None, uses TYPEAHEAD_LOG_FILE, the
            previously configured path or the default)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rotation: Log rotation size
        retention: How long to keep old logs
        compression: Compression format for old logs
        console_output: Whether to output to console
    """
    global _log_file_path

    # Explicit argument first, then the environment
    if log_file is None:
        log_file = os.getenv("TYPEAHEAD_LOG_FILE") or None

    if log_file is None:
        # Reuse the path from an earlier call, else the project default
        if _log_file_path is None:
            _log_file_path = os.path.join(get_project_root(), "typeahead.log")
        log_file = _log_file_path
    else:
        # Relative paths are anchored at the project root
        if not os.path.isabs(log_file):
            log_file = os.path.join(get_project_root(), log_file)
        _log_file_path = log_file

    # Replace every handler installed so far, loguru's default included
    logger.remove()

    # Colored stderr sink, off unless asked for
    if console_output:
        logger.add(
            sys.stderr,
            level=log_level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    # Rotating file sink
    logger.add(
        log_file,
        level=log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}",
        rotation=rotation,
        retention=retention,
        compression=compression,
        encoding="utf-8",
    )


def get_logger(name: Optional[str] = None):
    """
    Get a configured logger instance.

    Args:
        name: Optional name for the logger

    Returns:
        Logger instance
    """
    return logger.bind(name=name or "typeahead")


# Records logged through the bare logger still need the "name" extra.
logger.configure(extra={"name": "typeahead"})

# Default configuration at import: typeahead.log in the project root
setup_logger(log_level=os.getenv("TYPEAHEAD_LOG_LEVEL", "INFO"))
