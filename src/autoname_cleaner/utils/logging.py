"""Logging utilities for Autoname Cleaner."""

import logging
import sys
from typing import TextIO

from pythonjsonlogger import jsonlogger


def setup_logging(
    log_level: str = "WARNING",
    log_format: str = "text",
    stream: TextIO | None = None,
    handler: logging.Handler | None = None,
) -> None:
    """
    Setup structured logging for the application.

    Operator-facing output goes to stdout, so logs default to stderr.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Format type (json or text)
        stream: Stream for the console handler (defaults to stderr)
        handler: Pre-built handler to use instead of a console handler
    """
    level = getattr(logging, log_level.upper())

    # Get root logger
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)

    # Set formatter based on format type
    if log_format.lower() == "json":
        formatter = jsonlogger.JsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "asctime": "timestamp"},
            timestamp=True,
        )
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    handler.setFormatter(formatter)
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Name for the logger (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
