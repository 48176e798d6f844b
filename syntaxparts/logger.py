"""Logging configuration for syntaxparts using loguru."""

import sys
from typing import Any, Optional

from loguru import logger

from . import constants


def setup_logger(log_level: str = "INFO", sink: Any = sys.stderr) -> int:
    """
    Enable syntaxparts log records and send them to the provided sink.

    syntaxparts is silent by default, as a library should be. Applications that
    want to see match decisions call this (or loguru's logger.enable directly).

    Args:
        log_level: Logging level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
        sink: Any loguru sink, stderr by default

    Returns:
        The loguru handler id, which can be passed to logger.remove()
    """
    logger.enable(constants.APPLICATION_NAME)

    return logger.add(
        sink,
        level=log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        filter=constants.APPLICATION_NAME,
    )


def get_logger(name: Optional[str] = None):
    """
    Get a logger instance.

    Args:
        name: Optional name for the logger

    Returns:
        Logger instance
    """
    if name:
        return logger.bind(name=name)
    return logger


# library records stay silent until the application opts in
logger.disable(constants.APPLICATION_NAME)
