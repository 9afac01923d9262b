"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
adapnames package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional

from .constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL, LOG_FORMAT, LOGGER_NAMESPACE


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the adapnames package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    if level is None:
        level = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)

    log_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(log_level)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    prefix = f"{LOGGER_NAMESPACE}."
    if name.startswith(prefix):
        name = name[len(prefix):]
    return logging.getLogger(f"{prefix}{name}")


# Initialize logging on module import
setup_logging()
