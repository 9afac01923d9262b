"""
Utils package for adapnames.

This module provides the masking helpers, constants, exceptions, logging
and configuration used by the Name type.
"""

from .constants import DEFAULT_DELIMITER, ESCAPE_CHARACTER
from .exceptions import NamesError, IndexOutOfRangeError
from .string_utils import mask_component, unmask_component, join_components

from .config import (
    NamesConfig,
    DebugConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)

from .logging import get_logger, setup_logging

__all__ = [
    # Constants
    "DEFAULT_DELIMITER",
    "ESCAPE_CHARACTER",

    # Exceptions
    "NamesError",
    "IndexOutOfRangeError",

    # Masking
    "mask_component",
    "unmask_component",
    "join_components",

    # Configuration
    "NamesConfig",
    "DebugConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",

    # Logging
    "get_logger",
    "setup_logging",
]
