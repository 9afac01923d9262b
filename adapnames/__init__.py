"""
adapnames: masked, delimiter-separated names.

A Name is an ordered sequence of string components. It renders either as a
human-readable string (masking removed, any delimiter) or as a
machine-readable data string (masking applied, default delimiter).

Usage:
    from adapnames import Name

    name = Name(["oss", "cs", "fau", "de"])
    name.as_string("/")     # 'oss/cs/fau/de'
    name.as_data_string()   # 'oss.cs.fau.de'
"""

__version__ = "0.1.0"
__author__ = "adapnames Team"
__email__ = "adapnames@example.com"

from .name import Name

from .utils import (
    DEFAULT_DELIMITER,
    ESCAPE_CHARACTER,
    NamesError,
    IndexOutOfRangeError,
    NamesConfig,
    get_config,
    set_config,
    load_config,
    setup_logging,
)

__all__ = [
    "Name",
    "DEFAULT_DELIMITER",
    "ESCAPE_CHARACTER",
    "NamesError",
    "IndexOutOfRangeError",
    "NamesConfig",
    "get_config",
    "set_config",
    "load_config",
    "setup_logging",
]
