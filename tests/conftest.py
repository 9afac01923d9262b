"""
Pytest configuration and shared fixtures for adapnames tests.

This module provides common test fixtures and a reference parser for
machine-readable data strings used by round-trip checks.
"""

import logging
import sys
from pathlib import Path
from typing import List

import pytest

# Add the project root to the path for testing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from adapnames import Name, DEFAULT_DELIMITER, ESCAPE_CHARACTER
from adapnames.utils import config as config_module
from adapnames.utils.logging import setup_logging


def reference_split(data: str) -> List[str]:
    """
    Split a machine-readable data string into its components.

    Test-only inverse of Name.as_data_string: an escape character makes the
    next character literal, an unescaped default delimiter ends a component.
    """
    components = []
    current = []
    i = 0
    while i < len(data):
        char = data[i]
        if char == ESCAPE_CHARACTER and i + 1 < len(data):
            current.append(data[i + 1])
            i += 2
            continue
        if char == DEFAULT_DELIMITER:
            components.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1
    components.append("".join(current))
    return components


@pytest.fixture(autouse=True)
def reset_package_state():
    """Restore global configuration and logging after each test."""
    yield
    config_module.set_config(None)
    setup_logging()


@pytest.fixture
def split_data_string():
    """Reference parser for machine-readable data strings."""
    return reference_split


# Name fixtures
@pytest.fixture
def host_name():
    """Four-component host name with the default delimiter."""
    return Name(["oss", "cs", "fau", "de"])


@pytest.fixture
def empty_components_name():
    """Four empty components rendered with a slash."""
    return Name(["", "", "", ""], "/")


@pytest.fixture
def masked_name():
    """Single component made of masked dots."""
    return Name(["Oh\\.\\.\\."], ".")


@pytest.fixture
def two_component_name():
    """Two-component name for index bound checks."""
    return Name(["a", "b"])


@pytest.fixture
def tricky_components():
    """Unmasked component texts mixing control characters."""
    return [
        "",
        "plain",
        ".",
        "\\",
        "a.b",
        "a\\b",
        "\\.",
        ".\\",
        "..\\\\..",
        "trailing\\",
        "/slash/",
    ]


@pytest.fixture
def debug_logging():
    """Route adapnames DEBUG records into the root logger for caplog."""
    logger = logging.getLogger("adapnames")
    setup_logging(level="DEBUG")
    logger.propagate = True
    yield logger
    logger.propagate = False
