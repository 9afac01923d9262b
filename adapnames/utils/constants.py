"""
Constants for the adapnames package.

This module centralizes the fixed control characters used for masking
name components, together with configuration defaults.
"""

# =============================================================================
# Control Characters
# =============================================================================

# Delimiter used by the machine-readable form and by names created without
# an explicit delimiter.
DEFAULT_DELIMITER = "."

# Escape character marking the next character as literal. Not configurable.
ESCAPE_CHARACTER = "\\"


# =============================================================================
# Configuration Constants
# =============================================================================

# Debug and logging constants
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FILE = "adapnames.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAMESPACE = "adapnames"

# Environment variables
ENV_LOG_LEVEL = "ADAPNAMES_LOG_LEVEL"
ENV_DEBUG = "ADAPNAMES_DEBUG"
ENV_TRUE_VALUES = ("1", "true", "yes")

# File and path constants
CONFIG_FILE_NAMES = ["adapnames_config.yaml", "adapnames_config.json"]
YAML_SUFFIXES = [".yaml", ".yml"]
