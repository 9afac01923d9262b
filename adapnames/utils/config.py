"""
Configuration System for adapnames.

This module loads package settings from a single JSON or YAML file, with
environment variable overrides for the most common switches.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import (
    CONFIG_FILE_NAMES,
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_LEVEL,
    ENV_DEBUG,
    ENV_LOG_LEVEL,
    ENV_TRUE_VALUES,
    YAML_SUFFIXES,
)
from .logging import get_logger, setup_logging

logger = get_logger(__name__)


@dataclass
class DebugConfig:
    """
    Debug and tracing configuration.

    Either switch turns on the mutation trace of Name. Installing such a
    configuration through get_config or set_config also lowers the package
    log level to DEBUG so the trace is emitted.
    """

    enabled: bool = False
    trace_mutations: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = DEFAULT_LOG_LEVEL
    enable_file_logging: bool = False
    log_file: str = DEFAULT_LOG_FILE


class NamesConfig:
    """
    Configuration manager for adapnames.

    Settings are read once from a JSON or YAML file. A missing or unreadable
    file leaves every section at its defaults.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses default location.
        """
        self._explicit_file = config_file is not None
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.debug = self._create_debug_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        # Default location: first existing candidate next to this module
        config_dir = Path(__file__).parent
        for file_name in CONFIG_FILE_NAMES:
            candidate = config_dir / file_name
            if candidate.exists():
                return candidate
        return config_dir / CONFIG_FILE_NAMES[-1]

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            if self._explicit_file:
                logger.warning(f"Configuration file {self.config_file} not found, using defaults")
            else:
                logger.debug("No configuration file found, using defaults")
            return {}

        try:
            with open(self.config_file, "r") as f:
                if self.config_file.suffix.lower() in YAML_SUFFIXES:
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to load configuration: {e}")
            return {}

        if not isinstance(config_data, dict):
            logger.error(f"Configuration in {self.config_file} is not a mapping, using defaults")
            return {}

        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data

    def _create_debug_config(self) -> DebugConfig:
        """Create debug configuration from loaded data."""
        debug_data = self._config_data.get("debug", {})

        # Check environment variable override
        env_enabled = os.getenv(ENV_DEBUG, "").lower() in ENV_TRUE_VALUES
        enabled = env_enabled or debug_data.get("enabled", False)

        return DebugConfig(
            enabled=enabled,
            trace_mutations=debug_data.get("trace_mutations", False),
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._config_data.get("logging", {})

        return LoggingConfig(
            level=os.getenv(ENV_LOG_LEVEL) or log_data.get("level", DEFAULT_LOG_LEVEL),
            enable_file_logging=log_data.get("enable_file_logging", False),
            log_file=log_data.get("log_file", DEFAULT_LOG_FILE),
        )

    def is_tracing_enabled(self) -> bool:
        """Check if Name mutations should be traced."""
        return self.debug.enabled or self.debug.trace_mutations

    def apply_logging(self) -> None:
        """Reconfigure package logging; tracing forces the DEBUG level."""
        level = "DEBUG" if self.is_tracing_enabled() else self.logging.level
        log_file = self.logging.log_file if self.logging.enable_file_logging else None
        setup_logging(level=level, log_file=log_file)

    def save_config(self) -> None:
        """Save current configuration to file as JSON."""
        config_data = {
            "version": "1.0",
            "description": "adapnames configuration",
            "debug": {
                "enabled": self.debug.enabled,
                "trace_mutations": self.debug.trace_mutations,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

        with open(self.config_file, "w") as f:
            json.dump(config_data, f, indent=2)
        logger.info(f"Configuration saved to {self.config_file}")


# Global configuration instance
_global_config: Optional[NamesConfig] = None


def get_config() -> NamesConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = NamesConfig()
        _activate(_global_config)
    return _global_config


def set_config(config: Optional[NamesConfig]) -> None:
    """Set the global configuration instance. None resets to lazy defaults."""
    global _global_config
    _global_config = config
    if config is not None:
        _activate(config)


def _activate(config: NamesConfig) -> None:
    if config.is_tracing_enabled():
        config.apply_logging()


def load_config(config_file: str) -> NamesConfig:
    """Load configuration from a specific file."""
    return NamesConfig(config_file)
