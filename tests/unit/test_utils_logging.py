"""
Unit tests for logging utilities.

Tests the logging configuration including logger setup, levels,
file output and formatting.
"""

import pytest
import logging
import tempfile
import os
from unittest.mock import patch
from adapnames.utils.logging import setup_logging, get_logger


class TestLoggingSetup:
    """Test logging setup and configuration."""

    def test_setup_logging_default(self):
        """Test default logging setup."""
        with patch.dict('os.environ', {}, clear=True):
            setup_logging()

        logger = logging.getLogger('adapnames')
        assert logger.level == logging.INFO
        assert len(logger.handlers) > 0
        assert logger.propagate is False

    def test_setup_logging_debug_level(self):
        """Test logging setup with debug level."""
        setup_logging(level='DEBUG')

        logger = logging.getLogger('adapnames')
        assert logger.level == logging.DEBUG

    def test_setup_logging_lowercase_level(self):
        """Test that level names are case-insensitive."""
        setup_logging(level='warning')

        logger = logging.getLogger('adapnames')
        assert logger.level == logging.WARNING

    def test_setup_logging_invalid_level(self):
        """Test logging setup with invalid level defaults to INFO."""
        setup_logging(level='INVALID')

        logger = logging.getLogger('adapnames')
        assert logger.level == logging.INFO

    def test_setup_logging_non_level_attribute(self):
        """Test that logging module attributes which are not levels default to INFO."""
        setup_logging(level='basic_format')

        logger = logging.getLogger('adapnames')
        assert logger.level == logging.INFO

    def test_setup_logging_with_file(self):
        """Test logging setup with file output."""
        with tempfile.NamedTemporaryFile(suffix='.log', delete=False) as f:
            log_file = f.name

        try:
            setup_logging(log_file=log_file)

            logger = logging.getLogger('adapnames')

            handler_types = [type(h).__name__ for h in logger.handlers]
            assert 'StreamHandler' in handler_types
            assert 'FileHandler' in handler_types

            logger.warning("Test message")
            for handler in logger.handlers:
                handler.flush()

            with open(log_file, 'r') as f:
                assert "Test message" in f.read()

        finally:
            setup_logging()
            if os.path.exists(log_file):
                os.unlink(log_file)

    def test_setup_logging_environment_variable(self):
        """Test logging setup with environment variable."""
        with patch.dict('os.environ', {'ADAPNAMES_LOG_LEVEL': 'DEBUG'}):
            setup_logging()

            logger = logging.getLogger('adapnames')
            assert logger.level == logging.DEBUG

    def test_setup_logging_removes_existing_handlers(self):
        """Test that setup_logging removes existing handlers."""
        logger = logging.getLogger('adapnames')

        dummy_handler = logging.StreamHandler()
        logger.addHandler(dummy_handler)

        setup_logging()

        assert dummy_handler not in logger.handlers
        assert len(logger.handlers) == 1

    def test_get_logger(self):
        """Test getting logger instances."""
        logger1 = get_logger('test_module')
        logger2 = get_logger('test_module')

        assert logger1 is logger2
        assert logger1.name == 'adapnames.test_module'

    def test_get_logger_module_name(self):
        """Test that package module names are not prefixed twice."""
        assert get_logger('adapnames.name').name == 'adapnames.name'

    def test_get_logger_different_modules(self):
        """Test getting loggers for different modules."""
        logger1 = get_logger('module1')
        logger2 = get_logger('module2')

        assert logger1 is not logger2
        assert logger1.name == 'adapnames.module1'
        assert logger2.name == 'adapnames.module2'


class TestLoggingIntegration:
    """Integration tests for logging functionality."""

    def test_logging_formatter(self):
        """Test logging formatter output."""
        with tempfile.NamedTemporaryFile(suffix='.log', delete=False) as f:
            log_file = f.name

        try:
            setup_logging(level='INFO', log_file=log_file)

            logger = get_logger('test_formatter')
            logger.info('Test message for formatting')

            with open(log_file, 'r') as f:
                content = f.read()

                assert 'adapnames.test_formatter' in content
                assert 'INFO' in content
                assert 'Test message for formatting' in content
                assert ' - ' in content

        finally:
            setup_logging()
            if os.path.exists(log_file):
                os.unlink(log_file)

    def test_logging_levels(self):
        """Test different logging levels."""
        levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

        for level in levels:
            setup_logging(level=level)
            logger = logging.getLogger('adapnames')
            assert logger.level == getattr(logging, level)

    def test_logging_no_propagation(self):
        """Test that the package logger doesn't propagate to root."""
        setup_logging()
        logger = logging.getLogger('adapnames')

        assert logger.propagate is False


if __name__ == '__main__':
    pytest.main([__file__])
