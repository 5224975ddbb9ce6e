"""Tests for logging configuration"""
import tempfile
import os
import logging
from pathlib import Path
from unittest.mock import patch

from config import Config
from logging_config import (
    setup_structured_logging,
    get_logger,
    log_startup,
    log_encoding_summary,
    log_error
)


class TestLoggingConfig:
    """Test logging configuration and structured logging"""

    def test_setup_structured_logging(self):
        """Test structured logging setup with a log file"""
        with tempfile.TemporaryDirectory() as tmp_dir:
            log_file = Path(tmp_dir) / "logs" / "test.log"
            config = Config(log_file=log_file, log_level="DEBUG")

            setup_structured_logging(config)

            assert log_file.parent.exists()
            logger = logging.getLogger("test")
            assert logger.isEnabledFor(logging.DEBUG)

            logging.getLogger().handlers.clear()

    def test_setup_without_log_file(self):
        """Test logging setup only attaches a console handler"""
        config = Config(log_level="WARNING")

        setup_structured_logging(config)

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING

    def test_get_logger(self):
        """Test getting structured logger"""
        logger = get_logger("test_logger")

        assert logger is not None
        assert hasattr(logger, 'info')
        assert hasattr(logger, 'error')
        assert hasattr(logger, 'warning')

    def test_log_startup(self):
        """Test structured startup logging"""
        logger = get_logger("test")

        # This should not raise an exception
        log_startup(logger, Config())

    def test_log_encoding_summary(self):
        """Test structured encoding summary logging"""
        logger = get_logger("test")

        # This should not raise an exception
        log_encoding_summary(logger, lines=10, skipped=0, duration=0.0012)
        log_encoding_summary(logger, lines=3, skipped=2, duration=1.5)

    def test_log_error(self):
        """Test structured error logging"""
        logger = get_logger("test")
        error = ValueError("Test error")

        # This should not raise an exception
        log_error(logger, error, {"component": "test"})
        log_error(logger, error)

    def test_development_vs_production_logging(self):
        """Test different renderers for development and production"""
        config = Config()

        with patch.dict(os.environ, {"ENVIRONMENT": "development"}):
            setup_structured_logging(config)
            get_logger("test").info("Test development log")

        with patch.dict(os.environ, {"ENVIRONMENT": "production"}):
            setup_structured_logging(config)
            get_logger("test").info("Test production log")
