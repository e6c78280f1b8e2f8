"""Tests for logging setup."""

import logging

import pytest

from http_manager.core.config import HttpClientSettings
from http_manager.utils.logging import setup_logging


@pytest.fixture
def restore_loggers():
    """Undo dictConfig changes so later tests can still capture package logs."""
    names = ["http_manager", "httpx"]
    saved = {
        name: (logging.getLogger(name).level, logging.getLogger(name).propagate, list(logging.getLogger(name).handlers))
        for name in names
    }
    root = logging.getLogger()
    root_level, root_handlers = root.level, list(root.handlers)
    yield
    for name, (level, propagate, handlers) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = propagate
        logger.handlers = handlers
    root.setLevel(root_level)
    root.handlers = root_handlers


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_loads_packaged_config(self, restore_loggers):
        """Test the packaged logging.yml configures the package logger."""
        logger = setup_logging(HttpClientSettings(_env_file=None))

        assert logger.name == "http_manager"
        assert logger.level == logging.INFO
        assert logger.propagate is False
        assert logger.handlers
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_loads_absolute_config_path(self, restore_loggers, tmp_path):
        """Test an absolute config path is used as given."""
        config_file = tmp_path / "logging.yml"
        config_file.write_text(
            "version: 1\n"
            "disable_existing_loggers: false\n"
            "loggers:\n"
            "  http_manager:\n"
            "    level: DEBUG\n"
        )

        logger = setup_logging(HttpClientSettings(log_config_file=str(config_file), _env_file=None))

        assert logger.level == logging.DEBUG

    def test_invalid_config_falls_back(self, restore_loggers, tmp_path, caplog):
        """Test a broken config file falls back to basic logging with a warning."""
        config_file = tmp_path / "logging.yml"
        config_file.write_text("version: 99\n")
        caplog.set_level(logging.WARNING)

        setup_logging(HttpClientSettings(log_config_file=str(config_file), _env_file=None))

        assert "Failed to load logging config" in caplog.text

    def test_missing_config_uses_basic_logging(self, restore_loggers, tmp_path):
        """Test a missing config file does not raise."""
        logger = setup_logging(
            HttpClientSettings(log_config_file=str(tmp_path / "absent.yml"), _env_file=None)
        )

        assert logger.name == "http_manager"
