"""Tests for logging configuration."""

import logging

import pytest

from rbac_hierarchy.config import LoggingConfig, setup_logging
from rbac_hierarchy.config.logging_config import get_log_level_from_verbosity


@pytest.fixture
def restore_package_logger():
    """Undo handler and level changes made by dictConfig."""
    logger = logging.getLogger(LoggingConfig.PACKAGE_LOGGER)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestLoggingConfig:
    """Environment-driven logging setup."""

    @pytest.mark.parametrize(
        "verbosity, level",
        [("quiet", "ERROR"), ("NORMAL", "WARNING"), ("verbose", "INFO"), ("debug", "DEBUG"), ("loud", "WARNING")],
    )
    def test_verbosity_mapping(self, verbosity, level):
        assert get_log_level_from_verbosity(verbosity) == level

    def test_log_level_wins_over_verbosity(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_VERBOSITY", "QUIET")

        config = LoggingConfig.build()

        assert config["loggers"]["rbac_hierarchy"]["level"] == "DEBUG"

    def test_json_format(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_VERBOSITY", raising=False)
        monkeypatch.setenv("LOG_FORMAT", "json")

        config = LoggingConfig.build()

        assert config["formatters"]["default"]["format"].startswith('{"time"')
        assert config["loggers"]["rbac_hierarchy"]["level"] == "WARNING"

    def test_unknown_format_falls_back_to_simple(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "fancy")

        config = LoggingConfig.build()

        assert config["formatters"]["default"]["format"] == "%(asctime)s - %(levelname)s - %(message)s"

    def test_setup_logging_configures_package_logger(self, monkeypatch, restore_package_logger):
        monkeypatch.setenv("LOG_LEVEL", "INFO")

        setup_logging()

        assert restore_package_logger.level == logging.INFO
        assert restore_package_logger.propagate is False
        assert any(isinstance(h, logging.StreamHandler) for h in restore_package_logger.handlers)

    def test_silence_module(self):
        name = "rbac_hierarchy.features.roles.services.hierarchy_resolver"
        logger = logging.getLogger(name)
        previous = logger.level
        try:
            LoggingConfig.silence_module(name)
            assert logger.level == logging.CRITICAL
        finally:
            logger.setLevel(previous)
