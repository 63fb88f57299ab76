"""
Unit tests for the logging utilities.
"""

import logging
from io import StringIO

from vault_db_check.config import AppConfig, LoggingConfig, set_config
from vault_db_check.utils.logger import (
    ContextAwareLogger,
    configure_logging,
    get_logger,
    reset_logging,
)


def _capture(logger_name: str):
    base_logger = logging.getLogger(logger_name)
    base_logger.setLevel(logging.DEBUG)
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    base_logger.addHandler(handler)
    return base_logger, stream


class TestContextAwareLogger:
    """Test the ContextAwareLogger wrapper."""

    def test_logger_initialization(self):
        base_logger = logging.getLogger("test.logger")
        context_logger = ContextAwareLogger(base_logger)

        assert context_logger.logger is base_logger

    def test_logging_without_extra(self):
        base_logger, stream = _capture("test.info")

        ContextAwareLogger(base_logger).info("Test message")

        assert stream.getvalue().strip() == "Test message"

    def test_logging_with_extra(self):
        """Extras are rendered as pipe-delimited pairs."""
        base_logger, stream = _capture("test.info.extra")

        ContextAwareLogger(base_logger).warning(
            "Test message", extra={"secret_role": "app-role", "status_code": 403}
        )

        assert stream.getvalue().strip() == "Test message | secret_role=app-role | status_code=403"


class TestConfigureLogging:
    """Test configure_logging and get_logger."""

    def test_configure_logging_uses_stderr(self, capsys):
        logger = configure_logging("unit", log_level="INFO")
        logger.info("to stderr")

        captured = capsys.readouterr()
        assert "to stderr" in captured.err
        assert captured.out == ""

    def test_configure_logging_replaces_handlers(self):
        configure_logging("unit.handlers")
        logger = configure_logging("unit.handlers")

        assert len(logger.logger.handlers) == 1
        assert logger.logger.name == "vault_db_check.unit.handlers"

    def test_level_from_config(self):
        set_config(AppConfig(logging=LoggingConfig(level="ERROR")))

        logger = configure_logging("unit.level")

        assert logger.logger.level == logging.ERROR

    def test_get_logger_returns_configured_logger(self):
        configured = configure_logging("unit.get")

        assert get_logger() is configured

    def test_get_logger_falls_back_to_root(self):
        configure_logging("unit.fallback")
        reset_logging()

        logger = get_logger(log_level="WARNING")

        assert isinstance(logger, ContextAwareLogger)
        assert logger.logger is logging.getLogger()
        assert logger.logger.level == logging.WARNING
