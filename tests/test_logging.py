"""Tests for logging setup."""

import logging

import pytest
import structlog

from daily_quotes.observability import configure_default_logging, get_logger


@pytest.fixture
def pristine_structlog():
    """Start from an unconfigured structlog and restore afterwards."""
    saved = structlog.get_config()
    structlog.reset_defaults()
    yield
    structlog.configure(**saved)


def test_default_logging_stays_off_stdout(pristine_structlog, capsys, caplog) -> None:
    configure_default_logging()
    
    with caplog.at_level(logging.WARNING):
        get_logger("daily_quotes.test").warning("source_failed", source="quotable")
    
    assert capsys.readouterr().out == ""
    assert "source_failed" in caplog.text
    assert "quotable" in caplog.text


def test_default_logging_keeps_existing_config(pristine_structlog) -> None:
    factory = structlog.PrintLoggerFactory()
    structlog.configure(logger_factory=factory)
    
    configure_default_logging()
    
    assert structlog.get_config()["logger_factory"] is factory
