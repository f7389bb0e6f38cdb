"""
Unit Tests for structured logging setup.
"""

import logging

import pytest
import structlog

from src.core.logging import setup_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestSetupLogging:

    def test_console_format(self):
        setup_logging("DEBUG", "console")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert logging.getLogger().level == logging.DEBUG

    def test_json_format(self):
        setup_logging("warning", "json")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("chatty", "json")

        assert logging.getLogger().level == logging.INFO
