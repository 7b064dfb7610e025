"""Tests for logging setup."""

from __future__ import annotations

import logging

import pytest
import structlog

from gitlab_releases.logging import setup_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    root.setLevel(level)


def test_console_renderer_by_default():
    setup_logging("INFO")
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
    assert logging.getLogger().level == logging.INFO


def test_json_renderer():
    setup_logging("debug", json_logs=True)
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
    assert logging.getLogger().level == logging.DEBUG


def test_routes_through_stdlib():
    setup_logging("WARNING")
    config = structlog.get_config()
    assert isinstance(config["logger_factory"], structlog.stdlib.LoggerFactory)
    assert config["wrapper_class"] is structlog.stdlib.BoundLogger
    assert logging.getLogger().level == logging.WARNING
