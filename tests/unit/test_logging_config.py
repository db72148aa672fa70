"""Tests for structlog-backed logging setup."""

from __future__ import annotations

import logging

import pytest
import structlog

from refcheck.core.config import ObservabilityConfig
from refcheck.hooks import setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("refcheck").setLevel(logging.NOTSET)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


def test_installs_single_processor_formatter_handler() -> None:
    setup_logging(ObservabilityConfig(log_level="DEBUG"))
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
    assert root.level == logging.DEBUG


def test_unknown_level_falls_back_to_info() -> None:
    setup_logging(ObservabilityConfig(log_level="LOUD"))
    assert logging.getLogger().level == logging.INFO


def test_service_name_bound() -> None:
    setup_logging(ObservabilityConfig(service_name="refcheck-test"))
    assert structlog.contextvars.get_contextvars()["service"] == "refcheck-test"
