"""Tests for process-wide logging configuration."""

import logging

import pytest

import app.observability.logging as logging_module
from app.observability import configure_logging


@pytest.fixture
def _restore_root_logger(monkeypatch: pytest.MonkeyPatch):
    """Restore root logger handlers and level after each test."""

    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    monkeypatch.setattr(logging_module, "_configured", False)
    yield root_logger
    root_logger.handlers[:] = original_handlers
    root_logger.setLevel(original_level)


def test_configure_logging_adds_single_handler_across_calls(_restore_root_logger: logging.Logger) -> None:
    """Install one handler and only adjust the level on repeated calls."""

    handler_count = len(_restore_root_logger.handlers)

    configure_logging("INFO")
    configure_logging("DEBUG")

    assert len(_restore_root_logger.handlers) == handler_count + 1
    assert _restore_root_logger.level == logging.DEBUG
