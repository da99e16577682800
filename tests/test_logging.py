"""Tests for logging utilities."""

from __future__ import annotations

import logging

from minidi.core.config import LoggingSettings
from minidi.core.logging import configure_logging


def test_configure_logging_sets_root_level() -> None:
    """configure_logging should set the root logger level according to settings."""

    settings = LoggingSettings(level="DEBUG", structured=False)
    configure_logging(settings)
    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_accepts_lowercase_level() -> None:
    configure_logging(LoggingSettings(level="info", structured=True))
    root = logging.getLogger()
    assert root.level == logging.INFO
    formats = [handler.formatter._fmt for handler in root.handlers if handler.formatter]
    assert any("level=" in (fmt or "") for fmt in formats)
