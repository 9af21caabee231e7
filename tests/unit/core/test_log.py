"""Tests for logging configuration."""

import logging

from studio.core.config import Settings
from studio.core.log import configure_logging


def _captured_level(monkeypatch, settings):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging(settings)
    return calls[0]["level"]


def test_uses_log_level(monkeypatch):
    settings = Settings(_env_file=None, LOG_LEVEL="warning")
    assert _captured_level(monkeypatch, settings) == logging.WARNING


def test_debug_overrides_level(monkeypatch):
    settings = Settings(_env_file=None, LOG_LEVEL="ERROR", DEBUG=True)
    assert _captured_level(monkeypatch, settings) == logging.DEBUG


def test_unknown_level_falls_back_to_info(monkeypatch):
    settings = Settings(_env_file=None, LOG_LEVEL="chatty")
    assert _captured_level(monkeypatch, settings) == logging.INFO
