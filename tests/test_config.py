"""Tests for settings and logging setup."""

from __future__ import annotations

import logging

from svgtikz.config import Settings, configure_logging, resolve_log_level


def test_defaults(monkeypatch):
    monkeypatch.delenv("SVGTIKZ_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SVGTIKZ_HUGE_TREE", raising=False)
    monkeypatch.delenv("SVGTIKZ_RESOLVE_ENTITIES", raising=False)
    config = Settings(_env_file=None)
    assert config.svgtikz_log_level == "warning"
    assert config.svgtikz_huge_tree is False
    assert config.svgtikz_resolve_entities is False


def test_env_override(monkeypatch):
    monkeypatch.setenv("SVGTIKZ_LOG_LEVEL", "debug")
    monkeypatch.setenv("SVGTIKZ_HUGE_TREE", "true")
    config = Settings(_env_file=None)
    assert config.svgtikz_log_level == "debug"
    assert config.svgtikz_huge_tree is True


def test_resolve_log_level():
    assert resolve_log_level("debug") == logging.DEBUG
    assert resolve_log_level("INFO") == logging.INFO
    assert resolve_log_level("nonsense") == logging.WARNING
    # attribute exists on logging but is not a level
    assert resolve_log_level("basic_format") == logging.WARNING


def test_configure_logging_returns_level():
    config = Settings(_env_file=None, svgtikz_log_level="error")
    assert configure_logging(config) == logging.ERROR
