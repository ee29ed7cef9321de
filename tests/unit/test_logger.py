"""
tests/unit/test_logger.py

Unit tests for logger.py.
"""

from __future__ import annotations

import logging

from logger import resolve_level, setup_logging


def test_resolve_level_defaults_to_info(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert resolve_level() == logging.INFO


def test_resolve_level_reads_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert resolve_level() == logging.DEBUG


def test_resolve_level_argument_wins_over_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    assert resolve_level("error") == logging.ERROR


def test_resolve_level_unknown_name_falls_back_to_info():
    assert resolve_level("chatty") == logging.INFO


def test_setup_logging_quietens_http_libraries():
    setup_logging("DEBUG")
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING
