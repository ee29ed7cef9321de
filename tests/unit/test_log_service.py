"""
tests/unit/test_log_service.py

Unit tests for services/log_service.py.
"""

from __future__ import annotations

import io
import logging
import re

from services.log_service import LogService


def test_log_prints_formatted_line(capsys):
    """log() must print one [timestamp] [LEVEL] message line to stdout."""
    service = LogService()
    service.log("Test message", level="INFO")

    out = capsys.readouterr().out
    assert re.fullmatch(r"\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] \[INFO\] Test message\n", out)


def test_log_uppercases_level():
    service = LogService(stream=io.StringIO())
    line = service.log("warning msg", level="warning")
    assert line.endswith("[WARNING] warning msg")


def test_log_writes_to_given_stream():
    stream = io.StringIO()
    LogService(stream=stream).log("first")
    LogService(stream=stream).log("second")

    lines = stream.getvalue().splitlines()
    assert [line.split("] ", 2)[-1] for line in lines] == ["first", "second"]


def test_log_ignores_logging_level(capsys):
    """Report lines are printed even when logging is silenced."""
    previous = logging.getLogger().level
    logging.getLogger().setLevel(logging.CRITICAL)
    try:
        LogService().log("still shown")
    finally:
        logging.getLogger().setLevel(previous)

    assert "still shown" in capsys.readouterr().out
