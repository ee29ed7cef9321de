"""
services/log_service.py

Responsibility: Writes the activity report of a sync run (one line per record
outcome plus a summary) to the console.
Does NOT: manage DNS records, read configuration, or persist anything to disk.
"""

from __future__ import annotations

import sys
from datetime import datetime
from typing import TextIO

from logger import DATE_FORMAT


class LogService:
    """
    Prints the operator-facing activity report for the current run.

    These lines are what the operator reads to see which records were up to
    date, updated or created. They are printed unconditionally, so LOG_LEVEL
    only affects the diagnostic logging of the other modules.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        """
        Args:
            stream: Where report lines go. Defaults to the current sys.stdout.
        """
        self._stream = stream

    def log(self, message: str, level: str = "INFO") -> str:
        """
        Prints a single report line as ``[timestamp] [LEVEL] message``.

        Args:
            message: The human-readable message.
            level: Severity string ("INFO", "WARNING", "ERROR").

        Returns:
            The line as printed, without the trailing newline.
        """
        timestamp = datetime.now().strftime(DATE_FORMAT)
        line = f"[{timestamp}] [{level.upper()}] {message}"
        print(line, file=self._stream or sys.stdout, flush=True)
        return line
