"""
Structured logging for rewriting sessions.

Provides configurable log levels (silent, normal, verbose, debug)
with consistent formatting for warnings, progress updates, rule
activity, and session statistics.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any, Dict, TextIO


class LogLevel(Enum):
    """
    Logging levels for a session.

    SILENT:  No output at all.
    NORMAL:  Warnings only.
    VERBOSE: Progress information and statistics.
    DEBUG:   Every rewrite candidate as it is found.
    """

    SILENT = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3


class SessionLogger:
    """
    Structured logger for rule sessions.

    Output is filtered by the configured log level.

    Attributes:
        level: The minimum log level to display.
        stream: The output stream (defaults to stdout).
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.NORMAL,
        stream: TextIO = sys.stdout,
    ) -> None:
        self.level: LogLevel = level
        self.stream: TextIO = stream

    def debug(self, message: str, **kwargs: Any) -> None:
        """
        Log a debug message (only shown at DEBUG level).

        Args:
            message: The message to log.
            **kwargs: Additional key-value pairs to include.
        """
        if self.level.value >= LogLevel.DEBUG.value:
            self._write(f"[DEBUG] {message}")
            for k, v in kwargs.items():
                self._write(f"  {k}: {v}")

    def info(self, message: str, **kwargs: Any) -> None:
        """
        Log an info message (shown at VERBOSE and DEBUG levels).

        Args:
            message: The message to log.
            **kwargs: Additional key-value pairs to include.
        """
        if self.level.value >= LogLevel.VERBOSE.value:
            self._write(f"[INFO] {message}")
            for k, v in kwargs.items():
                self._write(f"  {k}: {v}")

    def warning(self, message: str) -> None:
        """Log a warning (shown at NORMAL level and above)."""
        if self.level.value >= LogLevel.NORMAL.value:
            self._write(f"[WARNING] {message}")

    def rule_defined(self, name: str) -> None:
        self.info(f"Defined rule '{name}'")

    def rule_applied(self, name: str, count: int) -> None:
        """Log the number of rewrites a rule produced (VERBOSE)."""
        self.info(f"Applied rule '{name}'", rewrites=count)

    def candidate(self, expr: Any) -> None:
        """Log a newly found rewrite candidate (DEBUG)."""
        if self.level.value >= LogLevel.DEBUG.value:
            self._write(f"[DEBUG] Candidate {expr}")

    def statistics(self, stats: Dict[str, Any]) -> None:
        """
        Log session statistics (shown at VERBOSE level and above).

        Args:
            stats: Dictionary of statistic names to values.
        """
        if self.level.value >= LogLevel.VERBOSE.value:
            self._write("=== Statistics ===")
            for key, value in stats.items():
                label = key.replace("_", " ").title()
                self._write(f"  {label}: {value}")

    def _write(self, message: str) -> None:
        """Write a line to the output stream."""
        self.stream.write(message + "\n")
