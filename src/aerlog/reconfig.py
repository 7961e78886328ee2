"""
Runtime reconfiguration.

Adjust a running logger without rebuilding it:
- Change console / file thresholds
- Switch build mode
- Inspect the tail of the file buffer
- Export on demand

Usage:
    reconfig = LoggerReconfig()
    reconfig.set_file_level("warning")
    recent = reconfig.peek_buffer(n=20)
    reconfig.export("logs/incident.txt")
"""

from __future__ import annotations

import os
from typing import Any

from aerlog.core import AerLogger
from aerlog.records import BuildMode, Severity


class LoggerReconfig:
    """Runtime reconfiguration interface for AerLogger."""

    def __init__(self, logger: AerLogger | None = None):
        self._log = logger or AerLogger.instance()

    # ── Level management ──────────────────────────────────────

    def set_console_level(self, level: str | int | Severity) -> None:
        self._log.set_console_threshold(Severity.from_value(level))

    def set_file_level(self, level: str | int | Severity) -> None:
        self._log.set_file_threshold(Severity.from_value(level))

    def get_levels(self) -> dict[str, str]:
        """Current thresholds by sink name."""
        return {
            "console": self._log.console_threshold.name,
            "file": self._log.file_threshold.name,
        }

    # ── Build mode ────────────────────────────────────────────

    def set_build_mode(self, mode: str | BuildMode) -> None:
        self._log.build_mode = mode

    # ── File buffer access ────────────────────────────────────

    def peek_buffer(self, n: int = 100) -> list[str]:
        """Last n buffered lines, oldest first. The buffer is not modified."""
        if n <= 0:
            return []
        return list(self._log.file_buffer.lines[-n:])

    def export(self, path: str | os.PathLike[str]) -> None:
        self._log.export_file(path)

    # ── Status ────────────────────────────────────────────────

    def status(self) -> dict[str, Any]:
        """
        Complete logger overview.

        Returns:
            {
                "levels": {"console": "INFO", "file": "TRACE"},
                "build_mode": "debug",
                "buffered_lines": int,
                "export_path": str | None,
            }
        """
        return {
            "levels": self.get_levels(),
            "build_mode": self._log.build_mode.value,
            "buffered_lines": self._log.file_buffer.count,
            "export_path": self._log.export_path,
        }
