"""
AerLogger: the logging core.

One object owns the level gate, the formatter and both sinks. Construct as
many as you like (tests do); AerLogger.instance() hands out the shared
per-process logger.

The gate runs first: a record below a sink's threshold exits after one
comparison, before any source lookup or string building.
"""

import os
import sys
import threading
from abc import ABC, abstractmethod
from typing import Any, Optional

from aerlog.config import LoggerConfig
from aerlog.formatters import LineFormatter, LogFormatter, render
from aerlog.gate import LevelGate, Sink
from aerlog.records import BuildMode, Severity
from aerlog.sinks import ConsoleSink, FileLogBuffer, LogSink


class CallSiteMethods(ABC):
    """
    Call-site API shared by AerLogger and ModeScope.

    Every method here records the caller's file and line, so they must be
    called directly from user code.
    """

    @abstractmethod
    def _dispatch(self, sink: Sink, severity: Severity, fmt: str, args: tuple) -> None: ...

    @abstractmethod
    def _blank(self, sink: Sink) -> None: ...

    def console(self, severity: "Severity | int | str", fmt: str, *args: Any) -> None:
        self._dispatch(Sink.CONSOLE, severity, fmt, args)

    def file(self, severity: "Severity | int | str", fmt: str, *args: Any) -> None:
        self._dispatch(Sink.FILE, severity, fmt, args)

    # ── Console ───────────────────────────────────────────────────

    def console_trace(self, fmt: str, *args: Any) -> None:
        self._dispatch(Sink.CONSOLE, Severity.TRACE, fmt, args)

    def console_info(self, fmt: str, *args: Any) -> None:
        self._dispatch(Sink.CONSOLE, Severity.INFO, fmt, args)

    def console_warning(self, fmt: str, *args: Any) -> None:
        self._dispatch(Sink.CONSOLE, Severity.WARNING, fmt, args)

    def console_error(self, fmt: str, *args: Any) -> None:
        self._dispatch(Sink.CONSOLE, Severity.ERROR, fmt, args)

    def console_fatal(self, fmt: str, *args: Any) -> None:
        self._dispatch(Sink.CONSOLE, Severity.FATAL, fmt, args)

    def console_next_line(self) -> None:
        self._blank(Sink.CONSOLE)

    # ── File ──────────────────────────────────────────────────────

    def file_trace(self, fmt: str, *args: Any) -> None:
        self._dispatch(Sink.FILE, Severity.TRACE, fmt, args)

    def file_info(self, fmt: str, *args: Any) -> None:
        self._dispatch(Sink.FILE, Severity.INFO, fmt, args)

    def file_warning(self, fmt: str, *args: Any) -> None:
        self._dispatch(Sink.FILE, Severity.WARNING, fmt, args)

    def file_error(self, fmt: str, *args: Any) -> None:
        self._dispatch(Sink.FILE, Severity.ERROR, fmt, args)

    def file_fatal(self, fmt: str, *args: Any) -> None:
        self._dispatch(Sink.FILE, Severity.FATAL, fmt, args)

    def file_next_line(self) -> None:
        self._blank(Sink.FILE)


class AerLogger(CallSiteMethods):
    """
    Console + buffered-file logger with per-sink thresholds.

    Usage:
        log = AerLogger.instance()
        log.set_file_threshold(Severity.WARNING)
        log.console_info("loaded %d entries", n)
        log.file_error("checksum mismatch in %s", name)
        log.only_in(BuildMode.DEBUG).console_trace("cache state: %r", cache)
        log.export_file("session.txt")
    """

    _instance: Optional["AerLogger"] = None
    _lock = threading.Lock()

    # Re-export severities for convenience: AerLogger.WARNING, etc.
    TRACE = Severity.TRACE
    INFO = Severity.INFO
    WARNING = Severity.WARNING
    ERROR = Severity.ERROR
    FATAL = Severity.FATAL

    def __init__(
        self,
        *,
        console_level: Severity = Severity.TRACE,
        file_level: Severity = Severity.TRACE,
        build_mode: BuildMode = BuildMode.DEBUG,
        formatter: LogFormatter | None = None,
        console: ConsoleSink | None = None,
        file_buffer: FileLogBuffer | None = None,
    ) -> None:
        self._gate = LevelGate(console=console_level, file=file_level)
        self._formatter = formatter or LineFormatter()
        self._console = console if console is not None else ConsoleSink()
        self._file = file_buffer if file_buffer is not None else FileLogBuffer()
        self._build_mode = BuildMode.from_value(build_mode)
        self.export_path: str | None = None

    @classmethod
    def instance(cls) -> "AerLogger":
        """Get or create the per-process instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the per-process instance. For testing only; nothing is exported."""
        with cls._lock:
            cls._instance = None

    # ── Configuration ─────────────────────────────────────────────

    def configure(self, config: LoggerConfig | dict) -> None:
        """Apply a LoggerConfig (or a dict that validates as one)."""
        if not isinstance(config, LoggerConfig):
            config = LoggerConfig.from_dict(config)
        self.set_console_threshold(config.console_level)
        self.set_file_threshold(config.file_level)
        self.build_mode = config.build_mode
        self._console.color = config.color
        self.export_path = config.export_path

    def set_console_threshold(self, severity: Severity) -> None:
        self._gate.set_threshold(Sink.CONSOLE, severity)

    def set_file_threshold(self, severity: Severity) -> None:
        self._gate.set_threshold(Sink.FILE, severity)

    @property
    def console_threshold(self) -> Severity:
        return self._gate.threshold(Sink.CONSOLE)

    @property
    def file_threshold(self) -> Severity:
        return self._gate.threshold(Sink.FILE)

    @property
    def build_mode(self) -> BuildMode:
        return self._build_mode

    @build_mode.setter
    def build_mode(self, value: BuildMode | str) -> None:
        self._build_mode = BuildMode.from_value(value)

    @property
    def gate(self) -> LevelGate:
        return self._gate

    @property
    def console_sink(self) -> ConsoleSink:
        return self._console

    @property
    def file_buffer(self) -> FileLogBuffer:
        return self._file

    # ── Core Logging ──────────────────────────────────────────────

    def log_console(self, severity: "Severity | int | str", file: str, line: int, fmt: str, *args: Any) -> None:
        """Log to the console with an explicit source location."""
        self._log(Sink.CONSOLE, severity, file, line, fmt, args)

    def log_file(self, severity: "Severity | int | str", file: str, line: int, fmt: str, *args: Any) -> None:
        """Log to the file buffer with an explicit source location."""
        self._log(Sink.FILE, severity, file, line, fmt, args)

    def _log(self, sink: Sink, severity: "Severity | int | str", file: str, line: int, fmt: str, args: tuple) -> None:
        severity = Severity.from_value(severity)
        if not self._gate.accepts(sink, severity):
            return
        self._write(sink, severity, file, line, fmt, args)

    def _write(self, sink: Sink, severity: Severity, file: str, line: int, fmt: str, args: tuple) -> None:
        rendered = render(severity, file, line, fmt, args, self._formatter)
        self._sink(sink).emit(rendered, severity)

    def _dispatch(
        self,
        sink: Sink,
        severity: "Severity | int | str",
        fmt: str,
        args: tuple,
        depth: int = 2,
    ) -> None:
        # depth counts frames above this one: the CallSiteMethods method, then its caller
        severity = Severity.from_value(severity)
        if not self._gate.accepts(sink, severity):
            return
        frame = sys._getframe(depth)
        self._write(sink, severity, frame.f_code.co_filename, frame.f_lineno, fmt, args)

    def _blank(self, sink: Sink) -> None:
        self._sink(sink).next_line()

    def _sink(self, sink: Sink) -> LogSink:
        return self._console if sink is Sink.CONSOLE else self._file

    # ── Build modes ───────────────────────────────────────────────

    def only_in(self, mode: BuildMode | str) -> "ModeScope":
        """Call-site API that has no effect unless the logger runs in `mode`."""
        return ModeScope(self, BuildMode.from_value(mode))

    def debug_only(self) -> "ModeScope":
        return self.only_in(BuildMode.DEBUG)

    def release_only(self) -> "ModeScope":
        return self.only_in(BuildMode.RELEASE)

    def dist_only(self) -> "ModeScope":
        return self.only_in(BuildMode.DIST)

    # ── Export ────────────────────────────────────────────────────

    def export_file(self, path: "str | os.PathLike[str]") -> None:
        """
        Persist the file buffer to `path` (must end with '.txt') and clear it.

        Raises InvalidPathError or WriteError; on either the buffer is intact.
        """
        self._file.export(path)

    # ── Status ────────────────────────────────────────────────────

    def status(self) -> dict:
        return {
            "thresholds": self._gate.describe(),
            "build_mode": self._build_mode.value,
            "color": self._console.color,
            "buffered_lines": self._file.count,
            "export_path": self.export_path,
        }

    # ── Cleanup ───────────────────────────────────────────────────

    def close(self) -> None:
        """Export to the configured export_path, if any. Call during shutdown."""
        if self.export_path is not None:
            self.export_file(self.export_path)


class ModeScope(CallSiteMethods):
    """
    Build-mode restricted view of an AerLogger.

    Inactive scopes (mode != logger.build_mode) drop every call, blank lines
    included. The mode is compared at call time, so a scope follows later
    changes to the logger's build_mode.
    """

    def __init__(self, logger: AerLogger, mode: BuildMode):
        self._logger = logger
        self.mode = mode

    @property
    def active(self) -> bool:
        return self.mode == self._logger.build_mode

    def _dispatch(self, sink: Sink, severity: Severity, fmt: str, args: tuple) -> None:
        if self.active:
            self._logger._dispatch(sink, severity, fmt, args, depth=3)

    def _blank(self, sink: Sink) -> None:
        if self.active:
            self._logger._blank(sink)
