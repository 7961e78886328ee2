"""
aerlog: console + buffered file logging core.

Two sinks with independent severity thresholds. Console lines are written
immediately; file lines are buffered in memory and persisted by an
explicit export to a .txt file.
"""

from aerlog.records import Severity, BuildMode, LogRecord
from aerlog.errors import AerLogError, ExportError, InvalidPathError, WriteError
from aerlog.gate import LevelGate, Sink
from aerlog.formatters import LogFormatter, LineFormatter, interpolate, render
from aerlog.sinks import LogSink, ConsoleSink, FileLogBuffer
from aerlog.config import LoggerConfig
from aerlog.core import AerLogger, ModeScope
from aerlog.reconfig import LoggerReconfig
from aerlog.bridge import AerLogHandler

__all__ = [
    "Severity",
    "BuildMode",
    "LogRecord",
    "AerLogError",
    "ExportError",
    "InvalidPathError",
    "WriteError",
    "LevelGate",
    "Sink",
    "LogFormatter",
    "LineFormatter",
    "interpolate",
    "render",
    "LogSink",
    "ConsoleSink",
    "FileLogBuffer",
    "LoggerConfig",
    "AerLogger",
    "ModeScope",
    "LoggerReconfig",
    "AerLogHandler",
]
