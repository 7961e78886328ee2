"""
Bridge from Python's `logging` module into an AerLogger.

Third-party libraries log through `logging`; attach AerLogHandler to a
stdlib logger and their records go through the same per-sink gate as
direct calls. The stdlib record already carries the source location
(pathname, lineno) and the interpolated message.

Usage:
    handler = AerLogHandler(AerLogger.instance(), sinks=(Sink.FILE,))
    logging.getLogger("urllib3").addHandler(handler)
"""

import logging
from typing import Iterable

from aerlog.core import AerLogger
from aerlog.gate import Sink
from aerlog.records import Severity


def severity_for(levelno: int) -> Severity:
    """Map a stdlib level number onto the five aerlog severities."""
    if levelno >= logging.CRITICAL:
        return Severity.FATAL
    if levelno >= logging.ERROR:
        return Severity.ERROR
    if levelno >= logging.WARNING:
        return Severity.WARNING
    if levelno >= logging.INFO:
        return Severity.INFO
    return Severity.TRACE


class AerLogHandler(logging.Handler):
    """logging.Handler that forwards each record to an AerLogger's sinks."""

    def __init__(
        self,
        logger: AerLogger | None = None,
        sinks: Iterable[Sink] = (Sink.CONSOLE, Sink.FILE),
        level: int = logging.NOTSET,
    ):
        super().__init__(level)
        self._log = logger or AerLogger.instance()
        self.sinks = tuple(Sink(s) for s in sinks)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            severity = severity_for(record.levelno)
            message = record.getMessage()
            for sink in self.sinks:
                if sink is Sink.CONSOLE:
                    self._log.log_console(severity, record.pathname, record.lineno, "%s", message)
                else:
                    self._log.log_file(severity, record.pathname, record.lineno, "%s", message)
        except Exception:
            self.handleError(record)
