"""
Log formatters.

A formatter turns a LogRecord into one display line:
    [WARNING] src/app/loader.py:42: retrying fetch (attempt 2)

No trailing newline is added here. Each sink decides line termination.
"""

from abc import ABC, abstractmethod
from typing import Any

from aerlog.records import LogRecord, Severity


class LogFormatter(ABC):
    """Base formatter. Transforms LogRecord -> string."""

    @abstractmethod
    def format(self, record: LogRecord) -> str: ...


class LineFormatter(LogFormatter):
    """
    Default single-line layout: severity label, source location, message.
    Example: [ERROR] main.py:17: could not open config.yaml
    """

    def format(self, record: LogRecord) -> str:
        return f"[{record.label}] {record.file}:{record.line}: {record.message}"


def interpolate(fmt: str, args: tuple[Any, ...]) -> str:
    """
    printf-style interpolation of args into fmt.

    Conversion always runs, so "%%" yields "%" with or without args.
    Mismatched args raise from the '%' operator and are the caller's to fix.
    """
    if len(args) == 1 and isinstance(args[0], dict):
        # Mapping keys: "%(name)s"
        return fmt % args[0]
    return fmt % args


def render(
    severity: Severity,
    file: str,
    line: int,
    fmt: str,
    args: tuple[Any, ...] = (),
    formatter: LogFormatter | None = None,
) -> str:
    """Build the record for one call and format it. Pure: no shared state is touched."""
    record = LogRecord(
        severity=severity,
        file=file,
        line=line,
        message=interpolate(fmt, args),
    )
    return (formatter or _DEFAULT_FORMATTER).format(record)


_DEFAULT_FORMATTER = LineFormatter()
