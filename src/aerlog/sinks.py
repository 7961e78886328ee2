"""
Log sinks (output destinations).

Two sinks, each fed only after the level gate accepts a record:
  - ConsoleSink:   writes every line to stdout immediately.
  - FileLogBuffer: keeps lines in memory until export() persists them
                   to a .txt file and clears the buffer.

Blank lines (next_line) bypass the gate on both sinks.
"""

import os
import sys
import threading
from abc import ABC, abstractmethod
from typing import TextIO

from aerlog.errors import InvalidPathError, WriteError
from aerlog.records import Severity

EXPORT_SUFFIX = ".txt"


class LogSink(ABC):
    """Base sink. Receives fully rendered lines."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def emit(self, line: str, severity: Severity | None = None) -> None:
        """Take one rendered line. Called only after the gate passes."""
        ...

    @abstractmethod
    def next_line(self) -> None:
        """Emit a blank line, independent of any threshold."""
        ...


class ConsoleSink(LogSink):
    """
    Writes to stdout, one flushed write per line.

    Colour is opt-in: with color=False the bytes written are exactly the
    rendered line plus a newline.
    """

    COLORS = {
        Severity.TRACE: "\033[90m",      # gray
        Severity.INFO: "\033[37m",       # white/default
        Severity.WARNING: "\033[33m",    # yellow
        Severity.ERROR: "\033[31m",      # red
        Severity.FATAL: "\033[1;91m",    # bold bright red
    }
    RESET = "\033[0m"

    def __init__(
        self,
        name: str = "console",
        stream: TextIO | None = None,
        color: bool = False,
    ):
        super().__init__(name)
        self._stream = stream
        self.color = color
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        # Looked up per write so redirected stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, line: str, severity: Severity | None = None) -> None:
        if self.color and severity is not None:
            line = f"{self.COLORS[severity]}{line}{self.RESET}"
        with self._lock:
            print(line, file=self.stream, flush=True)

    def next_line(self) -> None:
        with self._lock:
            print(file=self.stream, flush=True)


class FileLogBuffer(LogSink):
    """
    In-memory, insertion-ordered buffer of file-bound lines.

    Grows without limit until exported. export() is all-or-nothing with
    respect to the buffer: it is cleared only after the file has been
    written and closed successfully.
    """

    def __init__(self, name: str = "file"):
        super().__init__(name)
        self._lines: list[str] = []
        self._lock = threading.Lock()

    def emit(self, line: str, severity: Severity | None = None) -> None:
        self.append(line)

    def append(self, line: str) -> None:
        with self._lock:
            self._lines.append(line)

    def next_line(self) -> None:
        with self._lock:
            self._lines.append("")

    def export(self, path: "str | os.PathLike[str]") -> None:
        """
        Write every buffered line to `path`, then clear the buffer.

        Raises:
            InvalidPathError: path does not end with '.txt'. Nothing is touched.
            WriteError: the file could not be opened, written or closed.
                The buffer keeps all its lines so the export can be retried.
        """
        target = os.fsdecode(path)
        if not target.endswith(EXPORT_SUFFIX):
            raise InvalidPathError(
                f"Export path '{target}' must end with '{EXPORT_SUFFIX}'", target
            )

        # Held across write and clear: a concurrent append lands either in
        # this file or in the next export.
        with self._lock:
            try:
                with open(
                    target, "w", encoding="utf-8", errors="backslashreplace", newline="\n"
                ) as f:
                    f.writelines(line + "\n" for line in self._lines)
            except (OSError, UnicodeError) as exc:
                raise WriteError(
                    f"Could not export log buffer to '{target}': {exc}", target
                ) from exc
            self._lines.clear()

    @property
    def lines(self) -> tuple[str, ...]:
        """Snapshot of the buffered lines, oldest first."""
        with self._lock:
            return tuple(self._lines)

    @property
    def count(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)
