"""
Level gate.

Two independent minimum-severity thresholds, one per sink. A record reaches
a sink's formatter only if severity >= that sink's threshold, so rejected
records cost one comparison and nothing else.
"""

import threading
from enum import Enum

from aerlog.records import Severity


class Sink(str, Enum):
    """Output destinations known to the gate."""
    CONSOLE = "console"
    FILE = "file"


class LevelGate:
    """
    Per-sink severity thresholds.

    Both sinks start fully permissive (TRACE). Thresholds change only
    through set_threshold() and take effect for the very next call.
    """

    def __init__(
        self,
        console: Severity = Severity.TRACE,
        file: Severity = Severity.TRACE,
    ):
        self._thresholds: dict[Sink, Severity] = {
            Sink.CONSOLE: Severity.from_value(console),
            Sink.FILE: Severity.from_value(file),
        }
        self._lock = threading.Lock()

    def accepts(self, sink: Sink, severity: Severity) -> bool:
        return severity >= self._thresholds[sink]

    def threshold(self, sink: Sink) -> Severity:
        return self._thresholds[sink]

    def set_threshold(self, sink: Sink, severity: "Severity | int | str") -> None:
        """Overwrite a sink's threshold. Names and ints must resolve to a Severity."""
        resolved = Severity.from_value(severity)
        if not isinstance(sink, Sink):
            sink = Sink(sink)
        with self._lock:
            self._thresholds[sink] = resolved

    def describe(self) -> dict:
        """Current thresholds, for status output."""
        return {
            sink.value: {"threshold": int(level), "threshold_name": level.name}
            for sink, level in self._thresholds.items()
        }
