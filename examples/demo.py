"""
aerlog walkthrough.

Shows:
1. Per-sink thresholds (console vs. buffered file)
2. Caller location capture
3. Build-mode scoped statements
4. Export with a rejected path and a successful retry
5. Stdlib logging routed through the same gate

Run:
    python examples/demo.py
"""

import logging
import tempfile
from pathlib import Path

from aerlog import AerLogger, AerLogHandler, BuildMode, InvalidPathError, Severity, Sink


def main():
    log = AerLogger(build_mode=BuildMode.RELEASE)
    log.set_console_threshold(Severity.INFO)
    log.set_file_threshold(Severity.WARNING)

    # ── 1-2. Thresholds and call-site location ────────────────
    log.console_trace("not shown: below console threshold")
    log.console_info("starting up with %d workers", 4)
    log.file_info("not buffered: below file threshold")
    log.file_warning("cache miss ratio %.2f", 0.37)
    log.file_error("worker %s crashed", "w-3")
    log.console_next_line()

    # ── 3. Build modes ────────────────────────────────────────
    log.debug_only().console_info("only in debug builds")
    log.release_only().console_info("only in release builds")

    # ── 5. Stdlib logging bridge ──────────────────────────────
    std = logging.getLogger("demo.thirdparty")
    std.setLevel(logging.DEBUG)
    std.propagate = False
    std.addHandler(AerLogHandler(log, sinks=(Sink.FILE,)))
    std.critical("upstream gave up after %d retries", 5)

    # ── 4. Export ─────────────────────────────────────────────
    out_dir = Path(tempfile.mkdtemp())
    try:
        log.export_file(out_dir / "session.log")
    except InvalidPathError as exc:
        log.console_warning("export refused: %s", exc)

    target = out_dir / "session.txt"
    log.export_file(target)
    log.console_info("exported %s:", target)
    print(target.read_text(encoding="utf-8"), end="")


if __name__ == "__main__":
    main()
