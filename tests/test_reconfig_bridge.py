"""
Tests for runtime reconfiguration and the stdlib logging bridge.
"""

import inspect
import logging

import pytest

from aerlog.bridge import AerLogHandler, severity_for
from aerlog.core import AerLogger
from aerlog.gate import Sink
from aerlog.reconfig import LoggerReconfig
from aerlog.records import BuildMode, Severity


@pytest.fixture(autouse=True)
def reset_logger():
    AerLogger.reset()
    yield
    AerLogger.reset()


@pytest.fixture
def std_logger():
    """An isolated stdlib logger; handlers are removed afterwards."""
    logger = logging.getLogger("aerlog.tests.bridge")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    yield logger
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)


# ═══════════════════════════════════════════════════════════════════
#  LoggerReconfig
# ═══════════════════════════════════════════════════════════════════

class TestLoggerReconfig:
    def test_defaults_to_process_instance(self):
        reconfig = LoggerReconfig()
        reconfig.set_console_level("error")
        assert AerLogger.instance().console_threshold == Severity.ERROR

    def test_set_levels(self):
        log = AerLogger()
        reconfig = LoggerReconfig(log)
        reconfig.set_console_level(Severity.WARNING)
        reconfig.set_file_level(4)
        assert reconfig.get_levels() == {"console": "WARNING", "file": "FATAL"}

    def test_invalid_level(self):
        reconfig = LoggerReconfig(AerLogger())
        with pytest.raises(ValueError):
            reconfig.set_file_level("loud")

    def test_set_build_mode(self):
        log = AerLogger()
        LoggerReconfig(log).set_build_mode("dist")
        assert log.build_mode == BuildMode.DIST

    def test_peek_buffer(self):
        log = AerLogger()
        for i in range(5):
            log.log_file(Severity.INFO, "a.py", i + 1, "msg %d", i)
        reconfig = LoggerReconfig(log)
        recent = reconfig.peek_buffer(n=2)
        assert recent == ["[INFO] a.py:4: msg 3", "[INFO] a.py:5: msg 4"]
        assert reconfig.peek_buffer(n=0) == []
        assert log.file_buffer.count == 5

    def test_export(self, tmp_path):
        log = AerLogger()
        log.log_file(Severity.ERROR, "a.py", 1, "x")
        LoggerReconfig(log).export(tmp_path / "out.txt")
        assert (tmp_path / "out.txt").read_text(encoding="utf-8") == "[ERROR] a.py:1: x\n"
        assert log.file_buffer.count == 0

    def test_status(self):
        log = AerLogger()
        log.configure({"file_level": "info", "export_path": "x.txt"})
        log.log_file(Severity.INFO, "a.py", 1, "x")
        status = LoggerReconfig(log).status()
        assert status == {
            "levels": {"console": "TRACE", "file": "INFO"},
            "build_mode": "debug",
            "buffered_lines": 1,
            "export_path": "x.txt",
        }


# ═══════════════════════════════════════════════════════════════════
#  Stdlib bridge
# ═══════════════════════════════════════════════════════════════════

class TestSeverityMapping:
    @pytest.mark.parametrize("levelno, expected", [
        (logging.NOTSET, Severity.TRACE),
        (logging.DEBUG, Severity.TRACE),
        (logging.INFO, Severity.INFO),
        (logging.WARNING, Severity.WARNING),
        (logging.ERROR, Severity.ERROR),
        (logging.CRITICAL, Severity.FATAL),
        (logging.CRITICAL + 5, Severity.FATAL),
    ])
    def test_mapping(self, levelno, expected):
        assert severity_for(levelno) == expected


class TestAerLogHandler:
    def test_forwards_to_file_with_location(self, std_logger):
        log = AerLogger()
        std_logger.addHandler(AerLogHandler(log, sinks=(Sink.FILE,)))
        line = inspect.currentframe().f_lineno + 1
        std_logger.warning("retry %d of %d", 2, 5)
        assert log.file_buffer.lines == (f"[WARNING] {__file__}:{line}: retry 2 of 5",)

    def test_forwards_to_console(self, std_logger, capsys):
        log = AerLogger()
        std_logger.addHandler(AerLogHandler(log, sinks=[Sink.CONSOLE]))
        std_logger.critical("meltdown")
        out = capsys.readouterr().out
        assert out.startswith("[FATAL] ")
        assert out.endswith(": meltdown\n")
        assert log.file_buffer.count == 0

    def test_both_sinks_by_default(self, std_logger, capsys):
        log = AerLogger()
        std_logger.addHandler(AerLogHandler(log))
        std_logger.info("both")
        assert "both" in capsys.readouterr().out
        assert log.file_buffer.count == 1

    def test_respects_aerlog_thresholds(self, std_logger):
        log = AerLogger()
        log.set_file_threshold(Severity.ERROR)
        std_logger.addHandler(AerLogHandler(log, sinks=(Sink.FILE,)))
        std_logger.debug("noise")
        std_logger.warning("still noise")
        std_logger.error("signal")
        assert len(log.file_buffer) == 1
        assert log.file_buffer.lines[0].endswith(": signal")

    def test_message_with_percent_and_no_args(self, std_logger):
        log = AerLogger()
        std_logger.addHandler(AerLogHandler(log, sinks=(Sink.FILE,)))
        std_logger.info("100% complete")
        assert log.file_buffer.lines[0].endswith(": 100% complete")

    def test_defaults_to_process_instance(self, std_logger):
        std_logger.addHandler(AerLogHandler(sinks=("file",)))
        std_logger.error("shared")
        assert AerLogger.instance().file_buffer.count == 1
