"""
Tests for the pydantic LoggerConfig schema.

Covers:
- Defaults
- Level / build-mode resolution from names and ints
- export_path validation
- YAML parsing (flat and nested under `logger:`)
- Round trip through to_dict
"""

import pytest
import yaml
from pydantic import ValidationError

from aerlog.config import LoggerConfig
from aerlog.records import BuildMode, Severity


# ═══════════════════════════════════════════════════════════════════
#  Defaults and validation
# ═══════════════════════════════════════════════════════════════════

class TestLoggerConfig:
    def test_defaults_are_permissive(self):
        cfg = LoggerConfig()
        assert cfg.console_level == Severity.TRACE
        assert cfg.file_level == Severity.TRACE
        assert cfg.build_mode == BuildMode.DEBUG
        assert cfg.color is False
        assert cfg.export_path is None

    def test_levels_by_name_and_value(self):
        cfg = LoggerConfig(console_level="warning", file_level=3)
        assert cfg.console_level == Severity.WARNING
        assert cfg.file_level == Severity.ERROR

    def test_build_mode_case_insensitive(self):
        assert LoggerConfig(build_mode="DIST").build_mode == BuildMode.DIST

    def test_unknown_level_raises(self):
        with pytest.raises(ValidationError, match="Unknown severity"):
            LoggerConfig(file_level="verbose")

    def test_out_of_range_level_raises(self):
        with pytest.raises(ValidationError):
            LoggerConfig(console_level=10)

    def test_unknown_build_mode_raises(self):
        with pytest.raises(ValidationError):
            LoggerConfig(build_mode="profile")

    def test_export_path_requires_txt(self):
        with pytest.raises(ValidationError, match=".txt"):
            LoggerConfig(export_path="logs/run.log")

    def test_export_path_ok(self):
        assert LoggerConfig(export_path="logs/run.txt").export_path == "logs/run.txt"


# ═══════════════════════════════════════════════════════════════════
#  YAML loading
# ═══════════════════════════════════════════════════════════════════

class TestYamlLoading:
    YAML = """
console_level: INFO
file_level: warning
build_mode: release
color: true
export_path: logs/session.txt
"""

    def test_from_yaml_string(self):
        cfg = LoggerConfig.from_yaml_string(self.YAML)
        assert cfg.console_level == Severity.INFO
        assert cfg.file_level == Severity.WARNING
        assert cfg.build_mode == BuildMode.RELEASE
        assert cfg.color is True
        assert cfg.export_path == "logs/session.txt"

    def test_from_yaml_file(self, tmp_path):
        path = tmp_path / "aerlog.yaml"
        path.write_text(self.YAML, encoding="utf-8")
        cfg = LoggerConfig.from_yaml(path)
        assert cfg.file_level == Severity.WARNING

    def test_nested_under_logger_key(self):
        cfg = LoggerConfig.from_yaml_string("""
app: demo
logger:
  console_level: error
""")
        assert cfg.console_level == Severity.ERROR

    def test_empty_document_gives_defaults(self):
        assert LoggerConfig.from_yaml_string("") == LoggerConfig()

    def test_invalid_yaml_raises(self):
        with pytest.raises(yaml.YAMLError):
            LoggerConfig.from_yaml_string("console_level: [unclosed")

    def test_to_dict_round_trip(self):
        cfg = LoggerConfig.from_yaml_string(self.YAML)
        d = cfg.to_dict()
        assert d == {
            "console_level": "INFO",
            "file_level": "WARNING",
            "build_mode": "release",
            "color": True,
            "export_path": "logs/session.txt",
        }
        assert LoggerConfig.from_dict(d) == cfg

    def test_to_dict_excludes_none(self):
        assert "export_path" not in LoggerConfig().to_dict()
        assert LoggerConfig().to_dict(exclude_none=False)["export_path"] is None
