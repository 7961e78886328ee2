"""
Pydantic configuration schema for aerlog.

Everything is optional. An empty YAML document yields a permissive logger:
both sinks at TRACE, debug build, no colour, no export at shutdown.

Usage:
    config = LoggerConfig.from_yaml("aerlog.yaml")
    log = AerLogger()
    log.configure(config)

YAML shape (optionally nested under a top-level `logger:` key):
    console_level: INFO
    file_level: WARNING
    build_mode: release
    color: true
    export_path: logs/session.txt
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, field_validator

from aerlog.records import BuildMode, Severity
from aerlog.sinks import EXPORT_SUFFIX


class LoggerConfig(BaseModel):
    console_level: Severity = Severity.TRACE
    file_level: Severity = Severity.TRACE
    build_mode: BuildMode = BuildMode.DEBUG
    color: bool = False
    export_path: Optional[str] = None

    @field_validator("console_level", "file_level", mode="before")
    @classmethod
    def resolve_severity(cls, value: Any) -> Severity:
        return Severity.from_value(value)

    @field_validator("build_mode", mode="before")
    @classmethod
    def resolve_build_mode(cls, value: Any) -> BuildMode:
        return BuildMode.from_value(value)

    @field_validator("export_path")
    @classmethod
    def check_export_suffix(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.endswith(EXPORT_SUFFIX):
            raise ValueError(f"export_path must end with '{EXPORT_SUFFIX}', got '{value}'")
        return value

    @classmethod
    def from_yaml(cls, path: str | Path) -> "LoggerConfig":
        """Load and validate from a YAML file."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.from_yaml_string(raw)

    @classmethod
    def from_yaml_string(cls, yaml_string: str) -> "LoggerConfig":
        """Load and validate from a YAML string."""
        data = yaml.safe_load(yaml_string) or {}
        if isinstance(data, dict) and isinstance(data.get("logger"), dict):
            data = data["logger"]
        return cls.model_validate(data)

    @classmethod
    def from_dict(cls, data: dict) -> "LoggerConfig":
        """Load and validate from a dict."""
        return cls.model_validate(data)

    def to_dict(self, exclude_none: bool = True) -> dict:
        """Export as a plain dict with level and mode names, YAML-ready."""
        d = {
            "console_level": self.console_level.name,
            "file_level": self.file_level.name,
            "build_mode": self.build_mode.value,
            "color": self.color,
            "export_path": self.export_path,
        }
        if exclude_none:
            d = {k: v for k, v in d.items() if v is not None}
        return d
