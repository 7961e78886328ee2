"""
Severity levels and log records.

Five severities in a fixed total order. The member name doubles as the
label printed in every rendered line.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum


class Severity(IntEnum):
    """Ordered severity of a log record: TRACE < INFO < WARNING < ERROR < FATAL."""
    TRACE = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4

    @property
    def label(self) -> str:
        return self.name

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        """Resolve severity from string name, case-insensitive."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(
                f"Unknown severity '{name}'. "
                f"Valid severities: {', '.join(m.name for m in cls)}"
            )

    @classmethod
    def from_value(cls, value: "int | str | Severity") -> "Severity":
        """Resolve severity from a member, an int or a name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_name(value)
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(
                    f"No severity with value {value}. "
                    f"Valid values: {', '.join(f'{m.name}={m.value}' for m in cls)}"
                )
        raise TypeError(f"Expected Severity, int or str, got {type(value).__name__}")


class BuildMode(str, Enum):
    """Build configuration a log statement can be restricted to."""
    DEBUG = "debug"
    RELEASE = "release"
    DIST = "dist"

    @classmethod
    def from_value(cls, value: "str | BuildMode") -> "BuildMode":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                raise ValueError(
                    f"Unknown build mode '{value}'. "
                    f"Valid modes: {', '.join(m.value for m in cls)}"
                )
        raise TypeError(f"Expected BuildMode or str, got {type(value).__name__}")


@dataclass(frozen=True)
class LogRecord:
    """
    One accepted logging call.

    The message is already interpolated. Records are short-lived: the
    console sink writes them out, the file buffer keeps only the rendered line.
    """
    severity: Severity
    file: str
    line: int
    message: str

    @property
    def label(self) -> str:
        return self.severity.label
