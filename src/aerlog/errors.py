"""
Exceptions raised by aerlog.

Only exporting the file buffer has a checked failure path. Gating and
formatting never raise handled errors.
"""

import os


class AerLogError(Exception):
    """Base class for all aerlog errors."""


class ExportError(AerLogError):
    """Exporting the file buffer failed. The buffer is left untouched."""

    def __init__(self, message: str, path: "str | os.PathLike[str]"):
        super().__init__(message)
        self.path = os.fspath(path)


class InvalidPathError(ExportError, ValueError):
    """Export path does not end with the required '.txt' suffix. No I/O was attempted."""


class WriteError(ExportError):
    """Opening, writing or closing the export target failed."""
