"""Custom exceptions for rosls."""

from __future__ import annotations

from pathlib import Path


class RoslsError(Exception):
    """Base exception for rosls."""


class ManifestParseError(RoslsError):
    """package.xml could not be read or does not declare a package name."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not parse {path}: {reason}")


class ScanError(RoslsError):
    """A top-level scan root could not be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Cannot read directory {path}: {reason}")


class BuildBaseError(RoslsError):
    """The build base directory cannot be turned into an absolute path."""
