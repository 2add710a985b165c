"""Discover ROS packages (directories holding a package.xml) in a source tree."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Union

from rosls.core.parser import MANIFEST_NAME, PackageDescriptor, parse_package_xml
from rosls.exceptions import ManifestParseError, ScanError

# A file with any of these names hides its directory (and everything below it).
IGNORE_MARKERS = ("COLCON_IGNORE", "CATKIN_IGNORE", "AMENT_IGNORE")

# Diagnostic hook: called with the offending path and a human-readable reason
# whenever something is skipped instead of reported.
SkipCallback = Callable[[Path, str], None]


@dataclass(frozen=True)
class DiscoveredEntry:
    """A package found on disk: its descriptor plus the package directory."""

    descriptor: PackageDescriptor
    path: Path

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def build_type(self) -> str:
        return self.descriptor.build_type

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output."""
        return {
            "name": self.name,
            "path": str(self.path),
            "build_type": self.build_type,
        }


@dataclass(frozen=True)
class Found:
    """The directory is a package."""

    entry: DiscoveredEntry


@dataclass(frozen=True)
class Ignored:
    """The directory is hidden or carries an ignore marker."""


@dataclass(frozen=True)
class NotADirectory:
    """The path is a file, a symlink, or does not exist."""


@dataclass(frozen=True)
class Descend:
    """Not a package and not ignored: its children may hold packages."""


ScanOutcome = Union[Found, Ignored, NotADirectory, Descend]


def _exists(path: Path) -> bool:
    # Unlike Path.exists on older Pythons, never raises for unreadable parents.
    return os.path.exists(path)


def has_ignore_marker(path: Path) -> bool:
    """True if the directory contains one of IGNORE_MARKERS."""
    return any(_exists(path / marker) for marker in IGNORE_MARKERS)


def is_excluded(path: Path) -> bool:
    """True if discovery must skip this directory and its whole subtree."""
    if path.name.startswith("."):
        return True
    return has_ignore_marker(path)


def classify_path(path: Path, *, on_skip: SkipCallback | None = None) -> ScanOutcome:
    """
    Decide what discovery should do with a single path.

    Ignore rules are checked before the manifest, so an ignored directory is
    never reported even if it holds a valid package.xml. A package.xml that
    fails to parse is not an error: the directory is treated as a plain
    directory and the reason goes to on_skip.
    """
    # Symlinked directories are not followed.
    if path.is_symlink() or not path.is_dir():
        return NotADirectory()
    if is_excluded(path):
        return Ignored()
    manifest = path / MANIFEST_NAME
    if _exists(manifest):
        try:
            descriptor = parse_package_xml(manifest)
        except ManifestParseError as e:
            if on_skip is not None:
                on_skip(manifest, e.reason)
        else:
            return Found(DiscoveredEntry(descriptor=descriptor, path=path))
    return Descend()


def find_packages(
    root: Path,
    *,
    recursive: bool,
    on_skip: SkipCallback | None = None,
) -> list[DiscoveredEntry]:
    """
    Find packages at or below root.

    Args:
        root: Directory to search. If it is a package itself, only that
            package is returned; if it holds an ignore marker, nothing is.
        recursive: If False, only root and its immediate children are
            checked; if True, the whole tree is walked (package directories
            are never descended into).
        on_skip: Optional callable receiving (path, reason) for every
            manifest or subdirectory that had to be skipped.

    Returns:
        Discovered entries in walk order (unsorted, may contain duplicates
        when called for several roots; see aggregate()).

    Raises:
        ScanError: If root is a directory that cannot be listed.
    """
    outcome = classify_path(root, on_skip=on_skip)
    if isinstance(outcome, Found):
        return [outcome.entry]
    # A marker on the root hides it; a dot-named root (e.g. a hidden workspace) does not.
    if not root.is_dir() or has_ignore_marker(root):
        return []

    results: list[DiscoveredEntry] = []
    try:
        children = sorted(root.iterdir())
    except OSError as e:
        raise ScanError(root, e.strerror or str(e)) from e

    # Explicit stack: depth is bounded by the filesystem, not the interpreter.
    stack = list(reversed(children))
    while stack:
        child = stack.pop()
        outcome = classify_path(child, on_skip=on_skip)
        if isinstance(outcome, Found):
            results.append(outcome.entry)
        elif isinstance(outcome, Descend):
            if not recursive:
                continue
            try:
                grandchildren = sorted(child.iterdir())
            except OSError as e:
                if on_skip is not None:
                    on_skip(child, e.strerror or str(e))
                continue
            stack.extend(reversed(grandchildren))
        elif isinstance(outcome, (Ignored, NotADirectory)):
            continue
        else:
            raise AssertionError(f"unhandled scan outcome: {outcome!r}")

    return results


def aggregate(entries: Iterable[DiscoveredEntry]) -> list[DiscoveredEntry]:
    """
    Sort entries by (name, path) and drop exact duplicates.

    Two entries are duplicates only if both name and path match; the same
    package name found at two locations is reported twice.
    """
    out: list[DiscoveredEntry] = []
    for entry in sorted(entries, key=lambda e: (e.name, e.path)):
        if out and out[-1].name == entry.name and out[-1].path == entry.path:
            continue
        out.append(entry)
    return out
