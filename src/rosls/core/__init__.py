"""Core library: package.xml parsing, package discovery, compile_commands linking."""

from rosls.core.finder import (
    aggregate,
    classify_path,
    find_packages,
    is_excluded,
    Descend,
    DiscoveredEntry,
    Found,
    Ignored,
    NotADirectory,
    ScanOutcome,
)
from rosls.core.parser import parse_package_xml, PackageDescriptor
from rosls.core.paths import normalize_paths, resolve_build_base
from rosls.core.symlinks import provision_symlink, provision_symlinks, LinkStatus

__all__ = [
    "aggregate",
    "classify_path",
    "find_packages",
    "is_excluded",
    "Descend",
    "DiscoveredEntry",
    "Found",
    "Ignored",
    "NotADirectory",
    "ScanOutcome",
    "parse_package_xml",
    "PackageDescriptor",
    "normalize_paths",
    "resolve_build_base",
    "provision_symlink",
    "provision_symlinks",
    "LinkStatus",
]
