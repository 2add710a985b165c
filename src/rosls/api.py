"""Public API: use rosls from Python or from other tools."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from rosls.core.finder import aggregate, find_packages, DiscoveredEntry, SkipCallback
from rosls.core.parser import PackageDescriptor
from rosls.core.paths import normalize_paths
from rosls.core.symlinks import provision_symlinks, Echo, LinkStatus
from rosls.exceptions import ScanError

__all__ = [
    "link_compile_commands",
    "list_packages",
    "DiscoveredEntry",
    "LinkStatus",
    "PackageDescriptor",
]


def list_packages(
    paths: Iterable[Path | str] | None = None,
    base_paths: Iterable[Path | str] | None = None,
    *,
    on_skip: SkipCallback | None = None,
) -> list[DiscoveredEntry]:
    """
    Discover packages the way `colcon list` does.

    Args:
        paths: Directories that may themselves be packages; each one and its
            immediate children are checked, without recursing further.
        base_paths: Directories to crawl recursively for packages.
        on_skip: Optional callable receiving (path, reason) for every item
            skipped during discovery (unparsable manifest, unreadable dir).

    If both lists are empty the current working directory is crawled.

    Returns:
        Entries sorted by (name, path), exact duplicates removed.

    Raises:
        ScanError: If one of the given roots, or the current working
            directory, cannot be read.
    """
    candidates = normalize_paths(paths or [])
    bases = normalize_paths(base_paths or [])

    results: list[DiscoveredEntry] = []
    for candidate in candidates:
        results.extend(find_packages(candidate, recursive=False, on_skip=on_skip))

    if not candidates and not bases:
        try:
            cwd = Path.cwd()
        except OSError as e:
            raise ScanError(Path("."), e.strerror or str(e)) from e
        results.extend(find_packages(cwd, recursive=True, on_skip=on_skip))
    else:
        for base in bases:
            results.extend(find_packages(base, recursive=True, on_skip=on_skip))

    return aggregate(results)


def link_compile_commands(
    entries: Iterable[DiscoveredEntry],
    build_base: Path | str = "build",
    *,
    force: bool = False,
    quiet: bool = False,
    echo: Echo = print,
) -> list[LinkStatus]:
    """
    Symlink each package's compile_commands.json into the build tree.

    Args:
        entries: Packages, typically from list_packages().
        build_base: Build directory holding one subdirectory per package.
            Relative paths are taken from the current working directory.
        force: Replace existing compile_commands.json symlinks.
        quiet: Don't print [INFO]/[WARNING]/[ERROR] lines.
        echo: Callable receiving each message (default: print).

    Returns:
        One LinkStatus per entry, in order.

    Raises:
        BuildBaseError: If build_base cannot be made absolute.
    """
    return provision_symlinks(entries, build_base, force=force, quiet=quiet, echo=echo)
