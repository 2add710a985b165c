"""Link each package's compile_commands.json to the one generated in the build tree."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Callable, Iterable

from rosls.core.finder import DiscoveredEntry
from rosls.core.paths import resolve_build_base

BUILD_DESCRIPTION_NAME = "CMakeLists.txt"
COMPILE_COMMANDS_NAME = "compile_commands.json"

Echo = Callable[[str], None]


class LinkStatus(Enum):
    """What happened to a single package."""

    CREATED = "created"
    SKIPPED = "skipped"
    FAILED = "failed"


def link_paths(entry: DiscoveredEntry, build_base: Path) -> tuple[Path, Path]:
    """Return (link_path, target_path) for a package."""
    link_path = entry.path / COMPILE_COMMANDS_NAME
    target_path = build_base / entry.name / COMPILE_COMMANDS_NAME
    return link_path, target_path


def provision_symlink(
    entry: DiscoveredEntry,
    build_base: Path,
    *,
    force: bool = False,
    quiet: bool = False,
    echo: Echo = print,
) -> LinkStatus:
    """
    Create <package>/compile_commands.json -> <build_base>/<name>/compile_commands.json.

    Only CMake packages are linked. An existing symlink is replaced when
    force is set; anything else already at the link path is left alone and
    reported. Never raises: every failure is reported through echo (unless
    quiet) and returned as LinkStatus.FAILED.

    Args:
        entry: Discovered package.
        build_base: Absolute build base (see resolve_build_base).
        force: Replace an existing symlink at the link path.
        quiet: Suppress all messages.
        echo: Where messages go (stdout by default).
    """

    def report(message: str) -> None:
        if not quiet:
            echo(message)

    if not (entry.path / BUILD_DESCRIPTION_NAME).exists():
        report(f"[INFO] {entry.name}: no {BUILD_DESCRIPTION_NAME}, skipping")
        return LinkStatus.SKIPPED

    link_path, target_path = link_paths(entry, build_base)

    if force and link_path.is_symlink():
        try:
            link_path.unlink()
        except OSError as e:
            report(f"[ERROR] {entry.name}: could not remove existing link {link_path}: {e}")
            return LinkStatus.FAILED

    try:
        link_path.symlink_to(target_path)
    except FileExistsError:
        report(
            f"[WARNING] {entry.name}: {link_path} already exists, "
            "use --force to replace an existing link"
        )
        return LinkStatus.FAILED
    except OSError as e:
        report(f"[ERROR] {entry.name}: could not create link {link_path}: {e}")
        return LinkStatus.FAILED

    report(f"[INFO] Created symlink {link_path} -> {target_path}")
    return LinkStatus.CREATED


def provision_symlinks(
    entries: Iterable[DiscoveredEntry],
    build_base: Path | str,
    *,
    force: bool = False,
    quiet: bool = False,
    echo: Echo = print,
) -> list[LinkStatus]:
    """Link every entry, continuing past per-package failures.

    Raises:
        BuildBaseError: If build_base cannot be made absolute.
    """
    base = resolve_build_base(build_base)
    return [
        provision_symlink(entry, base, force=force, quiet=quiet, echo=echo)
        for entry in entries
    ]
