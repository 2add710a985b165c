"""Normalize user-supplied paths before scanning."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, TypeVar

from rosls.exceptions import BuildBaseError

T = TypeVar("T")


def _dedup_adjacent(items: Iterable[T]) -> list[T]:
    out: list[T] = []
    for item in items:
        if out and out[-1] == item:
            continue
        out.append(item)
    return out


def _canonicalize(path: Path) -> Path:
    """Absolute, symlink-free form of path; path unchanged if it can't be resolved."""
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError):
        return path


def normalize_paths(paths: Iterable[Path | str]) -> list[Path]:
    """
    Canonicalize input paths, dropping repeats.

    Only adjacent duplicates are removed, once before and once after
    canonicalization, so "src src ./src" collapses to one entry while the
    first-seen order of distinct paths is kept. Paths that do not exist are
    passed through unchanged. Normalizing an already normalized list is a
    no-op.
    """
    raw = _dedup_adjacent(Path(p) for p in paths)
    return _dedup_adjacent(_canonicalize(p) for p in raw)


def resolve_build_base(path: Path | str) -> Path:
    """
    Return the build base as an absolute path.

    An existing directory is canonicalized. A build base that does not exist
    yet (nothing has been built) is anchored at the current working directory
    instead, since it cannot be looked up on disk.

    Raises:
        BuildBaseError: If the path is relative and the current working
            directory cannot be determined.
    """
    path = Path(path)
    if path.exists():
        return _canonicalize(path)
    if path.is_absolute():
        return path
    try:
        return Path.cwd() / path
    except OSError as e:
        raise BuildBaseError(f"Cannot resolve build base {path}: {e}") from e
