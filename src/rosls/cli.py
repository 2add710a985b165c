"""Command-line interface for rosls: list packages, link compile_commands.json, browse."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from rosls.core.finder import DiscoveredEntry
from rosls.core.symlinks import LinkStatus, provision_symlinks
from rosls.api import list_packages
from rosls.exceptions import RoslsError

DEFAULT_BUILD_BASE = "build"


def _format_entry(entry: DiscoveredEntry, *, names_only: bool = False, paths_only: bool = False) -> str:
    """One output line for a package, in `colcon list` format."""
    if names_only:
        return entry.name
    if paths_only:
        return str(entry.path)
    return f"{entry.name}\t{entry.path}\t({entry.build_type})"


def _print_skipped(path: Path, reason: str) -> None:
    print(f"[WARNING] skipped {path}: {reason}", file=sys.stderr)


def _discover(args: argparse.Namespace) -> list[DiscoveredEntry]:
    """Run discovery with the path options shared by all subcommands."""
    paths = [Path(p) for p in args.paths] if args.paths else None
    base_paths = [Path(p) for p in args.base_paths] if args.base_paths else None
    on_skip = _print_skipped if getattr(args, "verbose", False) else None
    return list_packages(paths, base_paths, on_skip=on_skip)


def cmd_list(args: argparse.Namespace) -> int:
    """List packages found in the given paths."""
    if args.topological_order:
        print(
            "Warning: --topological-order is not implemented, packages are sorted by name",
            file=sys.stderr,
        )
    try:
        entries = _discover(args)
    except RoslsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([e.to_dict() for e in entries], indent=2))
        return 0
    for entry in entries:
        print(_format_entry(entry, names_only=args.names_only, paths_only=args.paths_only))
    return 0


def cmd_link(args: argparse.Namespace) -> int:
    """Symlink compile_commands.json from the build base into each package."""
    try:
        entries = _discover(args)
        statuses = provision_symlinks(
            entries,
            args.build_base,
            force=args.force,
            quiet=args.quiet,
        )
    except RoslsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.quiet and entries:
        created = sum(1 for s in statuses if s is LinkStatus.CREATED)
        failed = sum(1 for s in statuses if s is LinkStatus.FAILED)
        print(f"Linked {created} of {len(entries)} package(s), {failed} failed.")
    return 0


def cmd_tui(args: argparse.Namespace) -> int:
    """Launch the interactive package browser."""
    from rosls.tui.app import PackageBrowserApp

    app = PackageBrowserApp(
        paths=[Path(p) for p in (getattr(args, "paths", None) or [])],
        base_paths=[Path(p) for p in (getattr(args, "base_paths", None) or [])],
        build_base=Path(getattr(args, "build_base", None) or DEFAULT_BUILD_BASE),
    )
    app.run()
    return 0


def _add_path_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--base-paths",
        nargs="*",
        metavar="PATH",
        default=[],
        help="The base paths to recursively crawl for packages",
    )
    parser.add_argument(
        "--paths",
        nargs="*",
        metavar="PATH",
        default=[],
        help=(
            "The paths to check for a package; each path and its direct "
            "subdirectories are checked (use shell wildcards such as src/*)"
        ),
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the rosls CLI."""
    parser = argparse.ArgumentParser(
        prog="rosls",
        description="Fast colcon list replacement for ROS workspaces.",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "--log-base",
        metavar="PATH",
        help="Accepted for colcon compatibility; rosls does not write logs",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # rosls list
    list_parser = subparsers.add_parser(
        "list",
        help="List packages, optionally in topological ordering",
        description="List the packages found in the given paths (default: current directory).",
    )
    list_parser.add_argument(
        "-t",
        "--topological-order",
        action="store_true",
        help="Not implemented; packages are always sorted by name",
    )
    projection = list_parser.add_mutually_exclusive_group()
    projection.add_argument(
        "-n",
        "--names-only",
        action="store_true",
        help="Output only the name of each package but not the path",
    )
    projection.add_argument(
        "-p",
        "--paths-only",
        action="store_true",
        help="Output only the path of each package but not the name",
    )
    list_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    list_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report skipped manifests and unreadable directories on stderr",
    )
    _add_path_arguments(list_parser)
    list_parser.set_defaults(func=cmd_list)

    # rosls link
    link_parser = subparsers.add_parser(
        "link",
        help="Symlink compile_commands.json from the build base into each package",
        description=(
            "For every CMake package, create <package>/compile_commands.json "
            "pointing at <build-base>/<name>/compile_commands.json."
        ),
    )
    link_parser.add_argument(
        "--build-base",
        metavar="DIR",
        default=DEFAULT_BUILD_BASE,
        help=f"The base path for all build directories (default: {DEFAULT_BUILD_BASE})",
    )
    link_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Replace existing compile_commands.json symlinks",
    )
    link_parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Don't print anything",
    )
    link_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report skipped manifests and unreadable directories on stderr",
    )
    _add_path_arguments(link_parser)
    link_parser.set_defaults(func=cmd_link)

    # rosls tui (default if no command)
    tui_parser = subparsers.add_parser(
        "tui",
        help="Launch the interactive terminal UI",
        description="Browse discovered packages and link compile_commands.json interactively.",
    )
    tui_parser.add_argument(
        "--build-base",
        metavar="DIR",
        default=DEFAULT_BUILD_BASE,
        help=f"The base path for all build directories (default: {DEFAULT_BUILD_BASE})",
    )
    _add_path_arguments(tui_parser)
    tui_parser.set_defaults(func=cmd_tui)

    args = parser.parse_args(argv)

    # Default to TUI if no command specified
    if args.command is None:
        return cmd_tui(argparse.Namespace(paths=[], base_paths=[], build_base=DEFAULT_BUILD_BASE))

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
