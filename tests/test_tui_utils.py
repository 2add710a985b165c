"""Tests for TUI utility functions (non-interactive parts)."""

from __future__ import annotations

from pathlib import Path

from rosls.core.finder import DiscoveredEntry
from rosls.core.parser import PackageDescriptor
from rosls.tui.app import (
    _filter_entries,
    _row_for,
    PackageBrowserApp,
)

ENTRIES = [
    DiscoveredEntry(PackageDescriptor("nav_core", "ament_cmake"), Path("/ws/src/navigation/nav_core")),
    DiscoveredEntry(PackageDescriptor("rclpy_tools", "ament_python"), Path("/ws/src/tools/rclpy_tools")),
    DiscoveredEntry(PackageDescriptor("legacy"), Path("/ws/src/old/legacy")),
]


class TestFilterEntries:
    """Tests for _filter_entries helper."""

    def test_empty_query_returns_all(self) -> None:
        assert _filter_entries(ENTRIES, "") == ENTRIES
        assert _filter_entries(ENTRIES, "   ") == ENTRIES

    def test_returns_copy(self) -> None:
        assert _filter_entries(ENTRIES, "") is not ENTRIES

    def test_matches_name(self) -> None:
        assert [e.name for e in _filter_entries(ENTRIES, "nav")] == ["nav_core"]

    def test_matches_path(self) -> None:
        assert [e.name for e in _filter_entries(ENTRIES, "tools/")] == ["rclpy_tools"]

    def test_case_insensitive(self) -> None:
        assert [e.name for e in _filter_entries(ENTRIES, "LEGACY")] == ["legacy"]

    def test_no_match(self) -> None:
        assert _filter_entries(ENTRIES, "missing") == []


class TestRowFor:
    """Tests for _row_for helper."""

    def test_row(self) -> None:
        assert _row_for(ENTRIES[0]) == ("nav_core", "ament_cmake", "/ws/src/navigation/nav_core")

    def test_default_build_type(self) -> None:
        assert _row_for(ENTRIES[2])[1] == "ros.catkin"


class TestPackageBrowserApp:
    """Tests for app construction (no terminal needed)."""

    def test_defaults(self) -> None:
        app = PackageBrowserApp()
        assert app._paths == []
        assert app._base_paths == []
        assert app._build_base == Path("build")

    def test_options(self) -> None:
        app = PackageBrowserApp(paths=[Path("src")], build_base=Path("/tmp/b"))
        assert app._paths == [Path("src")]
        assert app._build_base == Path("/tmp/b")
