"""Tests for package.xml parser."""

from pathlib import Path

import pytest

from rosls.core.parser import (
    DEFAULT_BUILD_TYPE,
    parse_package_xml,
    PackageDescriptor,
)
from rosls.exceptions import ManifestParseError


class TestPackageDescriptor:
    """Tests for PackageDescriptor dataclass."""

    def test_default_build_type(self) -> None:
        assert PackageDescriptor(name="pkg").build_type == "ros.catkin"

    def test_equality(self) -> None:
        assert PackageDescriptor("a", "ament_cmake") == PackageDescriptor("a", "ament_cmake")
        assert PackageDescriptor("a", "ament_cmake") != PackageDescriptor("a", "ament_python")


class TestParsePackageXml:
    """Tests for parse_package_xml function."""

    def test_not_found(self) -> None:
        with pytest.raises(ManifestParseError):
            parse_package_xml(Path("/nonexistent/package.xml"))

    def test_is_directory(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestParseError):
            parse_package_xml(tmp_path)

    def test_name_only(self, tmp_path: Path) -> None:
        pkg = tmp_path / "package.xml"
        pkg.write_text("<package><name>my_pkg</name></package>")
        info = parse_package_xml(pkg)
        assert info.name == "my_pkg"
        assert info.build_type == DEFAULT_BUILD_TYPE

    def test_full_package(self, tmp_path: Path) -> None:
        pkg = tmp_path / "package.xml"
        pkg.write_text(
            """<?xml version="1.0"?>
<?xml-model href="http://download.ros.org/schema/package_format3.xsd"?>
<package format="3">
  <name>test_pkg</name>
  <version>1.2.3</version>
  <description>A test package</description>
  <maintainer email="a@b.c">someone</maintainer>
  <license>MIT</license>
  <buildtool_depend>ament_cmake</buildtool_depend>
  <depend>rclcpp</depend>
  <export>
    <build_type>ament_cmake</build_type>
  </export>
</package>
"""
        )
        info = parse_package_xml(pkg)
        assert info == PackageDescriptor(name="test_pkg", build_type="ament_cmake")

    def test_export_without_build_type(self, tmp_path: Path) -> None:
        pkg = tmp_path / "package.xml"
        pkg.write_text(
            "<package><name>pkg</name><export><rosdoc config='x'/></export></package>"
        )
        assert parse_package_xml(pkg).build_type == DEFAULT_BUILD_TYPE

    def test_empty_build_type(self, tmp_path: Path) -> None:
        pkg = tmp_path / "package.xml"
        pkg.write_text("<package><name>pkg</name><export><build_type/></export></package>")
        assert parse_package_xml(pkg).build_type == DEFAULT_BUILD_TYPE

    def test_strips_whitespace(self, tmp_path: Path) -> None:
        pkg = tmp_path / "package.xml"
        pkg.write_text(
            "<package>\n  <name>\n    spaced\n  </name>\n"
            "  <export><build_type> ament_python </build_type></export>\n</package>"
        )
        info = parse_package_xml(pkg)
        assert info.name == "spaced"
        assert info.build_type == "ament_python"

    def test_nested_name_is_not_package_name(self, tmp_path: Path) -> None:
        pkg = tmp_path / "package.xml"
        pkg.write_text("<package><export><name>nested</name></export></package>")
        with pytest.raises(ManifestParseError, match="missing <name>"):
            parse_package_xml(pkg)

    def test_missing_name(self, tmp_path: Path) -> None:
        pkg = tmp_path / "package.xml"
        pkg.write_text("<package><version>1.0</version></package>")
        with pytest.raises(ManifestParseError) as exc_info:
            parse_package_xml(pkg)
        assert exc_info.value.path == pkg

    def test_invalid_xml(self, tmp_path: Path) -> None:
        pkg = tmp_path / "package.xml"
        pkg.write_text("not valid xml <<<")
        with pytest.raises(ManifestParseError, match="malformed XML"):
            parse_package_xml(pkg)

    def test_empty_file(self, tmp_path: Path) -> None:
        pkg = tmp_path / "package.xml"
        pkg.write_text("")
        with pytest.raises(ManifestParseError):
            parse_package_xml(pkg)
