"""Parse package.xml into a package name and build type."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from rosls.exceptions import ManifestParseError

MANIFEST_NAME = "package.xml"

# Build type assumed when <export><build_type> is missing (pre-colcon packages).
DEFAULT_BUILD_TYPE = "ros.catkin"


@dataclass(frozen=True)
class PackageDescriptor:
    """The parts of a package.xml that rosls cares about."""

    name: str
    build_type: str = DEFAULT_BUILD_TYPE


def _build_type(root: ET.Element) -> str:
    export = root.find("export")
    if export is None:
        return DEFAULT_BUILD_TYPE
    elem = export.find("build_type")
    if elem is None or not elem.text or not elem.text.strip():
        return DEFAULT_BUILD_TYPE
    return elem.text.strip()


def parse_package_xml(path: Path) -> PackageDescriptor:
    """
    Parse a package.xml file and return its name and build type.

    Everything else in the manifest (version, dependencies, maintainers...) is
    ignored. Raises ManifestParseError if the file cannot be opened, is not
    well-formed XML, or has no <name> element.
    """
    try:
        tree = ET.parse(path)
    except ET.ParseError as e:
        raise ManifestParseError(path, f"malformed XML ({e})") from e
    except OSError as e:
        raise ManifestParseError(path, e.strerror or str(e)) from e
    root = tree.getroot()

    name_elem = root.find("name")
    if name_elem is None:
        raise ManifestParseError(path, "missing <name> element")
    name = (name_elem.text or "").strip()

    return PackageDescriptor(name=name, build_type=_build_type(root))
