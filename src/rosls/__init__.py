"""rosls: fast colcon-style package listing and compile_commands.json linking."""

from importlib.metadata import version, PackageNotFoundError

from rosls.api import (
    link_compile_commands,
    list_packages,
    DiscoveredEntry,
    LinkStatus,
    PackageDescriptor,
)

__all__ = [
    "link_compile_commands",
    "list_packages",
    "DiscoveredEntry",
    "LinkStatus",
    "PackageDescriptor",
    "__version__",
]

try:
    __version__ = version("rosls")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed as package
