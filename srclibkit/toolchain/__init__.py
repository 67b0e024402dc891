"""
Toolchain discovery and resolution.

Toolchains are directories containing a ``Srclibtoolchain`` manifest, found
under the directories of the search path (``SRCLIBPATH``).
"""

from .search_path import SearchPath
from .manifest import MANIFEST_FILENAME, is_manifest_name, find_manifests
from .shadow import ShadowDetector
from .info import ToolchainInfo, build_info
from .walker import TreeWalker, ManifestMatch
from .registry import ToolchainRegistry, lookup, list_toolchains

__all__ = [
    "SearchPath",
    "MANIFEST_FILENAME",
    "is_manifest_name",
    "find_manifests",
    "ShadowDetector",
    "ToolchainInfo",
    "build_info",
    "TreeWalker",
    "ManifestMatch",
    "ToolchainRegistry",
    "lookup",
    "list_toolchains",
]
