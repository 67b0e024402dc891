"""
Toolchain registry.

The registry is the public entry point for finding installed toolchains:

- :meth:`ToolchainRegistry.lookup` resolves one toolchain by name by globbing
  for ``<dir>/<name>/Srclibtoolchain`` in each search path entry.
- :meth:`ToolchainRegistry.list` walks every search path entry and returns all
  toolchains found.

Both build descriptors from the live filesystem on each call and treat a name
provided by two directories as an error.
"""

import logging
import os
from typing import TYPE_CHECKING, List, Optional, Union

from srclibkit.core.exceptions import ToolchainNotFoundError
from srclibkit.toolchain.info import ToolchainInfo, build_info
from srclibkit.toolchain.manifest import find_manifests, normalize_name
from srclibkit.toolchain.search_path import SearchPath
from srclibkit.toolchain.shadow import ShadowDetector
from srclibkit.toolchain.walker import TreeWalker

if TYPE_CHECKING:
    from srclibkit.core.config import SrclibConfig

logger = logging.getLogger(__name__)


class ToolchainRegistry:
    """
    Resolve toolchains installed under a search path.

    The registry holds no state besides its search path, so one instance can
    serve independent callers.

    Example:
        >>> registry = ToolchainRegistry(SearchPath.parse("/home/user/.srclib"))
        >>> info = registry.lookup("sourcegraph.com/sourcegraph/srclib-go")
        >>> info.has_program
        True
    """

    def __init__(self, search_path: Union[SearchPath, str]):
        if isinstance(search_path, str):
            search_path = SearchPath.parse(search_path)
        self.search_path = search_path

    @classmethod
    def from_config(cls, config: "SrclibConfig") -> "ToolchainRegistry":
        return cls(config.search_path)

    def lookup(self, name: str) -> ToolchainInfo:
        """
        Find a toolchain by name.

        Args:
            name: Toolchain name, e.g. ``github.com/org/toolchain-x``

        Returns:
            ToolchainInfo for the single matching toolchain

        Raises:
            ToolchainNotFoundError: If no search path entry has the toolchain
            ToolchainShadowedError: If more than one entry has it
            InvalidInstallError: If its installed program is not executable
            ToolchainIOError: On filesystem errors
        """
        name = normalize_name(name)
        matches = find_manifests(name, self.search_path)

        if not matches:
            raise ToolchainNotFoundError(name, list(self.search_path))

        ShadowDetector().check_unique(name, [os.path.dirname(m) for m in matches])

        logger.debug(f"Resolved toolchain {name} to {matches[0]}")
        directory, manifest_filename = os.path.split(matches[0])
        return build_info(name, directory, manifest_filename)

    def list(self) -> List[ToolchainInfo]:
        """
        Find all toolchains in the search path.

        Returns:
            ToolchainInfo for every toolchain, in walk order

        Raises:
            ToolchainShadowedError: If two directories provide the same name
            InvalidInstallError: If an installed program is not executable
            ToolchainIOError: On filesystem errors (no partial result is returned)
        """
        found: List[ToolchainInfo] = []
        detector = ShadowDetector()

        for match in TreeWalker(self.search_path).walk():
            if not detector.add(match.name, match.directory):
                logger.debug(f"Skipping {match.path}: already listed")
                continue
            found.append(build_info(match.name, match.directory, match.manifest_filename))

        logger.debug(f"Found {len(found)} toolchain(s) in {self.search_path}")
        return found


def lookup(name: str, config: Optional["SrclibConfig"] = None) -> ToolchainInfo:
    """Find a toolchain by name using the configured search path."""
    if config is None:
        from srclibkit.core.config import load_config

        config = load_config()
    return ToolchainRegistry.from_config(config).lookup(name)


def list_toolchains(config: Optional["SrclibConfig"] = None) -> List[ToolchainInfo]:
    """Find all toolchains using the configured search path."""
    if config is None:
        from srclibkit.core.config import load_config

        config = load_config()
    return ToolchainRegistry.from_config(config).list()
