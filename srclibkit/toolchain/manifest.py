"""
Toolchain manifest matching.

A directory is a toolchain root when it contains a ``Srclibtoolchain`` file.
Two matching policies are used and they differ on purpose:

- Tree walking (:func:`is_manifest_name`) accepts any casing, so
  ``SrclibToolchain`` found during ``list()`` counts.
- Direct lookup (:func:`find_manifests`) globs for the exact filename, so on a
  case-sensitive filesystem ``lookup()`` only finds ``Srclibtoolchain``.
"""

import glob
import logging
import os
from typing import List

from srclibkit.core.exceptions import ToolchainIOError
from srclibkit.toolchain.search_path import SearchPath

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "Srclibtoolchain"


def is_manifest_name(filename: str) -> bool:
    """Return True if ``filename`` names a manifest, ignoring case."""
    return filename.lower() == MANIFEST_FILENAME.lower()


def normalize_name(name: str) -> str:
    """
    Clean a requested toolchain name.

    Names are relative to a search path entry, so leading separators and
    leading ``..`` components are dropped.

    Example:
        >>> normalize_name("github.com//org/./tc/")
        'github.com/org/tc'
        >>> normalize_name("/../tc")
        'tc'
    """
    parts = os.path.normpath(name).replace(os.sep, "/").split("/")
    while parts and parts[0] in ("", ".."):
        parts.pop(0)
    return "/".join(parts) or "."


def find_manifests(name: str, search_path: SearchPath) -> List[str]:
    """
    Glob for ``<dir>/<name>/Srclibtoolchain`` in every search path entry.

    ``name`` may contain glob metacharacters. Matches found through more than
    one entry (e.g. a repeated entry) are reported once.

    Args:
        name: Normalized toolchain name
        search_path: Directories to search

    Returns:
        Sorted list of absolute manifest paths
    """
    found = set()
    for directory in search_path:
        pattern = f"{directory}/{name}/{MANIFEST_FILENAME}"
        try:
            matches = glob.glob(pattern)
        except OSError as e:
            raise ToolchainIOError(pattern, str(e)) from e
        for match in matches:
            found.add(os.path.abspath(match))
        logger.debug(f"Glob {pattern}: {len(matches)} match(es)")
    return sorted(found)
