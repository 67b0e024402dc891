"""
Search path tree walking.

The walker visits every search path entry depth-first and reports each
toolchain manifest it finds, together with the toolchain name derived from
the manifest's location.

Rules applied to every entry below a walk root:

- names starting with ``.`` or ``_`` are skipped (directories are pruned);
- other symlinks are not followed in place; the link is queued as an extra walk
  root that keeps the *origin* of the search path entry it was found under,
  so toolchains behind it are named by their logical location;
- regular files named ``Srclibtoolchain`` (any casing) are manifests, and so
  are symlinks with that name pointing at a regular file.
"""

import logging
import os
import stat
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterator, Tuple

from srclibkit.core.exceptions import ToolchainIOError
from srclibkit.core.filesystem import to_slash_path
from srclibkit.toolchain.manifest import is_manifest_name
from srclibkit.toolchain.search_path import SearchPath

logger = logging.getLogger(__name__)

SKIP_PREFIXES = (".", "_")


@dataclass(frozen=True)
class ManifestMatch:
    """A manifest found by the walker."""

    name: str
    directory: str
    manifest_filename: str
    path: str


@dataclass(frozen=True)
class WalkRoot:
    """
    A queued walk root.

    Attributes:
        path: Directory to walk (a search path entry or a symlink below one)
        origin: Search path entry that names are computed relative to
        ancestry: Real paths of the roots this one was reached through
    """

    path: str
    origin: str
    ancestry: Tuple[str, ...] = field(default=())


def _io_error(path: str, error: OSError) -> ToolchainIOError:
    return ToolchainIOError(path, error.strerror or str(error))


class TreeWalker:
    """
    Walk a search path and yield toolchain manifests.

    Roots are processed from a FIFO worklist: first the search path entries in
    order, then symlinked subtrees in the order they were discovered. Entries
    within a directory are visited in sorted order. Any ``OSError`` aborts the
    walk as :class:`ToolchainIOError`.

    Example:
        >>> walker = TreeWalker(SearchPath.parse("/home/user/.srclib"))
        >>> [m.name for m in walker.walk()]
        ['sourcegraph.com/sourcegraph/srclib-go']
    """

    def __init__(self, search_path: SearchPath):
        self.search_path = search_path

    def walk(self) -> Iterator[ManifestMatch]:
        queue: Deque[WalkRoot] = deque(
            WalkRoot(path=entry, origin=entry) for entry in self.search_path
        )
        while queue:
            root = queue.popleft()
            yield from self._walk_root(root, queue)

    def _walk_root(self, root: WalkRoot, queue: Deque[WalkRoot]) -> Iterator[ManifestMatch]:
        try:
            st = os.stat(root.path)
            real_path = os.path.realpath(root.path)
        except OSError as e:
            raise _io_error(root.path, e) from e

        if not stat.S_ISDIR(st.st_mode):
            logger.debug(f"Skipping walk root {root.path}: not a directory")
            return

        if real_path in root.ancestry:
            logger.warning(f"Skipping symlink cycle at {root.path} -> {real_path}")
            return

        logger.debug(f"Walking {root.path} (names relative to {root.origin})")
        child_ancestry = root.ancestry + (real_path,)
        yield from self._walk_dir(root.path, root, child_ancestry, queue)

    def _walk_dir(
        self,
        directory: str,
        root: WalkRoot,
        child_ancestry: Tuple[str, ...],
        queue: Deque[WalkRoot],
    ) -> Iterator[ManifestMatch]:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise _io_error(directory, e) from e

        for entry in entries:
            if entry.name.startswith(SKIP_PREFIXES):
                continue

            try:
                is_symlink = entry.is_symlink()
                is_dir = not is_symlink and entry.is_dir(follow_symlinks=False)
                is_file = not is_symlink and entry.is_file(follow_symlinks=False)
            except OSError as e:
                raise _io_error(entry.path, e) from e

            if is_symlink and is_manifest_name(entry.name):
                try:
                    is_file = stat.S_ISREG(os.stat(entry.path).st_mode)
                except OSError as e:
                    raise _io_error(entry.path, e) from e

            if is_file and is_manifest_name(entry.name):
                yield self._match(directory, entry, root)
            elif is_symlink:
                logger.debug(f"Queueing symlinked tree {entry.path}")
                queue.append(
                    WalkRoot(path=entry.path, origin=root.origin, ancestry=child_ancestry)
                )
            elif is_dir:
                yield from self._walk_dir(entry.path, root, child_ancestry, queue)

    def _match(self, directory: str, entry: os.DirEntry, root: WalkRoot) -> ManifestMatch:
        return ManifestMatch(
            name=to_slash_path(os.path.relpath(directory, root.origin)),
            directory=os.path.abspath(directory),
            manifest_filename=entry.name,
            path=os.path.abspath(entry.path),
        )
