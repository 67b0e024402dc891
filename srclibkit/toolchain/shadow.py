"""
Duplicate toolchain name detection.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Union

from srclibkit.core.exceptions import ToolchainShadowedError

logger = logging.getLogger(__name__)


class ShadowDetector:
    """
    Track which directory produced each toolchain name.

    A toolchain name provided by two directories is always an error; there is
    no precedence between search path entries. Create one detector per
    ``list()`` or ``lookup()`` call.

    Example:
        >>> detector = ShadowDetector()
        >>> detector.add("go", "/a/go")
        True
        >>> detector.add("go", "/b/go")  # raises ToolchainShadowedError
    """

    def __init__(self):
        self._seen: Dict[str, str] = {}

    def add(self, name: str, directory: Union[str, Path]) -> bool:
        """
        Record that ``directory`` provides ``name``.

        Returns:
            False if the same directory already provided ``name`` (e.g. a
            repeated search path entry), True otherwise

        Raises:
            ToolchainShadowedError: If another directory already provided ``name``
        """
        directory = str(directory)
        other = self._seen.get(name)
        if other is not None and other != directory:
            logger.debug(f"Toolchain {name} seen in {other} and {directory}")
            raise ToolchainShadowedError(name, [other, directory])
        if other is not None:
            return False
        self._seen[name] = directory
        return True

    def check_unique(self, name: str, directories: Iterable[Union[str, Path]]) -> None:
        """
        Require that at most one directory provides ``name``.

        Raises:
            ToolchainShadowedError: Naming every directory when more than one
                is given
        """
        distinct = list(dict.fromkeys(str(d) for d in directories))
        if len(distinct) > 1:
            raise ToolchainShadowedError(name, distinct)
        for directory in distinct:
            self.add(name, directory)

    def __contains__(self, name: str) -> bool:
        return name in self._seen

    def __len__(self) -> int:
        return len(self._seen)
