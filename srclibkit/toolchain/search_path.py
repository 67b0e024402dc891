"""
Search path parsing.

A search path is an ordered, colon-separated list of directories scanned for
toolchains (the ``SRCLIBPATH`` format). Order is preserved and entries are not
deduplicated; empty entries mean the current directory.
"""

from typing import Iterable, Iterator, List

SEPARATOR = ":"


class SearchPath:
    """Ordered list of toolchain search directories."""

    def __init__(self, entries: Iterable[str] = ()):
        self._entries: List[str] = [entry or "." for entry in entries]

    @classmethod
    def parse(cls, raw: str) -> "SearchPath":
        """
        Parse a colon-separated search path string.

        Args:
            raw: String such as ``"/opt/srclib::/home/user/.srclib"``

        Returns:
            SearchPath with each empty segment replaced by ``"."``

        Example:
            >>> list(SearchPath.parse("a::b"))
            ['a', '.', 'b']
        """
        return cls(raw.split(SEPARATOR))

    @property
    def entries(self) -> List[str]:
        return list(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> str:
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SearchPath):
            return self._entries == other._entries
        return NotImplemented

    def __str__(self) -> str:
        return SEPARATOR.join(self._entries)

    def __repr__(self) -> str:
        return f"SearchPath({self._entries!r})"
