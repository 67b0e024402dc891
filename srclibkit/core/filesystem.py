"""
Filesystem helpers shared by the registry and the build store.
"""

import os
import stat
import tempfile
from pathlib import Path
from typing import Union

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def is_executable_mode(mode: int) -> bool:
    """Return True if any execute permission bit is set in ``mode``."""
    return bool(stat.S_IMODE(mode) & EXECUTE_BITS)


def to_slash_path(path: Union[str, Path]) -> str:
    """Convert a relative OS path to a ``/``-separated name."""
    return str(path).replace(os.sep, "/")


def atomic_write(
    file_path: Union[str, Path], content: Union[str, bytes], encoding: str = "utf-8"
) -> None:
    """
    Write file atomically using temp file + rename.

    The file is never left partially written. If the write fails the original
    file (if any) is unchanged.

    Args:
        file_path: Path to write to
        content: Content to write (string or bytes)
        encoding: Text encoding (used only for string content)

    Example:
        >>> atomic_write('config.json', '{"URI": "github.com/a/b"}')
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    temp_fd, temp_path_str = tempfile.mkstemp(
        dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
    )
    temp_path = Path(temp_path_str)

    try:
        if isinstance(content, str):
            with open(temp_fd, "w", encoding=encoding) as f:
                f.write(content)
        else:
            with open(temp_fd, "wb") as f:
                f.write(content)

        temp_path.replace(file_path)

    except Exception:
        try:
            temp_path.unlink(missing_ok=True)
        except OSError:
            pass
        raise
