"""
Toolchain descriptors.

This module describes the runtime shape of an installed toolchain: whether it
ships a ``Dockerfile`` for a containerized build environment and whether it
has a locally installed program under ``.bin/``.
"""

import logging
import os
import posixpath
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from srclibkit.core.exceptions import InvalidInstallError, ToolchainIOError
from srclibkit.core.filesystem import is_executable_mode

logger = logging.getLogger(__name__)

DOCKERFILE_NAME = "Dockerfile"
PROGRAM_DIR_NAME = ".bin"


@dataclass(frozen=True)
class ToolchainInfo:
    """
    An installed toolchain, as found on disk.

    Attributes:
        name: Path-like toolchain name (e.g. ``github.com/org/toolchain-x``)
        directory: Absolute directory containing the manifest
        manifest_filename: Manifest filename with its on-disk casing
        program: Installed executable (``<directory>/.bin/<basename>``), if any
        dockerfile: ``<directory>/Dockerfile``, if any
    """

    name: str
    directory: Path
    manifest_filename: str
    program: Optional[Path] = None
    dockerfile: Optional[Path] = None

    @property
    def has_program(self) -> bool:
        return self.program is not None

    @property
    def has_dockerfile(self) -> bool:
        return self.dockerfile is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "directory": str(self.directory),
            "manifest_filename": self.manifest_filename,
            "program": str(self.program) if self.program else None,
            "dockerfile": str(self.dockerfile) if self.dockerfile else None,
        }


def _stat_optional(path: Path) -> Optional[os.stat_result]:
    """Stat ``path``; None if it doesn't exist, ToolchainIOError otherwise."""
    try:
        return os.stat(path)
    except FileNotFoundError:
        return None
    except OSError as e:
        raise ToolchainIOError(path, e.strerror or str(e)) from e


def program_path(name: str, directory: Union[str, Path]) -> Optional[Path]:
    """
    Location of the installed program for toolchain ``name``.

    Returns None when the name has no usable basename (e.g. ``"."`` for a
    manifest at the root of a search path entry).
    """
    basename = posixpath.basename(name)
    if basename in ("", ".", ".."):
        return None
    return Path(directory) / PROGRAM_DIR_NAME / basename


def build_info(
    name: str, directory: Union[str, Path], manifest_filename: str
) -> ToolchainInfo:
    """
    Inspect a toolchain directory and build its descriptor.

    A toolchain named ``.`` (manifest at a search path entry's root) has no
    basename, so ``.bin`` is not probed and ``program`` is always None.

    Args:
        name: Resolved toolchain name
        directory: Directory containing the manifest
        manifest_filename: Literal manifest filename that matched

    Returns:
        ToolchainInfo reflecting the current filesystem state

    Raises:
        InvalidInstallError: If ``.bin/<basename>`` exists but has no execute bit
        ToolchainIOError: If probing fails for a reason other than absence
    """
    directory = Path(os.path.abspath(directory))

    dockerfile: Optional[Path] = directory / DOCKERFILE_NAME
    if _stat_optional(dockerfile) is None:
        dockerfile = None

    program = program_path(name, directory)
    if program is not None:
        st = _stat_optional(program)
        if st is None:
            program = None
        elif not is_executable_mode(st.st_mode):
            raise InvalidInstallError(program)

    logger.debug(
        f"Toolchain {name} at {directory} "
        f"(program: {program or '-'}, dockerfile: {dockerfile or '-'})"
    )
    return ToolchainInfo(
        name=name,
        directory=directory,
        manifest_filename=manifest_filename,
        program=program,
        dockerfile=dockerfile,
    )
