"""
Centralized exception hierarchy for srclibkit.

This module defines all custom exceptions used across the codebase so that
callers can branch on "not found" vs "shadowed" vs "I/O" failures by type
instead of parsing messages.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Union


# ============================================================================
# Base Exceptions
# ============================================================================


class SrclibError(Exception):
    """Base exception for all srclibkit errors."""

    pass


class ConfigurationError(SrclibError):
    """Raised when the search path or another setting cannot be determined."""

    pass


# ============================================================================
# Toolchain-related Exceptions
# ============================================================================


class ToolchainError(SrclibError):
    """Base exception for toolchain-related errors."""

    pass


class ToolchainNotFoundError(ToolchainError):
    """Raised when no manifest matches a requested toolchain name."""

    def __init__(self, name: str, search_path: Optional[Sequence[str]] = None):
        self.name = name
        self.search_path = list(search_path or [])
        msg = f"Toolchain not found: {name}"
        if self.search_path:
            msg += f" (searched: {':'.join(self.search_path)})"
        super().__init__(msg)


class ToolchainShadowedError(ToolchainError):
    """Raised when two or more directories provide the same toolchain name."""

    def __init__(self, name: str, directories: Sequence[Union[str, Path]]):
        self.name = name
        self.directories: List[str] = [str(d) for d in directories]
        super().__init__(
            f"Shadowed toolchain {name!r}: found in {len(self.directories)} "
            f"directories: {', '.join(self.directories)}"
        )


class InvalidInstallError(ToolchainError):
    """Raised when an installed toolchain program is not executable."""

    def __init__(self, program: Union[str, Path]):
        self.program = Path(program)
        super().__init__(
            f"Installed toolchain program {str(program)!r} is not executable (+x)"
        )


class ToolchainIOError(ToolchainError):
    """Raised when a filesystem operation fails while resolving toolchains.

    The original ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Filesystem error at {self.path}: {reason}")


# ============================================================================
# Repository Exceptions
# ============================================================================


class RepoError(SrclibError):
    """Base exception for repository context errors."""

    pass


class RepoNotFoundError(RepoError):
    """Raised when no repository root can be detected for a directory."""

    pass


class VCSCommandError(RepoError):
    """Raised when a version control command fails."""

    def __init__(self, command: Sequence[str], reason: str):
        self.command = list(command)
        self.reason = reason
        super().__init__(f"Command '{' '.join(self.command)}' failed: {reason}")
