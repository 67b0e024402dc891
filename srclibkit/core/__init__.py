"""
Core functionality for srclibkit.

This package contains the foundational modules that other components depend on.
"""

from .exceptions import (
    SrclibError,
    ConfigurationError,
    ToolchainError,
    ToolchainNotFoundError,
    ToolchainShadowedError,
    InvalidInstallError,
    ToolchainIOError,
    RepoError,
    RepoNotFoundError,
    VCSCommandError,
)

from .directory import (
    default_srclib_dir,
    get_build_store_dir,
    update_vcs_ignore,
)

__all__ = [
    "SrclibError",
    "ConfigurationError",
    "ToolchainError",
    "ToolchainNotFoundError",
    "ToolchainShadowedError",
    "InvalidInstallError",
    "ToolchainIOError",
    "RepoError",
    "RepoNotFoundError",
    "VCSCommandError",
    "default_srclib_dir",
    "get_build_store_dir",
    "update_vcs_ignore",
]
