"""
Directory layout for srclibkit.

This module resolves the well-known locations srclibkit reads from and
writes to. It provides the user-level toolchain directory used when no
search path is configured, and the per-repository build store.

Directory Structure:
    User toolchains (~/.srclib/):
        - <toolchain path>/Srclibtoolchain : Toolchain manifest
        - <toolchain path>/Dockerfile      : Optional container build
        - <toolchain path>/.bin/<name>     : Optional installed program

    Repository build store (<repo-root>/.srclib-cache/):
        - <commit-id>/config.json          : Cached repository configuration
"""

from pathlib import Path, PurePath
from typing import Union

from srclibkit.core.exceptions import ConfigurationError, RepoError

SRCLIB_DIR_NAME = ".srclib"
BUILD_STORE_DIR_NAME = ".srclib-cache"


def default_srclib_dir() -> Path:
    """
    Get the default toolchain directory (``~/.srclib``).

    Returns:
        Path: The user's srclib directory.

    Raises:
        ConfigurationError: If the current user has no home directory.

    Example:
        >>> default_srclib_dir()
        PosixPath('/home/user/.srclib')
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise ConfigurationError(
            f"No SRCLIBPATH and the home directory of the current user "
            f"cannot be determined: {e}"
        ) from e

    if str(home) in ("", ".", "~"):
        raise ConfigurationError(
            "No SRCLIBPATH and the current user has no home directory."
        )
    return home / SRCLIB_DIR_NAME


def get_build_store_dir(repo_root: Union[str, Path]) -> Path:
    """
    Get the build store directory for a repository.

    Args:
        repo_root: Root directory of the repository.

    Returns:
        Path: ``<repo_root>/.srclib-cache``
    """
    if not isinstance(repo_root, (Path, PurePath)):
        repo_root = Path(repo_root)
    return repo_root / BUILD_STORE_DIR_NAME


def update_vcs_ignore(repo_root: Path, ignore_filename: str = ".gitignore") -> bool:
    """
    Add the build store directory to a VCS ignore file if not already present.

    Args:
        repo_root: Root directory of the repository.
        ignore_filename: ``.gitignore`` or ``.hgignore``.

    Returns:
        True if the ignore file was modified, False if the pattern was present.

    Raises:
        RepoError: If the repository root is missing or the file can't be written.
    """
    if not isinstance(repo_root, (Path, PurePath)):
        repo_root = Path(repo_root)

    if not repo_root.is_dir():
        raise RepoError(f"Repository root is not a directory: {repo_root}")

    ignore_path = repo_root / ignore_filename
    pattern = f"{BUILD_STORE_DIR_NAME}/"

    existing_content = ""
    if ignore_path.exists():
        try:
            existing_content = ignore_path.read_text(encoding="utf-8")
        except OSError as e:
            raise RepoError(f"Failed to read {ignore_path}: {e}") from e

    if pattern in existing_content.splitlines():
        return False

    if existing_content and not existing_content.endswith("\n"):
        existing_content += "\n"

    # hgignore defaults to regexp syntax; glob keeps the pattern literal
    header = ""
    if ignore_filename == ".hgignore" and "syntax: glob" not in existing_content:
        header = "syntax: glob\n"

    try:
        ignore_path.write_text(
            f"{existing_content}{header}{pattern}\n", encoding="utf-8"
        )
    except OSError as e:
        raise RepoError(f"Failed to update {ignore_path}: {e}") from e
    return True
