"""
Repository configuration cache.

Repository configuration is computed once per commit and cached as JSON in
the repository's build store::

    <repo-root>/.srclib-cache/<commit-id>/config.json

Writes are atomic and serialized with a file lock next to the cached file so
that concurrent builds of the same commit don't interleave.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from filelock import FileLock, Timeout as LockTimeout

from srclibkit.core.directory import get_build_store_dir
from srclibkit.core.exceptions import RepoError
from srclibkit.core.filesystem import atomic_write
from srclibkit.repo.context import RepoContext, detect_repo_context

logger = logging.getLogger(__name__)

CACHED_CONFIG_FILENAME = "config.json"
SRCFILE_NAME = "Srcfile"
LOCK_TIMEOUT = 30


@dataclass
class RepositoryConfig:
    """
    Repository-level configuration.

    Attributes:
        uri: Repository URI (e.g. ``github.com/org/repo``)
        source_units: Source units found in the repository
        scan_ignore: Directories excluded from scanning
        config: Free-form tool configuration
    """

    uri: str = ""
    source_units: List[Dict[str, Any]] = field(default_factory=list)
    scan_ignore: List[str] = field(default_factory=list)
    config: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "URI": self.uri,
            "SourceUnits": self.source_units,
            "ScanIgnore": self.scan_ignore,
            "Config": self.config,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RepositoryConfig":
        if not isinstance(data, dict):
            raise RepoError("Repository configuration must be a JSON object")
        return cls(
            uri=data.get("URI") or "",
            source_units=list(data.get("SourceUnits") or []),
            scan_ignore=list(data.get("ScanIgnore") or []),
            config=dict(data.get("Config") or {}),
        )


@dataclass
class JobContext:
    """A repository context together with its repository configuration."""

    repo: RepoContext
    config: RepositoryConfig


ComputeConfig = Callable[[Path, str], RepositoryConfig]


def get_config_file(repo_dir: Union[str, Path], commit_id: str) -> Path:
    """
    Location of the cached configuration for a commit.

    Raises:
        RepoError: If the repository directory or commit is empty
    """
    if not repo_dir:
        raise RepoError("No repository root directory")
    if not commit_id:
        raise RepoError("No commit ID")
    return get_build_store_dir(repo_dir) / commit_id / CACHED_CONFIG_FILENAME


def _read_json(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise RepoError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise RepoError(f"Cannot read {path}: {e}") from e


def read_srcfile_config(repo_dir: Path, uri: str) -> RepositoryConfig:
    """
    Compute configuration from the repository's ``Srcfile``.

    A repository without a ``Srcfile`` gets an empty configuration. The URI
    always comes from the repository context.
    """
    srcfile = Path(repo_dir) / SRCFILE_NAME
    if srcfile.is_file():
        logger.debug(f"Reading {srcfile}")
        config = RepositoryConfig.from_dict(_read_json(srcfile))
    else:
        config = RepositoryConfig()
    config.uri = uri
    return config


def read_or_compute_repository_config(
    repo_dir: Union[str, Path],
    commit_id: str,
    uri: str,
    compute: Optional[ComputeConfig] = None,
) -> RepositoryConfig:
    """
    Read cached configuration for a commit, or compute it.

    Args:
        repo_dir: Repository root
        commit_id: Commit the configuration applies to
        uri: Repository URI
        compute: Called as ``compute(repo_dir, uri)`` when nothing is cached
            (default: :func:`read_srcfile_config`)

    Returns:
        RepositoryConfig
    """
    config_file = get_config_file(repo_dir, commit_id)
    if config_file.is_file():
        logger.debug(f"Using cached repository config {config_file}")
        return RepositoryConfig.from_dict(_read_json(config_file))

    logger.debug(f"No cached config for {commit_id}, computing")
    return (compute or read_srcfile_config)(Path(repo_dir), uri)


def write_repository_config(
    repo_dir: Union[str, Path],
    commit_id: str,
    config: RepositoryConfig,
    overwrite: bool = False,
) -> bool:
    """
    Cache configuration for a commit.

    Args:
        repo_dir: Repository root
        commit_id: Commit the configuration applies to
        config: Configuration to write
        overwrite: Replace an existing cached file

    Returns:
        True if the file was written, False if it existed and was kept

    Raises:
        RepoError: If the lock can't be acquired or the write fails
    """
    config_file = get_config_file(repo_dir, commit_id)
    if config_file.is_file() and not overwrite:
        return False

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        lock = FileLock(str(config_file) + ".lock", timeout=LOCK_TIMEOUT)
        with lock:
            if config_file.is_file() and not overwrite:
                return False
            atomic_write(config_file, json.dumps(config.to_dict(), indent=2))
    except LockTimeout as e:
        raise RepoError(f"Timed out waiting for lock on {config_file}") from e
    except OSError as e:
        raise RepoError(f"Failed to write {config_file}: {e}") from e

    logger.info(f"Wrote repository config to {config_file}")
    return True


def new_job_context(
    target_dir: Union[str, Path], compute: Optional[ComputeConfig] = None
) -> JobContext:
    """Detect the repository for ``target_dir`` and load its configuration."""
    repo = detect_repo_context(target_dir)
    config = read_or_compute_repository_config(
        repo.repo_root_dir, repo.commit_id, repo.uri, compute
    )
    return JobContext(repo=repo, config=config)
