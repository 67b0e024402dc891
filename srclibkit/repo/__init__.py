"""
Repository context and configuration cache.

These services sit next to the toolchain registry; the registry itself never
uses them.
"""

from .context import RepoContext, detect_repo_context, make_repo_uri
from .config_store import (
    RepositoryConfig,
    JobContext,
    get_config_file,
    read_or_compute_repository_config,
    write_repository_config,
    new_job_context,
)

__all__ = [
    "RepoContext",
    "detect_repo_context",
    "make_repo_uri",
    "RepositoryConfig",
    "JobContext",
    "get_config_file",
    "read_or_compute_repository_config",
    "write_repository_config",
    "new_job_context",
]
