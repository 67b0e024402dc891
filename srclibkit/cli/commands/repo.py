"""
Repository commands.

This module implements CLI commands for the repository being analyzed:
- info: Show VCS type, root directory, commit and clone URL
- config: Show (and optionally cache) repository configuration
"""

import json
import logging

from srclibkit.cli.utils import print_error, safe_print
from srclibkit.core.exceptions import RepoError
from srclibkit.repo.config_store import (
    get_config_file,
    read_or_compute_repository_config,
    write_repository_config,
)
from srclibkit.repo.context import detect_repo_context

logger = logging.getLogger(__name__)


def run_info(args) -> int:
    """
    Show repository context.

    Args:
        args: Parsed command-line arguments with:
            - dir: Directory inside the repository

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        context = detect_repo_context(args.dir)
    except RepoError as e:
        logger.error(f"Failed to detect repository: {e}")
        print_error("Failed to detect repository", str(e))
        return 1

    safe_print(f"Repository: {context.uri}")
    safe_print(f"  Root:      {context.repo_root_dir}")
    safe_print(f"  VCS:       {context.vcs_type}")
    safe_print(f"  Commit:    {context.commit_id}")
    safe_print(f"  Clone URL: {context.clone_url}")
    return 0


def run_config(args) -> int:
    """
    Show repository configuration, optionally caching it.

    Args:
        args: Parsed command-line arguments with:
            - dir: Directory inside the repository
            - write: Cache configuration in the build store
            - overwrite: Replace an existing cached configuration

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        context = detect_repo_context(args.dir)
        config = read_or_compute_repository_config(
            context.repo_root_dir, context.commit_id, context.uri
        )
        if getattr(args, "write", False):
            written = write_repository_config(
                context.repo_root_dir,
                context.commit_id,
                config,
                overwrite=getattr(args, "overwrite", False),
            )
            config_file = get_config_file(context.repo_root_dir, context.commit_id)
            if written:
                logger.info(f"Cached repository config at {config_file}")
            else:
                logger.info(f"Repository config already cached at {config_file}")
    except RepoError as e:
        logger.error(f"Failed to load repository config: {e}")
        print_error("Failed to load repository config", str(e))
        return 1

    safe_print(json.dumps(config.to_dict(), indent=2))
    return 0
