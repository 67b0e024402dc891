"""
Repository context detection.

Determines the repository a directory belongs to by asking the version
control system: the repository root, the current commit and the clone URL.
Git is tried first, then Mercurial.
"""

import logging
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from srclibkit.core.directory import update_vcs_ignore
from srclibkit.core.exceptions import RepoNotFoundError, VCSCommandError

logger = logging.getLogger(__name__)

SUPPORTED_VCS = ("git", "hg")
VCS_TIMEOUT = 30

_ROOT_COMMANDS = {
    "git": ["git", "rev-parse", "--show-toplevel"],
    "hg": ["hg", "root"],
}

_COMMIT_COMMANDS = {
    "git": ["git", "rev-parse", "HEAD"],
    "hg": ["hg", "log", "-r", "tip", "--template", "{node}"],
}

_CLONE_URL_COMMANDS = {
    "git": ["git", "config", "remote.origin.url"],
    "hg": ["hg", "paths", "default"],
}


@dataclass
class RepoContext:
    """
    The repository being analyzed.

    Attributes:
        repo_root_dir: Root directory of the working tree
        vcs_type: ``git`` or ``hg``
        commit_id: Commit checked out in the working tree
        clone_url: URL the repository was cloned from
    """

    repo_root_dir: Path
    vcs_type: str
    commit_id: str
    clone_url: str

    @property
    def uri(self) -> str:
        return make_repo_uri(self.clone_url)


def make_repo_uri(clone_url: str) -> str:
    """
    Convert a clone URL to a repository URI.

    The scheme, user info and ``.git`` suffix are dropped and scp-style
    ``host:path`` URLs are rewritten to ``host/path``.

    Example:
        >>> make_repo_uri("git://github.com/sourcegraph/srclib.git")
        'github.com/sourcegraph/srclib'
        >>> make_repo_uri("git@github.com:sourcegraph/srclib")
        'github.com/sourcegraph/srclib'
    """
    uri = clone_url.strip()
    if "://" in uri:
        uri = uri.split("://", 1)[1]
    elif re.match(r"^[^/]+:", uri):
        uri = uri.replace(":", "/", 1)
    host, _, path = uri.partition("/")
    host = host.rsplit("@", 1)[-1]
    uri = f"{host}/{path}" if path else host
    if uri.endswith(".git"):
        uri = uri[: -len(".git")]
    return uri.strip("/")


def run_vcs_command(command: Sequence[str], cwd: Union[str, Path]) -> str:
    """
    Run a version control command and return its stripped stdout.

    Raises:
        VCSCommandError: If the command is missing, times out or fails
    """
    try:
        result = subprocess.run(
            list(command),
            cwd=str(cwd),
            capture_output=True,
            text=True,
            timeout=VCS_TIMEOUT,
            check=False,
        )
    except FileNotFoundError as e:
        raise VCSCommandError(command, f"{command[0]} not found") from e
    except subprocess.TimeoutExpired as e:
        raise VCSCommandError(command, f"timed out after {VCS_TIMEOUT}s") from e

    if result.returncode != 0:
        raise VCSCommandError(
            command,
            result.stderr.strip() or f"exit status {result.returncode}",
        )
    return result.stdout.strip()


def get_repo_root_dir(vcs_type: str, directory: Union[str, Path]) -> Path:
    """Ask ``vcs_type`` for the root of the working tree containing ``directory``."""
    if vcs_type not in _ROOT_COMMANDS:
        raise VCSCommandError([vcs_type], f"unrecognized VCS {vcs_type}")
    return Path(run_vcs_command(_ROOT_COMMANDS[vcs_type], directory))


def get_commit_id(vcs_type: str, repo_dir: Union[str, Path]) -> str:
    """Commit ID of the current working tree (``HEAD`` / ``tip``)."""
    if vcs_type not in _COMMIT_COMMANDS:
        raise VCSCommandError([vcs_type], f"unrecognized VCS {vcs_type}")
    return run_vcs_command(_COMMIT_COMMANDS[vcs_type], repo_dir)


def get_clone_url(vcs_type: str, repo_dir: Union[str, Path]) -> str:
    """
    URL the repository was cloned from.

    SSH-style GitHub URLs are rewritten to ``git://`` so they can be fetched
    anonymously.
    """
    if vcs_type not in _CLONE_URL_COMMANDS:
        raise VCSCommandError([vcs_type], f"unrecognized VCS {vcs_type}")
    clone_url = run_vcs_command(_CLONE_URL_COMMANDS[vcs_type], repo_dir)
    if vcs_type == "git":
        clone_url = clone_url.replace("git@github.com:", "git://github.com/", 1)
    return clone_url


def detect_repo_context(
    target_dir: Union[str, Path],
    vcs_types: Optional[List[str]] = None,
    update_ignore: bool = True,
) -> RepoContext:
    """
    Detect the repository containing ``target_dir``.

    Args:
        target_dir: Directory inside a working tree
        vcs_types: VCS to try, in order (default: git, then hg)
        update_ignore: Add the build store to the VCS ignore file

    Returns:
        RepoContext for the working tree

    Raises:
        RepoNotFoundError: If ``target_dir`` is not a directory or no VCS
            recognizes it
        VCSCommandError: If the commit or clone URL can't be determined
    """
    target_dir = Path(target_dir)
    if not target_dir.is_dir():
        raise RepoNotFoundError(f"Directory does not exist: {target_dir}")

    vcs_type = None
    repo_root = None
    for candidate in vcs_types or SUPPORTED_VCS:
        try:
            repo_root = get_repo_root_dir(candidate, target_dir)
        except VCSCommandError as e:
            logger.debug(f"Not a {candidate} repository: {e}")
            continue
        vcs_type = candidate
        break

    if vcs_type is None or repo_root is None:
        raise RepoNotFoundError(
            f"Failed to detect repository root dir for {target_dir}"
        )

    logger.debug(f"Detected {vcs_type} repository at {repo_root}")

    context = RepoContext(
        repo_root_dir=repo_root,
        vcs_type=vcs_type,
        commit_id=get_commit_id(vcs_type, repo_root),
        clone_url=get_clone_url(vcs_type, repo_root),
    )

    if update_ignore:
        update_vcs_ignore(repo_root, f".{vcs_type}ignore")

    return context
