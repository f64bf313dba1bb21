from __future__ import annotations

import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from git import Repo
from git.exc import GitError

from gh_flatten.config import DEFAULT_HOST
from gh_flatten.exceptions import CloneFailedError, PathNotFoundError, WorkspaceError
from gh_flatten.logging import logger

if TYPE_CHECKING:
    from collections.abc import Iterator

# Fail instead of prompting when the remote asks for credentials.
CLONE_ENV = {"GIT_TERMINAL_PROMPT": "0"}


def repo_url(owner: str, repository: str, host: str = DEFAULT_HOST) -> str:
    """Build the HTTPS clone URL of a repository.

    Args:
        owner (str): repository owner
        repository (str): repository name
        host (str, optional): hosting service. Defaults to github.com.

    Returns:
        str: the canonical `https://<host>/<owner>/<repo>.git` URL
    """
    return f"https://{host}/{owner}/{repository}.git"


@contextmanager
def ephemeral_workspace() -> Iterator[Path]:
    """Create a fresh temporary directory, removed when the block exits.

    Raises:
        WorkspaceError: if the directory cannot be created

    Yields:
        Iterator[Path]: the workspace path
    """
    try:
        tmp = tempfile.TemporaryDirectory(prefix="gh_flatten_")
    except OSError as e:
        raise WorkspaceError(reason=str(e)) from e
    with tmp as name:
        yield Path(name)


def shallow_clone(url: str, dest: Path) -> Path:
    """Clone the default branch of `url` into `dest` with a depth of one.

    Args:
        url (str): remote repository URL
        dest (Path): empty directory to clone into

    Raises:
        CloneFailedError: if git reports an error (network, missing or private repository)

    Returns:
        Path: `dest`, now holding the checked out tree
    """
    logger.info("Cloning %s …", url)
    try:
        Repo.clone_from(url, dest, depth=1, env=CLONE_ENV)
    except (GitError, OSError) as e:
        raise CloneFailedError(url=url, reason=str(e).strip()) from e
    return dest


def resolve_target_root(workspace: Path, subpath: str) -> Path:
    """Resolve the directory (or file) to export inside the cloned tree.

    Args:
        workspace (Path): the cloned repository root
        subpath (str): path inside the repository, "" for the whole tree

    Raises:
        PathNotFoundError: if `subpath` does not exist in the clone, or only
            reaches outside it through a symlink

    Returns:
        Path: `workspace / subpath`
    """
    target = workspace / subpath
    if not target.exists():
        raise PathNotFoundError(path=subpath)
    if not target.resolve().is_relative_to(workspace.resolve()):
        raise PathNotFoundError(path=subpath)
    return target
