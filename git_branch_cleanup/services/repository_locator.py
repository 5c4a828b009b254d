"""Discovery of Git repositories under a path"""

from pathlib import Path
from typing import List, Union

from git_branch_cleanup.constants import GIT_DIR
from git_branch_cleanup.exceptions import AccessError
from git_branch_cleanup.logging_config import get_logger

logger = get_logger(__name__)


def _list_dir(path: Path) -> List[Path]:
    """List a directory in name order, raising AccessError if it can't be read."""
    try:
        return sorted(path.iterdir(), key=lambda entry: entry.name)
    except OSError as e:
        raise AccessError(path, e.strerror or str(e)) from e


def is_repository(path: Union[str, Path]) -> bool:
    """Check if a path is a Git repository, meaning it contains a `.git` directory."""
    path = Path(path)
    return any(entry.name == GIT_DIR and entry.is_dir() for entry in _list_dir(path))


def locate_repositories(root: Union[str, Path], has_multiple_repos: bool = False) -> List[Path]:
    """
    Return the paths of all repositories contained in a path.

    If ``root`` itself is a repository it comes first. With
    ``has_multiple_repos`` its direct subdirectories that are repositories
    follow, so a repository holding nested repositories yields all of them.

    Args:
        root: Repository or parent directory of repositories
        has_multiple_repos: Also look at direct subdirectories

    Returns:
        Repository paths, possibly empty

    Raises:
        AccessError: A directory couldn't be listed
    """
    root = Path(root)
    paths = []

    if is_repository(root):
        logger.debug(f"{root} is a repository")
        paths.append(root)

    if not has_multiple_repos:
        return paths

    for entry in _list_dir(root):
        if not entry.is_dir() or entry.name == GIT_DIR:
            continue
        if is_repository(entry):
            logger.debug(f"Found repository {entry}")
            paths.append(entry)

    logger.info(f"Found {len(paths)} repositories under {root}")
    return paths
