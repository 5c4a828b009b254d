"""Git operations service"""

import os
from pathlib import Path
from typing import Union

import git

from git_branch_cleanup.exceptions import DeletionError, StatusQueryError
from git_branch_cleanup.logging_config import get_logger

logger = get_logger(__name__)


def _error_detail(error: git.exc.CommandError) -> str:
    """Pick the most useful message out of a failed git command."""
    stderr = (getattr(error, "stderr", "") or "").strip()
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip()
    stderr = stderr.strip("'").strip()
    if stderr:
        return stderr
    return str(error)


class GitOperations:
    """Runs the git commands needed for one repository.

    Git is driven through GitPython's command wrapper, so every call is a
    plain `git` subprocess executed inside the repository directory.
    """

    def __init__(self, repo_path: Union[str, Path]):
        """Initialize the service.

        Args:
            repo_path: Path to the git repository
        """
        self.repo_path = str(repo_path)

    def _get_git(self) -> git.Git:
        """Get a command wrapper bound to the repository directory."""
        return git.Git(self.repo_path)

    def branch_status(self) -> str:
        """Return the output of `git branch -vv`.

        Raises:
            StatusQueryError: git couldn't be run or exited non-zero
        """
        # git.Git runs in the current directory when it can't enter repo_path
        if not os.path.isdir(self.repo_path) or not os.access(self.repo_path, os.X_OK):
            raise StatusQueryError(self.repo_path, "directory is not accessible")

        try:
            return self._get_git().branch("-vv", "--no-color")
        except git.exc.CommandError as e:
            logger.debug(f"git branch -vv failed in {self.repo_path}: {e}")
            raise StatusQueryError(self.repo_path, _error_detail(e)) from e

    def delete_branch(self, branch_name: str, force: bool = False) -> None:
        """Delete a local branch.

        Args:
            branch_name: Branch to delete
            force: Use `-D`, deleting the branch even if it isn't merged

        Raises:
            DeletionError: git refused or failed to delete the branch
        """
        flag = "-D" if force else "-d"
        try:
            self._get_git().branch(flag, branch_name)
        except git.exc.CommandError as e:
            logger.debug(f"git branch {flag} {branch_name} failed in {self.repo_path}: {e}")
            raise DeletionError(branch_name, _error_detail(e)) from e
        logger.info(f"Deleted branch {branch_name} in {self.repo_path}")
