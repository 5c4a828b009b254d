"""Custom exceptions for git-branch-cleanup"""

from typing import Optional


class GitBranchCleanupError(Exception):
    """Base exception for all git-branch-cleanup errors."""
    pass


class AccessError(GitBranchCleanupError):
    """Exception raised when a directory cannot be listed during discovery."""

    def __init__(self, path, message: Optional[str] = None):
        self.path = str(path)
        self.message = message

        error_msg = f"Cannot access '{self.path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class NoRepositoryError(GitBranchCleanupError):
    """Exception raised when no Git repository is found under a path."""

    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"no Git repository found at '{self.path}'")


class GitOperationError(GitBranchCleanupError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class StatusQueryError(GitOperationError):
    """Exception raised when the branch status of a repository can't be read."""

    def __init__(self, path, message: Optional[str] = None):
        self.path = str(path)
        super().__init__("branch -vv", message=message)


class DeletionError(GitOperationError):
    """Exception raised when a single branch can't be deleted."""

    def __init__(self, branch: str, message: Optional[str] = None):
        super().__init__("branch delete", branch, message)
