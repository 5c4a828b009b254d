"""Version information for git-branch-cleanup."""

__version__ = "0.1.0"
