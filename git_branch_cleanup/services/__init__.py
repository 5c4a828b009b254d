"""Services for git-branch-cleanup."""
