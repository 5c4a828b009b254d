"""Shared constants for git-branch-cleanup."""

# Directory whose presence marks a repository root
GIT_DIR = ".git"

# Substring `git branch -vv` prints when the upstream ref was deleted
GONE_MARKER = ": gone]"

# Width of the current-branch marker (`* `, `+ ` or two spaces)
MARKER_WIDTH = 2

DEFAULT_MAIN_BRANCH = "main"

# Trunk names that are never deleted, in addition to the configured main branch
DEFAULT_PROTECTED_BRANCHES = ("main", "master")


# Report lines
FMT_REPOSITORY_ERROR = "Error at `{repo}`: {error}"
FMT_NO_BRANCHES_FOUND = "No gone branches found at `{repo}`."
FMT_GONE_BRANCHES_HEADING = "Found gone branches at `{repo}`:"
FMT_REMOVAL_SUCCESS = "\t- Deleted {branch}"
FMT_REMOVAL_PREVIEW = "\t- Will delete {branch}"
FMT_REMOVAL_FAILURE = "\t- Failed to delete {branch}: {error}"


# CLI colors (Rich color names)
CLI_COLORS = {
    "deleted": "green",
    "preview": "yellow",
    "failed": "red",
    "error": "red",
    "heading": "bold",
    "summary": "dim",
}
