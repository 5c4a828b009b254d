"""Parsing of `git branch -vv` output"""

from typing import Callable, List, Optional

from git_branch_cleanup.constants import MARKER_WIDTH
from git_branch_cleanup.logging_config import get_logger

logger = get_logger(__name__)


def extract_branch_name(line: str) -> Optional[str]:
    """Extract the branch name from one `git branch -vv` line.

    The output is expected to look like this::

        * master    34a234a [origin/master] Merged some features
          feature/1 34a234a [origin/feature/1: gone] Implemented endpoints
          feature/2 3fc2e37 [origin/feature/2: behind 71] Added CLI command

    The first two characters are reserved for the current-branch marker, so
    the name starts at index 2 and runs up to the next space.

    Returns:
        The branch name, or None if the line doesn't hold one
    """
    if len(line) < MARKER_WIDTH:
        return None

    end = line.find(" ", MARKER_WIDTH)
    if end <= MARKER_WIDTH:
        return None

    return line[MARKER_WIDTH:end]


def parse_branch_names(output: str, matches: Callable[[str], bool]) -> List[str]:
    """Return names of branches whose status line passes ``matches``, in output order."""
    branches = []
    for line in output.splitlines():
        if not matches(line):
            continue

        name = extract_branch_name(line)
        if name is None:
            logger.debug(f"Skipping matching line without a branch name: {line!r}")
            continue
        branches.append(name)

    return branches
