"""Construction of the branch filter from user options"""

from typing import Optional

from git_branch_cleanup.models.branch_filter import BranchFilter, FilterMode


def build_filter(filter_text: Optional[str] = None, and_filter_text: Optional[str] = None) -> BranchFilter:
    """
    Build the branch filter for one invocation.

    A free-text filter takes precedence and bypasses goneness entirely.
    Otherwise a conjunctive text narrows the gone check, and without either
    only the gone marker is checked. Empty strings count as not configured.

    Args:
        filter_text: Select every line containing this text
        and_filter_text: Select gone lines that also contain this text

    Returns:
        Immutable BranchFilter
    """
    if filter_text:
        return BranchFilter(FilterMode.FREE_TEXT, filter_text)
    if and_filter_text:
        return BranchFilter(FilterMode.MARKER_AND_TEXT, and_filter_text)
    return BranchFilter()
