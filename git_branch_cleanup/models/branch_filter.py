"""Branch filter model: which `git branch -vv` lines select a branch"""
from enum import Enum
from dataclasses import dataclass
from typing import Optional

from git_branch_cleanup.constants import GONE_MARKER


class FilterMode(Enum):
    """Matching mode of a branch filter."""
    MARKER_ONLY = "marker-only"
    FREE_TEXT = "free-text"
    MARKER_AND_TEXT = "marker-and-text"


@dataclass(frozen=True)
class BranchFilter:
    """Predicate over a single branch status line.

    Exactly one mode is active:

    - MARKER_ONLY: the line reports a gone upstream
    - FREE_TEXT: the line contains ``text``, goneness is ignored
    - MARKER_AND_TEXT: the line reports a gone upstream and contains ``text``
    """
    mode: FilterMode = FilterMode.MARKER_ONLY
    text: Optional[str] = None

    def __post_init__(self):
        if self.mode is FilterMode.MARKER_ONLY:
            if self.text is not None:
                raise ValueError("marker-only filter does not take a match text")
        elif not self.text:
            raise ValueError(f"{self.mode.value} filter requires a non-empty match text")

    def matches(self, line: str) -> bool:
        """Check whether a status line selects its branch."""
        if self.mode is FilterMode.FREE_TEXT:
            return self.text in line
        if self.mode is FilterMode.MARKER_AND_TEXT:
            return GONE_MARKER in line and self.text in line
        return GONE_MARKER in line

    def __call__(self, line: str) -> bool:
        return self.matches(line)

    def describe(self) -> str:
        """Short human-readable description, used in log messages."""
        if self.mode is FilterMode.FREE_TEXT:
            return f"lines containing '{self.text}'"
        if self.mode is FilterMode.MARKER_AND_TEXT:
            return f"gone branches containing '{self.text}'"
        return "gone branches"
