"""Display and formatting service for cleanup results"""
from typing import Dict, Optional

from rich.console import Console
from rich.markup import escape

from git_branch_cleanup.constants import (
    CLI_COLORS,
    FMT_GONE_BRANCHES_HEADING,
    FMT_NO_BRANCHES_FOUND,
    FMT_REMOVAL_FAILURE,
    FMT_REMOVAL_PREVIEW,
    FMT_REMOVAL_SUCCESS,
    FMT_REPOSITORY_ERROR,
)
from git_branch_cleanup.models.outcome import DeletionOutcome, DeletionStatus


def format_outcome(outcome: DeletionOutcome) -> str:
    """Format one branch outcome as plain text."""
    if outcome.status is DeletionStatus.PREVIEW:
        return FMT_REMOVAL_PREVIEW.format(branch=outcome.branch)
    if outcome.status is DeletionStatus.FAILED:
        return FMT_REMOVAL_FAILURE.format(branch=outcome.branch, error=outcome.error)
    return FMT_REMOVAL_SUCCESS.format(branch=outcome.branch)


class DisplayService:
    """Writes human-readable cleanup results, one line at a time."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def _print(self, text: str, style_key: str) -> None:
        style = CLI_COLORS.get(style_key)
        self.console.print(escape(text), style=style, soft_wrap=True, highlight=False)

    def repository_error(self, repo, error: Exception) -> None:
        self._print(FMT_REPOSITORY_ERROR.format(repo=repo, error=error), "error")

    def no_branches_found(self, repo) -> None:
        self._print(FMT_NO_BRANCHES_FOUND.format(repo=repo), "summary")

    def repository_outcomes(self, repo, outcomes: Dict[str, DeletionOutcome]) -> None:
        """Display the heading for a repository followed by its branch outcomes."""
        if not outcomes:
            self.no_branches_found(repo)
            return

        self._print(FMT_GONE_BRANCHES_HEADING.format(repo=repo), "heading")
        for outcome in outcomes.values():
            self._print(format_outcome(outcome), outcome.status.value)

    def summary(self, summary) -> None:
        """Display totals for the whole run."""
        parts = [f"{summary.repositories} repositories"]
        if summary.previewed:
            parts.append(f"{summary.previewed} to delete")
        parts.append(f"{summary.deleted} deleted")
        if summary.failed:
            parts.append(f"{summary.failed} failed")
        if summary.errors:
            parts.append(f"{summary.errors} with errors")
        self._print("\nSummary: " + ", ".join(parts), "summary")
