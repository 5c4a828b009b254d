"""Data models for git-branch-cleanup."""

from .outcome import DeletionOutcome, DeletionStatus, RunSummary
from .branch_filter import BranchFilter, FilterMode

__all__ = ["DeletionOutcome", "DeletionStatus", "RunSummary", "BranchFilter", "FilterMode"]
