"""Core branch cleanup logic."""

from .branch_cleaner import BranchCleaner, run

__all__ = ["BranchCleaner", "run"]
