"""Deletion outcome model and related enums"""
from enum import Enum
from dataclasses import dataclass
from typing import Dict, Optional


class DeletionStatus(Enum):
    """Result of processing one candidate branch."""
    DELETED = "deleted"
    PREVIEW = "preview"  # Dry-run, nothing executed
    FAILED = "failed"


@dataclass(frozen=True)
class DeletionOutcome:
    """Outcome for a single branch selected for deletion."""
    branch: str
    status: DeletionStatus
    error: Optional[str] = None  # Only set for FAILED

    @classmethod
    def deleted(cls, branch: str) -> "DeletionOutcome":
        return cls(branch, DeletionStatus.DELETED)

    @classmethod
    def preview(cls, branch: str) -> "DeletionOutcome":
        return cls(branch, DeletionStatus.PREVIEW)

    @classmethod
    def failed(cls, branch: str, error: str) -> "DeletionOutcome":
        return cls(branch, DeletionStatus.FAILED, error)

    @property
    def succeeded(self) -> bool:
        return self.status is not DeletionStatus.FAILED


@dataclass
class RunSummary:
    """Totals over all repositories processed in one run."""
    repositories: int = 0
    deleted: int = 0
    previewed: int = 0
    failed: int = 0
    errors: int = 0  # Repositories whose branches couldn't be listed

    def record(self, outcomes: Dict[str, DeletionOutcome]) -> None:
        """Add the outcomes of one repository."""
        self.repositories += 1
        for outcome in outcomes.values():
            if outcome.status is DeletionStatus.DELETED:
                self.deleted += 1
            elif outcome.status is DeletionStatus.PREVIEW:
                self.previewed += 1
            else:
                self.failed += 1

    def record_error(self) -> None:
        self.repositories += 1
        self.errors += 1
