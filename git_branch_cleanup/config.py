"""Configuration handling for git-branch-cleanup"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from git_branch_cleanup.constants import DEFAULT_MAIN_BRANCH, DEFAULT_PROTECTED_BRANCHES
from git_branch_cleanup.models.branch_filter import BranchFilter
from git_branch_cleanup.services.branch_filter import build_filter
from git_branch_cleanup.services.exclusion import build_exclusions


@dataclass(frozen=True)
class Config:
    """Configuration for git-branch-cleanup with validation.

    Built once before any repository is processed and never changed after.
    ``exclude`` accepts a comma-separated string or a list of names and is
    normalised to a tuple of trimmed names that always includes
    ``protected_branches`` and ``main_branch``.
    """

    # Discovery
    has_multiple_repos: bool = False

    # Branch selection
    exclude: Tuple[str, ...] = field(default_factory=tuple)
    filter_text: Optional[str] = None
    and_filter_text: Optional[str] = None
    main_branch: str = DEFAULT_MAIN_BRANCH
    protected_branches: Tuple[str, ...] = DEFAULT_PROTECTED_BRANCHES

    # Execution modes
    dry_run: bool = False
    force: bool = False  # Delete unmerged branches too (git branch -D)
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_main_branch()
        self._validate_protected_branches()
        self._validate_filters()
        self._normalize_exclude()

    def _validate_main_branch(self):
        """Validate main_branch is not empty."""
        if not self.main_branch or not self.main_branch.strip():
            raise ValueError("main_branch cannot be empty")
        object.__setattr__(self, "main_branch", self.main_branch.strip())

    def _validate_protected_branches(self):
        """Validate protected_branches is a list of names."""
        if isinstance(self.protected_branches, str):
            raise ValueError("protected_branches must be a list")
        names = tuple(name.strip() for name in self.protected_branches if name.strip())
        object.__setattr__(self, "protected_branches", names)

    def _validate_filters(self):
        """Treat empty filter strings as not configured."""
        for name in ("filter_text", "and_filter_text"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {type(value).__name__}")
            if value == "":
                object.__setattr__(self, name, None)

    def _normalize_exclude(self):
        """Trim excluded names and add the protected branches and main_branch."""
        exclude = build_exclusions(self.exclude, self.main_branch, self.protected_branches)
        object.__setattr__(self, "exclude", tuple(exclude))

    @property
    def branch_filter(self) -> BranchFilter:
        """Filter selecting the branches to delete."""
        return build_filter(self.filter_text, self.and_filter_text)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "has_multiple_repos": self.has_multiple_repos,
            "exclude": list(self.exclude),
            "filter_text": self.filter_text,
            "and_filter_text": self.and_filter_text,
            "main_branch": self.main_branch,
            "protected_branches": list(self.protected_branches),
            "dry_run": self.dry_run,
            "force": self.force,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "has_multiple_repos",
            "exclude",
            "filter_text",
            "and_filter_text",
            "main_branch",
            "protected_branches",
            "dry_run",
            "force",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
