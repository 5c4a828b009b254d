"""Core functionality for git-branch-cleanup"""

from pathlib import Path
from typing import Callable, Dict, Optional, Union

from git_branch_cleanup.config import Config
from git_branch_cleanup.exceptions import DeletionError, NoRepositoryError, StatusQueryError
from git_branch_cleanup.logging_config import get_logger
from git_branch_cleanup.models.outcome import DeletionOutcome, RunSummary
from git_branch_cleanup.services.branch_parser import parse_branch_names
from git_branch_cleanup.services.display_service import DisplayService
from git_branch_cleanup.services.exclusion import is_excluded
from git_branch_cleanup.services.git import GitOperations
from git_branch_cleanup.services.repository_locator import locate_repositories

logger = get_logger(__name__)


class BranchCleaner:
    """Deletes gone branches in one repository at a time."""

    def __init__(
        self,
        config: Union[Config, dict],
        git_factory: Callable[[Path], GitOperations] = GitOperations,
    ):
        """Initialize BranchCleaner.

        Args:
            config: Configuration dict or Config object
            git_factory: Builds the git service for a repository path
        """
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config
        self.git_factory = git_factory
        self.branch_filter = self.config.branch_filter

    def process_repository(self, repo_path: Union[str, Path]) -> Dict[str, DeletionOutcome]:
        """Delete the branches of a repository selected by the branch filter.

        Branches are read from `git branch -vv`. Excluded branches are
        skipped, and in dry-run mode nothing is deleted. A branch that
        can't be deleted gets a failed outcome without stopping the others.

        Args:
            repo_path: Repository root

        Returns:
            Outcome per selected branch, in the order git listed them

        Raises:
            StatusQueryError: The branches of the repository couldn't be listed
        """
        git_service = self.git_factory(repo_path)
        output = git_service.branch_status()

        outcomes: Dict[str, DeletionOutcome] = {}
        for branch in parse_branch_names(output, self.branch_filter):
            if is_excluded(branch, self.config.exclude):
                logger.debug(f"Branch {branch} is excluded, skipping")
                continue

            if self.config.dry_run:
                logger.debug(f"Dry run: would delete {branch}")
                outcomes[branch] = DeletionOutcome.preview(branch)
                continue

            try:
                git_service.delete_branch(branch, force=self.config.force)
            except DeletionError as e:
                logger.warning(f"Could not delete {branch} in {repo_path}: {e.message}")
                outcomes[branch] = DeletionOutcome.failed(branch, e.message or str(e))
            else:
                outcomes[branch] = DeletionOutcome.deleted(branch)

        return outcomes


def run(
    root: Union[str, Path],
    config: Union[Config, dict],
    display: Optional[DisplayService] = None,
    git_factory: Callable[[Path], GitOperations] = GitOperations,
) -> RunSummary:
    """Delete all gone branches under a path.

    The path either has to be a repository or, with ``has_multiple_repos``,
    a directory containing repositories. Failures of a single repository
    are reported and don't stop the others.

    Raises:
        AccessError: The path couldn't be searched for repositories
        NoRepositoryError: No repository was found
    """
    cleaner = BranchCleaner(config, git_factory=git_factory)
    display = display or DisplayService()

    repositories = locate_repositories(root, cleaner.config.has_multiple_repos)
    if not repositories:
        raise NoRepositoryError(root)

    logger.info(f"Looking for {cleaner.branch_filter.describe()} in {len(repositories)} repositories")

    summary = RunSummary()
    for repo in repositories:
        try:
            outcomes = cleaner.process_repository(repo)
        except StatusQueryError as e:
            logger.debug(f"Skipping {repo}: {e}")
            display.repository_error(repo, e)
            summary.record_error()
            continue

        display.repository_outcomes(repo, outcomes)
        summary.record(outcomes)

    display.summary(summary)
    return summary
