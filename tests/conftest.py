"""Pytest fixtures for git-branch-cleanup tests"""
import io
import logging
import tempfile
from pathlib import Path
from unittest.mock import Mock
import pytest
import git
from rich.console import Console

from git_branch_cleanup.services.display_service import DisplayService
from git_branch_cleanup.services.git import GitOperations


STATUS_OUTPUT = (
    "* master    34a234a [origin/master] Merged some features\n"
    "  feature/1 34a234a [origin/feature/1: gone] Implemented endpoints\n"
    "  feature/2 3fc2e37 [origin/feature/2: behind 71] Added CLI command\n"
)


def _configure_user(repo):
    """Configure git user for commits."""
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()


def _commit_file(repo, name, content, message):
    path = Path(repo.working_dir) / name
    path.write_text(content)
    repo.index.add([name])
    repo.index.commit(message)


def _push_branch(repo, branch, commit=False):
    """Create a branch off main, optionally with its own commit, and push it."""
    repo.git.checkout("-b", branch)
    if commit:
        file_name = branch.replace("/", "-") + ".txt"
        _commit_file(repo, file_name, f"{branch}\n", f"Work on {branch}")
    repo.git.push("-u", "origin", branch)
    repo.git.checkout("main")


@pytest.fixture
def restore_root_logger():
    """Keep the root logger configuration of the test session."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'has_multiple_repos': False,
        'exclude': "",
        'filter_text': None,
        'and_filter_text': None,
        'main_branch': 'main',
        'dry_run': False,
        'force': False,
        'verbose': False,
        'debug': False,
    }


@pytest.fixture
def origin_repo(temp_dir):
    """Create the repository that acts as remote."""
    repo_path = temp_dir / "origin"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    _configure_user(repo)
    _commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")
    repo.git.branch("-M", "main")

    yield repo

    repo.close()


@pytest.fixture
def git_repo(temp_dir, origin_repo):
    """Create a clone of origin_repo with only main."""
    repo = origin_repo.clone(str(temp_dir / "work"))
    _configure_user(repo)

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_gone_branches(git_repo, origin_repo):
    """Create a clone with branches whose upstream was deleted.

    - feature/1: gone, merged into main
    - feature/unmerged: gone, has a commit main doesn't have
    - feature/2: upstream still exists
    """
    _push_branch(git_repo, "feature/1")
    _push_branch(git_repo, "feature/unmerged", commit=True)
    _push_branch(git_repo, "feature/2", commit=True)

    origin_repo.git.branch("-D", "feature/1", "feature/unmerged")
    git_repo.git.fetch("--prune")

    yield git_repo


@pytest.fixture
def master_trunk_repo(temp_dir):
    """Create a clone whose `master` trunk and `feature/old` branch are gone upstream.

    The clone has `dev` checked out, so git would let `master` be deleted.
    """
    origin = git.Repo.init(temp_dir / "trunk-origin", mkdir=True)
    _configure_user(origin)
    _commit_file(origin, "README.md", "# Trunk\n", "Initial commit")
    origin.git.branch("-M", "master")
    origin.git.checkout("-b", "dev")

    repo = origin.clone(str(temp_dir / "trunk-work"))
    _configure_user(repo)
    repo.git.checkout("master")
    repo.git.checkout("-b", "feature/old")
    repo.git.push("-u", "origin", "feature/old")
    repo.git.checkout("dev")

    origin.git.branch("-D", "master", "feature/old")
    repo.git.fetch("--prune")

    yield repo

    repo.close()
    origin.close()

@pytest.fixture
def status_output():
    """Sample `git branch -vv` output with one gone branch."""
    return STATUS_OUTPUT

@pytest.fixture
def mock_git_service():
    """Create a mock GitOperations returning the sample `git branch -vv` output."""
    service = Mock(spec=GitOperations)
    service.branch_status = Mock(return_value=STATUS_OUTPUT)
    service.delete_branch = Mock(return_value=None)
    return service


@pytest.fixture
def output():
    """Buffer receiving everything the display service prints."""
    return io.StringIO()


@pytest.fixture
def display(output):
    """DisplayService writing plain text into the output buffer."""
    return DisplayService(Console(file=output, width=200, color_system=None))
