"""Command-line argument parsing for git-branch-cleanup."""

import argparse
from git_branch_cleanup.__version__ import __version__
from git_branch_cleanup.constants import DEFAULT_MAIN_BRANCH, DEFAULT_PROTECTED_BRANCHES


def build_parser():
    """Build the argument parser with its `branches` sub-command."""
    parser = argparse.ArgumentParser(
        prog="git-branch-cleanup",
        description="Remove gone Git branches with ease",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--log-file", metavar="PATH", help="Write all log messages of this run to PATH")
    parser.add_argument("--version", action="version", version=f"git-branch-cleanup {__version__}")

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    branches = subparsers.add_parser(
        "branches",
        help="Delete local branches that are gone on the remote",
        description="Delete local branches whose upstream branch no longer exists",
    )
    branches.add_argument("path", metavar="PATH", help="Repository or directory of repositories")
    branches.add_argument(
        "-m",
        "--has-multiple-repos",
        action="store_true",
        help="Delete branches in sub-repositories",
    )
    branches.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Force the deletion, also deleting unmerged branches",
    )
    branches.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        help="Preview the branches without deleting them",
    )
    branches.add_argument(
        "-e",
        "--exclude",
        default="",
        help="Exclude one or more comma-separated branches from deletion",
    )
    branches.add_argument(
        "--filter",
        dest="filter_text",
        metavar="TEXT",
        help="Select branches whose status line contains TEXT instead of gone branches",
    )
    branches.add_argument(
        "--and-filter",
        dest="and_filter_text",
        metavar="TEXT",
        help="Only select gone branches whose status line also contains TEXT",
    )
    branches.add_argument(
        "--main-branch",
        default=DEFAULT_MAIN_BRANCH,
        help=f"Primary branch, never deleted (default: {DEFAULT_MAIN_BRANCH})",
    )
    branches.add_argument(
        "--protected",
        nargs="*",
        default=list(DEFAULT_PROTECTED_BRANCHES),
        help="Branches that are never deleted (default: main master)",
    )

    return parser


def parse_args(argv=None):
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
