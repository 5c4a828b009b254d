"""Command-line interface for git-branch-cleanup"""

import sys
from rich.console import Console
from rich.markup import escape

from git_branch_cleanup.cli.args import build_parser
from git_branch_cleanup.config import Config
from git_branch_cleanup.core import run
from git_branch_cleanup.exceptions import GitBranchCleanupError
from git_branch_cleanup.logging_config import setup_logging
from git_branch_cleanup.services.display_service import DisplayService

console = Console()


def main(argv=None):
    """Main entry point for the application."""
    parser = build_parser()
    parsed_args = parser.parse_args(argv)

    if parsed_args.command is None:
        parser.print_help()
        return 0

    try:
        setup_logging(
            verbose=parsed_args.verbose, debug=parsed_args.debug, log_file=parsed_args.log_file
        )

        config = Config(
            has_multiple_repos=parsed_args.has_multiple_repos,
            exclude=parsed_args.exclude,
            filter_text=parsed_args.filter_text,
            and_filter_text=parsed_args.and_filter_text,
            main_branch=parsed_args.main_branch,
            protected_branches=parsed_args.protected,
            dry_run=parsed_args.dry_run,
            force=parsed_args.force,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug:
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {escape(str(value))}")

        run(parsed_args.path, config, DisplayService(console))
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except (GitBranchCleanupError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        if parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
