"""Logging configuration for git-branch-cleanup"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

DEFAULT_LOG_FILE = Path.home() / '.git-branch-cleanup' / 'git-branch-cleanup.log'

DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Colors the level name when stderr is a terminal."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        if sys.stderr.isatty() and record.levelname in self.COLORS:
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
        return super().format(record)


def _file_handler(log_file: Union[str, Path]) -> logging.Handler:
    """Handler writing every record of this run to ``log_file``."""
    log_file = Path(log_file).expanduser()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, mode='w')  # Overwrite each run
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=DETAILED_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    verbose: bool = False,
    debug: bool = False,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """
    Configure logging for the application.

    Console logging goes to stderr so it never mixes with the cleanup report
    on stdout. WARNING by default, INFO with ``verbose``, DEBUG with ``debug``.

    Args:
        verbose: Show INFO level messages
        debug: Show DEBUG level messages; also logs to DEFAULT_LOG_FILE
            unless ``log_file`` is given
        log_file: Write all messages of this run to this file
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file is None and debug:
        log_file = DEFAULT_LOG_FILE

    root_logger = logging.getLogger()
    # The file handler gets everything, the console handler only `level`
    root_logger.setLevel(logging.DEBUG if log_file else level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if log_file:
        root_logger.addHandler(_file_handler(log_file))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    if debug:
        console_handler.setFormatter(ColoredFormatter(fmt=DETAILED_FORMAT, datefmt=DATE_FORMAT))
    else:
        console_handler.setFormatter(ColoredFormatter(fmt='[%(name)s] %(message)s'))
    root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger named after the module, without the package prefix."""
    if name.startswith('git_branch_cleanup.'):
        name = name[len('git_branch_cleanup.'):]
    return logging.getLogger(name)
