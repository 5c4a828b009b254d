"""
git-branch-cleanup - Remove gone Git branches with ease
"""

from .__version__ import __version__
from .core import BranchCleaner, run
from .cli.main import main

__all__ = ["BranchCleaner", "run", "main", "__version__"]
