import sys

from git_branch_cleanup.cli.main import main

sys.exit(main())
