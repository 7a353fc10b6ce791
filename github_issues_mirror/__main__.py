"""Allows running the CLI with ``python -m github_issues_mirror``."""

import sys

from github_issues_mirror.configuration.cli import main

if __name__ == "__main__":
    sys.exit(main())
