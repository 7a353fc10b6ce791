"""Shared constants used across the application."""

import re

# On-disk Layout Constants
# ------------------------

MIRROR_DIRECTORY_NAME = ".github-mirror"
"""Directory, relative to the repository checkout, holding the mirror."""

STATE_FILE_NAME = "state.json"
"""Name of the sync state document inside the mirror directory."""

ISSUES_DIRECTORY_NAME = "issues"
"""Directory inside the mirror directory holding one record per issue."""

ISSUE_NUMBER_WIDTH = 6
"""Issue numbers are zero-padded to this width to keep file names sortable."""

SCHEMA_VERSION = 1
"""Schema version written into state and issue record documents."""

# GitHub API Constants
# --------------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub REST API base URL."""

GITHUB_ACCEPT_HEADER = "application/vnd.github+json"
"""Media type requested from the GitHub REST API."""

PER_PAGE = 100
"""Page size requested from list endpoints."""

# Regex Patterns
GITHUB_REMOTE_PATTERNS = (
    re.compile(r"^git@github\.com:(?P<owner>[^/]+)/(?P<name>.+?)(?:\.git)?/?$"),
    re.compile(r"^ssh://git@github\.com/(?P<owner>[^/]+)/(?P<name>.+?)(?:\.git)?/?$"),
    re.compile(r"^https?://(?:[^@/]+@)?github\.com/(?P<owner>[^/]+)/(?P<name>.+?)(?:\.git)?/?$"),
)
"""Patterns matching the SSH and HTTPS forms of a github.com remote URL."""

LINK_NEXT_PATTERN = re.compile(r'<(?P<url>[^>]+)>;\s*rel="next"')
"""Pattern extracting the next page URL from a GitHub Link header."""
