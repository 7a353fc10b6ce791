"""Utility modules for shared functionality."""

from .constants import (
    ISSUE_NUMBER_WIDTH,
    ISSUES_DIRECTORY_NAME,
    MIRROR_DIRECTORY_NAME,
    SCHEMA_VERSION,
    STATE_FILE_NAME,
)
from .retry import retry_on_rate_limit

__all__ = [
    "ISSUE_NUMBER_WIDTH",
    "ISSUES_DIRECTORY_NAME",
    "MIRROR_DIRECTORY_NAME",
    "SCHEMA_VERSION",
    "STATE_FILE_NAME",
    "retry_on_rate_limit",
]
