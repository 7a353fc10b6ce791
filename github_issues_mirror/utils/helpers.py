"""General utility functions and helper classes."""

import json
from datetime import datetime, timezone
from typing import Any

from github_issues_mirror.utils.constants import ISSUE_NUMBER_WIDTH


def utc_now_iso() -> str:
    """Return the current UTC time as an ISO-8601 string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def parse_iso_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing 'Z' for UTC."""
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def pad_issue_number(number: int) -> str:
    """Zero-pad an issue number; numbers wider than the pad width are left as-is."""
    return str(number).zfill(ISSUE_NUMBER_WIDTH)


def dump_json(data: Any) -> str:
    """Serialize data as stable, human-diffable JSON."""
    return json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False) + "\n"
