"""Reads and writes the sync state document."""

import json
from pathlib import Path

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from github_issues_mirror.mirror.files import write_json_file
from github_issues_mirror.utils.constants import SCHEMA_VERSION

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class SyncStats(BaseModel):
    """Counters describing one sync run."""

    model_config = ConfigDict(populate_by_name=True)

    fetched_issues: int = Field(default=0, alias="fetchedIssues")
    wrote_issue_files: int = Field(default=0, alias="wroteIssueFiles")
    fetched_comments: int = Field(default=0, alias="fetchedComments")


class SyncState(BaseModel):
    """The last successful sync point of a mirror.

    Every field is optional on read so that a document carrying only
    lastSuccessfulSyncAt still provides the incremental cutoff.
    """

    model_config = ConfigDict(populate_by_name=True)

    schema_version: int = Field(default=SCHEMA_VERSION, alias="schemaVersion")
    repo: str | None = None
    last_run_at: str | None = Field(default=None, alias="lastRunAt")
    last_successful_sync_at: str | None = Field(default=None, alias="lastSuccessfulSyncAt")
    effective_since: str | None = Field(default=None, alias="effectiveSince")
    stats: SyncStats = Field(default_factory=SyncStats)


def read_state(path: Path) -> SyncState | None:
    """Read the state document, returning None if it is missing or unusable.

    A state file that cannot be read is treated as no prior sync, so the next
    run is a full resync.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        logger.debug("No sync state found", path=str(path))
        return None
    except OSError as exc:
        logger.warning("Could not read sync state, treating as first sync", path=str(path), error=str(exc))
        return None
    try:
        return SyncState.model_validate(json.loads(raw))
    except (ValueError, ValidationError) as exc:
        logger.warning("Ignoring corrupt sync state, treating as first sync", path=str(path), error=str(exc))
        return None


def write_state(path: Path, state: SyncState) -> None:
    """Replace the state document.

    Raises:
        PersistenceError: If the document cannot be written.
    """
    write_json_file(path, state.model_dump(mode="json", by_alias=True))
    logger.debug("Wrote sync state", path=str(path), last_successful_sync_at=state.last_successful_sync_at)
