"""Maps issues to record files and writes them."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from github_issues_mirror.configuration.exceptions import PersistenceError
from github_issues_mirror.mirror.files import write_json_file
from github_issues_mirror.utils.constants import (
    ISSUES_DIRECTORY_NAME,
    MIRROR_DIRECTORY_NAME,
    SCHEMA_VERSION,
    STATE_FILE_NAME,
)
from github_issues_mirror.utils.helpers import pad_issue_number


@dataclass(frozen=True)
class MirrorPaths:
    """Locations of the mirror inside a repository checkout."""

    root: Path

    @classmethod
    def for_repository(cls, repo_path: Path) -> "MirrorPaths":
        return cls(repo_path / MIRROR_DIRECTORY_NAME)

    @property
    def state_file(self) -> Path:
        return self.root / STATE_FILE_NAME

    @property
    def issues_dir(self) -> Path:
        return self.root / ISSUES_DIRECTORY_NAME

    def ensure(self) -> None:
        """Create the mirror directories if needed."""
        try:
            self.issues_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PersistenceError(str(self.issues_dir), exc.strerror or str(exc)) from exc


class IssueRecord(BaseModel):
    """One issue or pull request together with its comments."""

    model_config = ConfigDict(populate_by_name=True)

    schema_version: int = Field(default=SCHEMA_VERSION, alias="schemaVersion")
    fetched_at: str = Field(alias="fetchedAt")
    repo: str
    issue: dict[str, Any]
    comments: list[Any] = Field(default_factory=list)

    @property
    def number(self) -> int:
        return int(self.issue["number"])


def issue_file_name(number: int) -> str:
    """File name for an issue number, e.g. 123 -> 000123.json.

    Numbers wider than six digits are not padded or truncated, so they no
    longer sort after shorter numbers.
    """
    return f"{pad_issue_number(number)}.json"


def write_issue_record(issues_dir: Path, record: IssueRecord) -> Path:
    """Write a record, overwriting any previous record for the same issue.

    Raises:
        PersistenceError: If the record cannot be written.
    """
    path = issues_dir / issue_file_name(record.number)
    write_json_file(path, record.model_dump(mode="json", by_alias=True))
    return path
