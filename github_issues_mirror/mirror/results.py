"""Contains results of a sync run."""

from dataclasses import dataclass
from pathlib import Path

from github_issues_mirror.mirror.state import SyncState


@dataclass
class SyncResult:
    """Outcome of a successful sync run."""

    repo: str
    repo_path: Path
    mirror_dir: Path
    state: SyncState

    @property
    def fetched_issues(self) -> int:
        return self.state.stats.fetched_issues

    @property
    def wrote_issue_files(self) -> int:
        return self.state.stats.wrote_issue_files

    @property
    def fetched_comments(self) -> int:
        return self.state.stats.fetched_comments

    def summary_lines(self) -> list[str]:
        """Human-readable summary of the run."""
        try:
            location = self.mirror_dir.relative_to(self.repo_path)
        except ValueError:
            location = self.mirror_dir
        return [
            f"synced {self.fetched_issues} issues/PRs (wrote {self.wrote_issue_files} files, comments {self.fetched_comments})",
            f"repo {self.repo} -> {location}",
        ]
