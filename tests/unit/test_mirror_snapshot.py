"""Unit tests for issue record files."""

import json
from pathlib import Path

import pytest

from github_issues_mirror.configuration.exceptions import PersistenceError
from github_issues_mirror.mirror.snapshot import IssueRecord, MirrorPaths, issue_file_name, write_issue_record


@pytest.mark.parametrize(
    "number,expected",
    [
        pytest.param(7, "000007.json", id="single digit"),
        pytest.param(123, "000123.json", id="three digits"),
        pytest.param(123456, "123456.json", id="six digits"),
        pytest.param(1234567, "1234567.json", id="seven digits are not truncated"),
    ],
)
def test_issue_file_name(number: int, expected: str) -> None:
    """Test that issue numbers map to zero-padded file names."""
    assert issue_file_name(number) == expected


def test_issue_file_names_sort_numerically() -> None:
    """Test that padded names sort in issue number order."""
    numbers = [100, 9, 25, 3000]
    assert sorted(issue_file_name(n) for n in numbers) == [issue_file_name(n) for n in sorted(numbers)]


def test_mirror_paths_layout(tmp_path: Path) -> None:
    """Test the mirror layout inside a checkout."""
    paths = MirrorPaths.for_repository(tmp_path)
    assert paths.root == tmp_path / ".github-mirror"
    assert paths.state_file == tmp_path / ".github-mirror" / "state.json"
    assert paths.issues_dir == tmp_path / ".github-mirror" / "issues"
    paths.ensure()
    paths.ensure()
    assert paths.issues_dir.is_dir()


def test_mirror_paths_ensure_failure(tmp_path: Path) -> None:
    """Test that a mirror directory blocked by a file is a persistence error."""
    (tmp_path / ".github-mirror").write_text("not a directory")
    with pytest.raises(PersistenceError):
        MirrorPaths.for_repository(tmp_path).ensure()


def test_write_issue_record(tmp_path: Path) -> None:
    """Test that a record is written under its padded number with all fields."""
    record = IssueRecord(
        fetched_at="2024-01-01T00:00:00.000Z",
        repo="octocat/Hello-World",
        issue={"number": 42, "title": "Bug", "pull_request": {"url": "x"}},
        comments=[{"id": 1, "body": "first"}, {"id": 2, "body": "second"}],
    )
    path = write_issue_record(tmp_path, record)
    assert path == tmp_path / "000042.json"
    document = json.loads(path.read_text(encoding="utf-8"))
    assert document == {
        "comments": [{"body": "first", "id": 1}, {"body": "second", "id": 2}],
        "fetchedAt": "2024-01-01T00:00:00.000Z",
        "issue": {"number": 42, "pull_request": {"url": "x"}, "title": "Bug"},
        "repo": "octocat/Hello-World",
        "schemaVersion": 1,
    }


def test_write_issue_record_overwrites(tmp_path: Path) -> None:
    """Test that an existing record is replaced unconditionally."""
    (tmp_path / "000042.json").write_text('{"stale": true}', encoding="utf-8")
    record = IssueRecord(fetched_at="now", repo="a/b", issue={"number": 42})
    write_issue_record(tmp_path, record)
    document = json.loads((tmp_path / "000042.json").read_text(encoding="utf-8"))
    assert "stale" not in document
    assert document["comments"] == []
