"""Whole-file JSON writes shared by the state store and snapshot writer."""

import contextlib
import os
from pathlib import Path
from typing import Any

from github_issues_mirror.configuration.exceptions import PersistenceError
from github_issues_mirror.utils.helpers import dump_json


def write_json_file(path: Path, data: Any) -> None:
    """Replace path with data serialized as stable JSON.

    The document is written to a sibling temporary file first and moved into
    place, so a reader never sees a partially written file.

    Raises:
        PersistenceError: If the file cannot be written.
    """
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        tmp_path.write_text(dump_json(data), encoding="utf-8")
        os.replace(tmp_path, path)
    except OSError as exc:
        with contextlib.suppress(OSError):
            tmp_path.unlink(missing_ok=True)
        raise PersistenceError(str(path), exc.strerror or str(exc)) from exc
