"""
JSON-file persistence adapter for the user collection.

The whole collection lives in one file as a JSON array. Every write replaces
the file in one step (temp file + os.replace), so a failed save leaves the
previous content in place.
"""

from __future__ import annotations

from pathlib import Path
import json
import logging
import os
import stat
import tempfile

logger = logging.getLogger(__name__)

NEW_FILE_MODE = 0o644


class StorageError(Exception):
    """Base exception for the collection file."""


class StorageIOError(StorageError):
    """Raised when the file cannot be read or written."""

    def __init__(self, message: str, *, action: str):
        super().__init__(message)
        self.action = action


class CorruptStateError(StorageError):
    """Raised when the file content is not a JSON array of objects."""


def load(path: Path) -> list[dict]:
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise StorageIOError(f"Cannot read {path}: {exc}", action="read") from exc
    try:
        data = json.loads(raw.decode("utf-8"))
    except ValueError as exc:
        raise CorruptStateError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise CorruptStateError(f"{path} does not contain a list of objects")
    return data


def save(path: Path, records: list[dict]) -> None:
    target = Path(path)
    payload = json.dumps(records, ensure_ascii=False, indent=2)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        # mkstemp creates 0600; keep the mode the operator gave the file
        mode = stat.S_IMODE(target.stat().st_mode) if target.exists() else NEW_FILE_MODE
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
    except OSError as exc:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise StorageIOError(f"Cannot write {path}: {exc}", action="write") from exc
    logger.debug("Wrote %d users to %s", len(records), target)


def init_file(path: Path, *, force: bool = False) -> bool:
    """Create the file with an empty collection. Returns False if it already exists."""
    target = Path(path)
    if target.exists() and not force:
        return False
    target.parent.mkdir(parents=True, exist_ok=True)
    save(target, [])
    return True
