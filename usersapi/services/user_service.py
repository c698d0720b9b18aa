"""User collection use cases (list, create, update, delete) over the JSON file."""

from __future__ import annotations

from contextlib import nullcontext
from pathlib import Path
from typing import Any
import logging
import threading

from usersapi.domain.users import check_user, merge_user
from usersapi.repositories import json_storage
from usersapi.repositories.json_storage import CorruptStateError, StorageError, StorageIOError

logger = logging.getLogger(__name__)

__all__ = [
    "UserStore",
    "UserError",
    "UserValidationError",
    "StorageError",
    "StorageIOError",
    "CorruptStateError",
]


class UserError(Exception):
    """Base exception for user workflow."""


class UserValidationError(UserError):
    """Raised when a candidate record is rejected by the validator."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class UserStore:
    """
    Owns the users file and runs every operation as load -> mutate -> save.

    With ``serialize_writes`` on, the internal lock spans the whole cycle so
    concurrent requests are applied one after the other. With it off, two
    overlapping cycles read the same snapshot and the later save wins.
    """

    def __init__(self, path: Path, *, serialize_writes: bool = True) -> None:
        self.path = Path(path)
        self.serialize_writes = serialize_writes
        self._lock = threading.Lock()

    def _cycle(self):
        return self._lock if self.serialize_writes else nullcontext()

    def load(self) -> list[dict]:
        return json_storage.load(self.path)

    def save(self, users: list[dict]) -> None:
        json_storage.save(self.path, users)

    def list_all(self) -> list[dict]:
        with self._cycle():
            return self.load()

    def append(self, candidate: dict[str, Any]) -> dict[str, Any]:
        with self._cycle():
            users = self.load()
            result = check_user(candidate, users)
            if not result.accepted:
                logger.info("Rejected new user: %s", result.reason)
                raise UserValidationError(result.reason or "Invalid user.")
            users.append(candidate)
            self.save(users)
        logger.info("Created user id=%s", candidate.get("id"))
        return candidate

    def update_by_id(self, user_id: int, patch: dict[str, Any]) -> dict[str, Any]:
        """
        Merge ``patch`` onto the record with ``user_id`` and return the patch as sent.

        A missing id leaves the collection as it was and still succeeds; the
        patch alone is then what gets validated.
        """
        with self._cycle():
            users = self.load()
            target = next((u for u in users if u.get("id") == user_id), None)
            merged = merge_user(target, patch) if target is not None else dict(patch)
            result = check_user(merged, users, current_id=user_id)
            if not result.accepted:
                logger.info("Rejected update for user id=%s: %s", user_id, result.reason)
                raise UserValidationError(result.reason or "Invalid user.")
            users = [merge_user(u, patch) if u.get("id") == user_id else u for u in users]
            self.save(users)
        if target is None:
            logger.info("Update for unknown user id=%s left the collection unchanged", user_id)
        else:
            logger.info("Updated user id=%s", user_id)
        return patch

    def delete_by_id(self, user_id: int) -> None:
        with self._cycle():
            users = self.load()
            remaining = [u for u in users if u.get("id") != user_id]
            self.save(remaining)
        logger.info("Deleted %d user(s) with id=%s", len(users) - len(remaining), user_id)
