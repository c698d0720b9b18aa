"""Domain rules for user records (shape checks, e-mail uniqueness)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping


@dataclass(frozen=True)
class ValidationResult:
    accepted: bool
    reason: str | None = None


def _accept() -> ValidationResult:
    return ValidationResult(True)


def _reject(reason: str) -> ValidationResult:
    return ValidationResult(False, reason)


def normalize_email(value: str | None) -> str:
    return (value or "").strip().lower()


def _is_int(value: Any) -> bool:
    # bool is a subclass of int; True/False are not valid ids
    return isinstance(value, int) and not isinstance(value, bool)


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def merge_user(current: Mapping[str, Any], patch: Mapping[str, Any]) -> dict:
    """Shallow merge where the patch fields win."""
    merged = dict(current)
    merged.update(patch)
    return merged


def check_user(
    candidate: Any,
    existing: Iterable[Mapping[str, Any]],
    *,
    current_id: int | None = None,
) -> ValidationResult:
    """
    Decide whether ``candidate`` may be stored next to ``existing``.

    When ``current_id`` is given the candidate replaces that record, so records
    carrying the same id are ignored by the id and e-mail collision checks.
    """
    if not isinstance(candidate, Mapping):
        return _reject("User must be a JSON object.")
    if "id" not in candidate or candidate["id"] is None:
        return _reject("Field 'id' is required.")
    if not _is_int(candidate["id"]):
        return _reject("Field 'id' must be an integer.")
    for field in ("name", "email"):
        if field in candidate and not _is_text(candidate[field]):
            return _reject(f"Field '{field}' must be a non-empty string.")

    email = normalize_email(candidate.get("email"))
    for user in existing:
        if current_id is not None and user.get("id") == current_id:
            continue
        if user.get("id") == candidate["id"]:
            return _reject("Id already registered.")
        other = user.get("email")
        if email and isinstance(other, str) and normalize_email(other) == email:
            return _reject("Email already registered.")
    return _accept()
