from __future__ import annotations

import sys
from pathlib import Path

# Garante que o pacote usersapi seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from usersapi.domain.users import check_user, merge_user  # noqa: E402

EXISTING = [
    {"id": 1, "name": "A", "email": "a@x.com"},
    {"id": 2, "name": "B", "email": "b@x.com"},
]


def test_accepts_new_user_with_distinct_email():
    result = check_user({"id": 3, "name": "C", "email": "c@x.com"}, EXISTING)
    assert result.accepted is True
    assert result.reason is None


def test_rejects_missing_id():
    result = check_user({"name": "C", "email": "c@x.com"}, EXISTING)
    assert result.accepted is False
    assert "id" in result.reason


def test_rejects_non_integer_ids():
    for bad in ("3", 3.5, True, None):
        result = check_user({"id": bad, "name": "C", "email": "c@x.com"}, EXISTING)
        assert result.accepted is False, bad


def test_rejects_non_text_name_or_email():
    assert not check_user({"id": 3, "name": 42}, EXISTING).accepted
    assert not check_user({"id": 3, "email": ["c@x.com"]}, EXISTING).accepted
    assert not check_user({"id": 3, "email": "   "}, EXISTING).accepted


def test_rejects_non_mapping_candidate():
    assert not check_user([1, 2], EXISTING).accepted


def test_rejects_duplicate_email_ignoring_case_and_spaces():
    result = check_user({"id": 3, "name": "C", "email": " A@X.com "}, EXISTING)
    assert result.accepted is False
    assert result.reason == "Email already registered."


def test_update_may_keep_its_own_email():
    merged = merge_user(EXISTING[0], {"name": "A2"})
    assert check_user(merged, EXISTING, current_id=1).accepted


def test_update_rejects_email_of_a_different_record():
    merged = merge_user(EXISTING[0], {"email": "b@x.com"})
    result = check_user(merged, EXISTING, current_id=1)
    assert result.accepted is False


def test_extra_fields_are_allowed_and_inputs_untouched():
    candidate = {"id": 3, "email": "c@x.com", "role": "admin"}
    before = [dict(u) for u in EXISTING]
    assert check_user(candidate, EXISTING).accepted
    assert EXISTING == before
    assert candidate == {"id": 3, "email": "c@x.com", "role": "admin"}


def test_merge_user_prefers_patch_fields():
    assert merge_user({"id": 1, "name": "A"}, {"name": "B", "age": 3}) == {"id": 1, "name": "B", "age": 3}


def test_rejects_duplicate_id():
    result = check_user({"id": 2, "name": "C", "email": "c@x.com"}, EXISTING)
    assert result.accepted is False
    assert result.reason == "Id already registered."


def test_update_may_keep_its_own_id_but_not_take_another():
    assert check_user(merge_user(EXISTING[0], {"id": 1}), EXISTING, current_id=1).accepted
    result = check_user(merge_user(EXISTING[0], {"id": 2}), EXISTING, current_id=1)
    assert result.accepted is False
    assert result.reason == "Id already registered."
