"""
Smoke tests for the SQLRepository and /db-users against a temporary SQLite database.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garante que o pacote usersapi seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from usersapi.app import create_app  # noqa: E402
from usersapi.core import config as core_config  # noqa: E402
from usersapi.db import models  # noqa: E402
from usersapi.db import session as db_session  # noqa: E402
from usersapi.repositories.sql_repository import SQLRepository  # noqa: E402


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Configura um SQLite temporário e garante teardown completo para não deixar o arquivo bloqueado no Windows."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    # limpa caches para forçar re-leitura de envs
    core_config.get_settings.cache_clear()
    db_session.reset_caches()

    engine = db_session.get_engine()
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    models.Base.metadata.drop_all(bind=engine)
    db_session.reset_caches()
    core_config.get_settings.cache_clear()


def test_create_and_list_users(temp_db):
    repo = SQLRepository()
    assert repo.list_users() == []
    repo.create_user("Juan Pérez", "juan.perez@example.com")
    repo.create_user("María López", "maria.lopez@example.com")
    users = repo.list_users()
    assert [u.email for u in users] == ["juan.perez@example.com", "maria.lopez@example.com"]
    assert repo.get_user_by_email("maria.lopez@example.com").name == "María López"
    assert repo.get_user_by_email("nobody@example.com") is None


def test_delete_all_users(temp_db):
    repo = SQLRepository()
    repo.create_user("A", "a@example.com")
    repo.create_user("B", "b@example.com")
    assert repo.delete_all_users() == 2
    assert repo.list_users() == []


def test_db_users_route_lists_relational_users(temp_db):
    repo = SQLRepository()
    created = repo.create_user("A", "a@example.com")
    client = TestClient(create_app())
    resp = client.get("/db-users")
    assert resp.status_code == 200
    assert resp.json() == [{"id": created.id, "name": "A", "email": "a@example.com"}]


def test_seed_script_clears_and_inserts_demo_users(temp_db):
    scripts_dir = ROOT / "scripts"
    if str(scripts_dir) not in sys.path:
        sys.path.insert(0, str(scripts_dir))
    import seed_db

    repo = SQLRepository()
    repo.create_user("Old", "old@example.com")
    removed, created = seed_db.seed(repo, demo=True)
    assert (removed, created) == (1, 3)
    assert {u.email for u in repo.list_users()} == {email for _, email in seed_db.DEMO_USERS}


def test_seed_script_keep_skips_existing_demo_users(temp_db):
    scripts_dir = ROOT / "scripts"
    if str(scripts_dir) not in sys.path:
        sys.path.insert(0, str(scripts_dir))
    import seed_db

    repo = SQLRepository()
    repo.create_user("Old", "old@example.com")
    repo.create_user("Juan", "juan.perez@example.com")
    removed, created = seed_db.seed(repo, demo=True, keep=True)
    assert (removed, created) == (0, 2)
    assert len(repo.list_users()) == 4
    assert repo.get_user_by_email("juan.perez@example.com").name == "Juan"
