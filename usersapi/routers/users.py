from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from usersapi.core.errors import error_response
from usersapi.core.security import require_token
from usersapi.services.user_service import (
    StorageError,
    StorageIOError,
    UserStore,
    UserValidationError,
)

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)

READ_ERROR = "Error with data connection."
CREATE_ERROR = "Error saving the user."
UPDATE_ERROR = "Error updating the user."
DELETE_ERROR = "Error deleting the user."


def _get_user_store(request: Request) -> UserStore:
    store = getattr(getattr(request.app, "state", None), "user_store", None)
    if not store:
        raise RuntimeError("UserStore nao configurado")
    return store


def _write_guard(request: Request) -> dict | None:
    settings = getattr(request.app.state, "settings", None)
    if settings is not None and settings.require_auth:
        return require_token(request)
    return None


def _storage_failure(exc: StorageError, write_message: str) -> JSONResponse:
    logger.error("User storage failure: %s", exc)
    if isinstance(exc, StorageIOError) and exc.action == "write":
        return error_response(500, write_message)
    return error_response(500, READ_ERROR)


@router.get("")
def list_users(request: Request):
    store = _get_user_store(request)
    try:
        return store.list_all()
    except StorageError as exc:
        return _storage_failure(exc, READ_ERROR)


@router.post("", status_code=201, dependencies=[Depends(_write_guard)])
def create_user(payload: dict, request: Request):
    store = _get_user_store(request)
    try:
        return store.append(payload)
    except UserValidationError as exc:
        return error_response(400, exc.reason)
    except StorageError as exc:
        return _storage_failure(exc, CREATE_ERROR)


@router.put("/{user_id}", dependencies=[Depends(_write_guard)])
def update_user(user_id: int, payload: dict, request: Request):
    store = _get_user_store(request)
    try:
        return store.update_by_id(user_id, payload)
    except UserValidationError as exc:
        return error_response(400, exc.reason)
    except StorageError as exc:
        return _storage_failure(exc, UPDATE_ERROR)


@router.delete("/{user_id}", status_code=204, dependencies=[Depends(_write_guard)])
def delete_user(user_id: int, request: Request):
    store = _get_user_store(request)
    try:
        store.delete_by_id(user_id)
    except StorageError as exc:
        return _storage_failure(exc, DELETE_ERROR)
    return Response(status_code=204)
