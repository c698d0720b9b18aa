from __future__ import annotations

import html
import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from usersapi.core.errors import error_response
from usersapi.repositories.sql_repository import SQLRepository, user_to_dict

router = APIRouter(prefix="", tags=["demo"])
logger = logging.getLogger(__name__)
_sql_repo = SQLRepository()

DB_ERROR = "Error communicating with the database."


@router.get("/", response_class=HTMLResponse)
def home(request: Request):
    settings = getattr(request.app.state, "settings", None)
    port = settings.port if settings else ""
    return HTMLResponse(
        "<h1>Users API</h1>"
        "<p>File-backed user collection served with FastAPI.</p>"
        f"<p>Running on port: {html.escape(str(port))}</p>"
    )


@router.get("/error")
def intentional_error():
    raise RuntimeError("Intentional error")


@router.get("/db-users")
def db_users():
    try:
        users = _sql_repo.list_users()
    except Exception:
        logger.exception("Failed to list users from the database")
        return error_response(500, DB_ERROR)
    return [user_to_dict(u) for u in users]
