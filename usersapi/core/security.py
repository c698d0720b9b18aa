"""Bearer-token helpers (issue and verify signed JWTs)."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from fastapi import HTTPException, Request

from .config import get_settings

ALGORITHM = "HS256"


def issue_token(claims: dict[str, Any], *, ttl_seconds: int = 3600, secret: str | None = None) -> str:
    """Sign ``claims`` with the configured secret and an ``exp`` claim."""
    key = secret if secret is not None else get_settings().jwt_secret
    if not key:
        raise RuntimeError("JWT_SECRET must be configured to issue tokens.")
    payload = dict(claims)
    payload["exp"] = datetime.now(timezone.utc) + timedelta(seconds=ttl_seconds)
    return jwt.encode(payload, key, algorithm=ALGORITHM)


def decode_token(token: str, secret: str) -> dict[str, Any]:
    return jwt.decode(token, secret, algorithms=[ALGORITHM])


def _bearer_token(request: Request) -> str:
    header = (request.headers.get("authorization") or "").strip()
    scheme, _, value = header.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return value.strip()


def require_token(request: Request) -> dict[str, Any]:
    """
    FastAPI dependency: verify the bearer token and expose its claims.

    Missing token -> 401, bad signature/expired/unconfigured secret -> 403.
    The decoded claims are stored on ``request.state.user``.
    """
    token = _bearer_token(request)
    if not token:
        raise HTTPException(401, "Access denied, no token provided")
    secret = get_settings().jwt_secret
    if not secret:
        raise HTTPException(403, "Invalid token")
    try:
        claims = decode_token(token, secret)
    except jwt.InvalidTokenError:
        raise HTTPException(403, "Invalid token")
    request.state.user = claims
    return claims
