"""
Configuration helpers for the users API.

Routers/services read a Settings object instead of fetching os.environ
directly, so tests can swap values with monkeypatch + cache_clear().
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_USERS_FILE = Path(__file__).resolve().parents[2] / "users.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    port: int
    users_file: Path
    serialize_writes: bool
    require_auth: bool
    database_url: str
    jwt_secret: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    users_file = (os.getenv("USERS_FILE") or "").strip()
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        port=_int(os.getenv("PORT", "3000"), 3000),
        users_file=Path(users_file) if users_file else DEFAULT_USERS_FILE,
        serialize_writes=_bool(os.getenv("USERS_SERIALIZE_WRITES"), True),
        require_auth=_bool(os.getenv("USERS_REQUIRE_AUTH"), False),
        database_url=os.getenv("DATABASE_URL", ""),
        jwt_secret=os.getenv("JWT_SECRET", ""),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
