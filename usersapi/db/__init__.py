"""Database helpers for the relational users table (engine/session export)."""

from .session import Base, get_engine, get_session, reset_caches

__all__ = ["Base", "get_engine", "get_session", "reset_caches"]
