"""Create the relational schema used by the /db-users path."""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers User on Base.metadata


def create_all() -> list[str]:
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    return sorted(Base.metadata.tables)


if __name__ == "__main__":
    try:
        tables = create_all()
        print(f"Database tables ready: {', '.join(tables)}")
    except (SQLAlchemyError, RuntimeError) as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
