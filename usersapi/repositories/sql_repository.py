"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from sqlalchemy import delete, select

from usersapi.db.models import User
from usersapi.db.session import get_session


def user_to_dict(entity: User) -> dict:
    return {"id": entity.id, "name": entity.name, "email": entity.email}


class SQLRepository:
    """Read-side helpers for the relational users table."""

    def list_users(self) -> list[User]:
        with get_session() as session:
            return session.execute(select(User).order_by(User.id)).scalars().all()

    def get_user_by_email(self, email: str) -> User | None:
        with get_session() as session:
            stmt = select(User).where(User.email == email)
            return session.execute(stmt).scalar_one_or_none()

    def create_user(self, name: str | None, email: str) -> User:
        entity = User(name=name, email=email)
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def delete_all_users(self) -> int:
        with get_session() as session:
            result = session.execute(delete(User))
            session.commit()
            return result.rowcount or 0
