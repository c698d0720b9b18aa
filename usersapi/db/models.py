"""SQLAlchemy models for the relational users table."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, func

from .session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=True)
    email = Column(String(255), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
