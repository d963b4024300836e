"""
Task API - Task Models

ORM model for the tasks table.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from taskapi.database import Base

DEFAULT_PRIORITY = "medium"


def _utcnow() -> datetime:
    """Current UTC time. SQLite drops the offset, so stored values are naive UTC."""
    return datetime.now(timezone.utc)


class Task(Base):
    """Task entity. Owned by exactly one user for its whole lifetime."""

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    priority: Mapped[str] = mapped_column(String(50), nullable=False, default=DEFAULT_PRIORITY)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=_utcnow, onupdate=_utcnow
    )

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, user_id={self.user_id}, title='{self.title}')>"
