from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from taskapi.database import Base


def _utcnow() -> datetime:
    """Current UTC time. SQLite drops the offset, so stored values are naive UTC."""
    return datetime.now(timezone.utc)


class User(Base):
    """User entity for authentication."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=_utcnow, onupdate=_utcnow
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"


@dataclass(frozen=True)
class Identity:
    """The verified caller, decoded from a bearer token.

    A snapshot taken when the token was issued; it is never refreshed from
    the store.
    """

    id: int
    name: str
    email: str
