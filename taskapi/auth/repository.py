import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taskapi.auth.models import User
from taskapi.errors import ConflictError, InternalError

logger = logging.getLogger(__name__)


class UserRepository:
    """SQLite implementation of the credential store."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, user: User) -> User:
        """Insert a new user and return it with its generated id."""
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError as e:
            # Lost a race against a concurrent registration of the same email
            await self.session.rollback()
            raise ConflictError("User with this email already exists") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"[UserRepository] Error creating user: {e}", exc_info=True)
            raise InternalError("Failed to register user") from e
        await self.session.refresh(user)
        logger.info(f"[UserRepository] User created: email={user.email}, id={user.id}")
        return user

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (exact match)."""
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        return await self.get_by_email(email) is not None
