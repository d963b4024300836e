from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from taskapi.database import get_session
from taskapi.auth.models import Identity
from taskapi.auth.service import AuthService, verify_token
from taskapi.auth.repository import UserRepository


# HTTP Bearer token scheme - auto_error=False to handle missing tokens ourselves
bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_service(
    session: Annotated[AsyncSession, Depends(get_session)]
) -> AuthService:
    """Dependency to get AuthService instance with the SQLite repository."""
    return AuthService(UserRepository(session))


async def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> Identity:
    """Resolve the caller from the Authorization: Bearer header."""
    token = credentials.credentials if credentials is not None else None
    return verify_token(token)


# Type alias for cleaner dependency injection
CurrentUser = Annotated[Identity, Depends(get_current_user)]
