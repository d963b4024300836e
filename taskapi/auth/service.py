import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from taskapi.config import settings
from taskapi.auth.models import Identity, User
from taskapi.auth.repository import UserRepository
from taskapi.errors import (
    AuthError,
    ConflictError,
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
    ValidationError,
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hash a password using bcrypt."""
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode("utf-8"))


def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token carrying the user's identity."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)

    now = datetime.now(timezone.utc)
    to_encode = {
        "sub": str(user.id),
        "name": user.name,
        "email": user.email,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: Optional[str]) -> Identity:
    """Decode and validate a JWT token.

    Stateless: the identity comes from the token claims only.
    Raises MissingTokenError, ExpiredTokenError or InvalidTokenError.
    """
    if not token:
        raise MissingTokenError()

    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except ExpiredSignatureError as e:
        raise ExpiredTokenError() from e
    except JWTError as e:
        raise InvalidTokenError() from e

    try:
        return Identity(
            id=int(payload["sub"]),
            name=payload["name"],
            email=payload["email"],
        )
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidTokenError() from e


class AuthService:
    """Registration and login against the credential store."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def register_user(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> User:
        """Register a new user.

        Raises ValidationError when a field is missing or empty and
        ConflictError when the email is already registered.
        """
        if not name or not email or not password:
            raise ValidationError("Name, email, and password are required")

        if await self.repository.exists_by_email(email):
            raise ConflictError("User with this email already exists")

        user = User(name=name, email=email, password_hash=hash_password(password))
        user = await self.repository.create(user)
        logger.info(f"Registered user id={user.id}")
        return user

    async def login(self, email: Optional[str], password: Optional[str]) -> tuple[str, User]:
        """Authenticate by email and password and issue an access token.

        An unknown email and a wrong password raise the same AuthError.
        """
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = await self.repository.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login attempt")
            raise AuthError(INVALID_CREDENTIALS)

        return create_access_token(user), user
