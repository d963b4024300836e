"""
Task API - Startup Security Checks

Run from the application lifespan before the database opens. Each check only
emits a UserWarning, so development and test runs keep working:

- the placeholder JWT signing secret is still set in production
- the JWT signing secret is shorter than MIN_SECRET_LENGTH in production
- CORS_ORIGINS contains the "*" wildcard
"""

import warnings

from taskapi.config import settings

DEFAULT_JWT_SECRET = "dev-secret-key-change-in-production"
MIN_SECRET_LENGTH = 32


def _warn(message: str) -> None:
    warnings.warn(f"SECURITY WARNING: {message}", UserWarning, stacklevel=3)


def validate_security_config() -> None:
    """Warn about insecure settings for the current environment."""
    if settings.is_production:
        if settings.JWT_SECRET_KEY == DEFAULT_JWT_SECRET:
            _warn(
                "Using default JWT_SECRET_KEY in production. "
                "Set JWT_SECRET_KEY to a strong secret."
            )
        if len(settings.JWT_SECRET_KEY) < MIN_SECRET_LENGTH:
            _warn(f"JWT_SECRET_KEY is shorter than {MIN_SECRET_LENGTH} characters.")

    if "*" in settings.CORS_ORIGINS:
        _warn("CORS wildcard (*) detected. Set specific origins via CORS_ORIGINS.")
