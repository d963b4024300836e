"""
Task API - Error Types

Domain exceptions raised by the services. Exception handlers registered in
taskapi.main turn each one into a JSON body of the form {"error": message}
with the class's status code.

    TaskApiError (base)
    ├── ValidationError      → 400
    ├── ConflictError        → 400
    ├── AuthError            → 401
    │   ├── MissingTokenError
    │   ├── ExpiredTokenError
    │   └── InvalidTokenError
    ├── NotFoundError        → 404
    └── InternalError        → 500
"""

from fastapi import status


class TaskApiError(Exception):
    """Base exception for all application errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TaskApiError):
    """Missing or malformed client input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"


class ConflictError(TaskApiError):
    """A unique value (the email address) is already taken."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Resource already exists"


class AuthError(TaskApiError):
    """Bad credentials or an unusable bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Token verification failed."


class MissingTokenError(AuthError):
    default_message = "Access denied. No token provided."


class ExpiredTokenError(AuthError):
    default_message = "Token expired. Please log in again."


class InvalidTokenError(AuthError):
    default_message = "Invalid token. Please log in again."


class NotFoundError(TaskApiError):
    """Missing resource, or one owned by another user."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InternalError(TaskApiError):
    """Unexpected store or runtime failure."""
