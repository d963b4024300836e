"""
Task API - Authentication Module

Register/login with JWT authentication.
"""

from taskapi.auth.router import router as auth_router
from taskapi.auth.dependencies import get_current_user, CurrentUser

__all__ = ["auth_router", "get_current_user", "CurrentUser"]
