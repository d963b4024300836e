"""
Task API - Authentication Schemas

Pydantic models for authentication requests and responses.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class UserRegisterRequest(BaseModel):
    """Request schema for user registration.

    Fields are optional here so that missing values reach the service and
    come back as a 400 with a readable message.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserLoginRequest(BaseModel):
    """Request schema for user login."""

    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    """Public user information. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class RegisterResponse(BaseModel):
    message: str
    user: UserResponse


class LoginResponse(BaseModel):
    """Response schema for successful authentication."""

    message: str
    token: str
    user: UserResponse
