"""
Task API - Authentication Router

Endpoints for user registration and login.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from taskapi.auth.schemas import (
    UserRegisterRequest,
    UserLoginRequest,
    UserResponse,
    RegisterResponse,
    LoginResponse,
)
from taskapi.auth.service import AuthService
from taskapi.auth.dependencies import get_auth_service


router = APIRouter(prefix="/api", tags=["Authentication"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    request: UserRegisterRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> RegisterResponse:
    """
    Register a new user with name, email and password.

    Returns 400 if a field is missing or the email is already registered.
    """
    user = await auth_service.register_user(
        name=request.name,
        email=request.email,
        password=request.password,
    )
    return RegisterResponse(
        message="User registered successfully",
        user=UserResponse.model_validate(user),
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
)
async def login(
    request: UserLoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponse:
    """
    Authenticate user and return JWT access token.

    Use the returned token in the Authorization header:
    `Authorization: Bearer <token>`
    """
    token, user = await auth_service.login(email=request.email, password=request.password)
    return LoginResponse(
        message="Login successful",
        token=token,
        user=UserResponse.model_validate(user),
    )
