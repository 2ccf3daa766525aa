"""
LiftLog API - Authentication Routes.

Endpoints for user registration, login and the current profile.
"""

import uuid

from fastapi import APIRouter, Depends, status

from liftlog.dependencies import get_current_user_id, get_user_store
from liftlog.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from liftlog.services.auth import create_access_token, hash_password, verify_password
from liftlog.services.store import UserStore
from liftlog.utils.errors import AuthenticationError, ConflictError, NotFoundError

router = APIRouter()


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    users: UserStore = Depends(get_user_store)
) -> TokenResponse:
    """
    Register a new user with email and password.

    Raises:
        ConflictError: 409 if the email is already registered.
    """
    if await users.get_by_email(request.email):
        raise ConflictError("Email already registered")

    user = await users.create(
        email=request.email,
        name=request.name,
        password_hash=hash_password(request.password),
    )
    return TokenResponse(
        access_token=create_access_token({"sub": str(user.id)}),
        user_id=str(user.id),
    )


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    users: UserStore = Depends(get_user_store)
) -> TokenResponse:
    """
    Login user with email and password.

    Raises:
        AuthenticationError: 401 if the credentials do not match.
    """
    user = await users.get_by_email(request.email)
    if not user or not verify_password(request.password, user.password_hash):
        raise AuthenticationError("Invalid email or password")

    await users.record_login(user.id)
    return TokenResponse(
        access_token=create_access_token({"sub": str(user.id)}),
        user_id=str(user.id),
    )


@router.get("/me", response_model=UserResponse)
async def get_me(
    user_id: uuid.UUID = Depends(get_current_user_id),
    users: UserStore = Depends(get_user_store)
) -> UserResponse:
    """Get the authenticated user's profile."""
    user = await users.get(user_id)
    if not user:
        raise NotFoundError("User not found")
    return UserResponse(
        user_id=str(user.id),
        email=user.email,
        name=user.name,
        created_at=user.created_at,
    )
