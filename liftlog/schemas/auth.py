"""
LiftLog API - Authentication Schemas.

Pydantic schemas for authentication requests and responses.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, ConfigDict


class RegisterRequest(BaseModel):
    """
    Schema for user registration request.

    Attributes:
        email: User's email address.
        password: User's password (min 8 characters).
        name: User's display name.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123",
                "name": "Jane Doe"
            }
        }
    )

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=8,
        description="User's password (minimum 8 characters)"
    )
    name: str = Field(..., min_length=1, description="User's display name")


class LoginRequest(BaseModel):
    """
    Schema for user login request.

    Attributes:
        email: User's email address.
        password: User's password.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123"
            }
        }
    )

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="User's password")


class TokenResponse(BaseModel):
    """
    Schema for authentication token response.

    Attributes:
        access_token: JWT access token.
        token_type: Token type (always "bearer").
        user_id: Authenticated user's ID.
    """

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    user_id: str = Field(..., description="Authenticated user's ID")


class UserResponse(BaseModel):
    """Public view of the authenticated user."""

    user_id: str
    email: str
    name: str
    created_at: Optional[datetime] = None
