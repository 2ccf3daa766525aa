"""
LiftLog API - User domain model.

Account record as returned by the user store.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class UserAccount(BaseModel):
    """
    A registered user.

    Attributes:
        id: Unique identifier, used as the owner id of workouts.
        email: Lowercased login email.
        name: Display name.
        password_hash: Bcrypt hash of the password.
        created_at: Account creation timestamp.
        last_login_at: Last successful login.
    """

    id: UUID
    email: str
    name: str
    password_hash: str
    created_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None
