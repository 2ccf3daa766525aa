"""
LiftLog API - FastAPI Dependencies.

Dependency injection helpers for routes.
"""

import uuid

from fastapi import Depends

from liftlog.middleware.auth import jwt_bearer
from liftlog.services.store import (
    BeanieUserStore,
    BeanieWorkoutStore,
    UserStore,
    WorkoutStore,
)
from liftlog.services.workout_stats import WorkoutStatsService
from liftlog.utils.errors import AuthenticationError
from settings import settings

_workout_store = BeanieWorkoutStore()
_user_store = BeanieUserStore()


async def get_current_user_id(
    user_id: str = Depends(jwt_bearer)
) -> uuid.UUID:
    """
    Get current authenticated user ID from JWT token.

    Args:
        user_id: User ID extracted by jwt_bearer dependency.

    Returns:
        uuid.UUID: Authenticated user's ID, the owner of their workouts.

    Raises:
        AuthenticationError: 401 if not authenticated or the subject is malformed.
    """
    if not user_id:
        raise AuthenticationError("Not authenticated")
    try:
        return uuid.UUID(user_id)
    except ValueError:
        raise AuthenticationError("Invalid token payload")


def get_workout_store() -> WorkoutStore:
    return _workout_store


def get_user_store() -> UserStore:
    return _user_store


def get_stats_service(
    store: WorkoutStore = Depends(get_workout_store)
) -> WorkoutStatsService:
    """Statistics service bound to the request's workout store."""
    return WorkoutStatsService(store, list_limit=settings.WORKOUT_LIST_LIMIT)
