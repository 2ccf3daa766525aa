"""LiftLog API - Services Package."""

from .auth import (
    hash_password,
    verify_password,
    create_access_token,
    verify_token,
)
from .store import (
    BeanieUserStore,
    BeanieWorkoutStore,
    DateRange,
    SortOrder,
    UserStore,
    WorkoutQuery,
    WorkoutStore,
)
from .workout_stats import WorkoutStatsService, bucketize, summarize_progress

__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "verify_token",
    "BeanieUserStore",
    "BeanieWorkoutStore",
    "DateRange",
    "SortOrder",
    "UserStore",
    "WorkoutQuery",
    "WorkoutStore",
    "WorkoutStatsService",
    "bucketize",
    "summarize_progress",
]
