"""LiftLog API - Pydantic Schemas Package."""

from liftlog.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    TokenResponse,
    UserResponse,
)
from liftlog.schemas.workout import (
    WorkoutCreate,
    WorkoutUpdate,
    ProgressObservation,
    ProgressReport,
    DaySlot,
    WeeklyViewResponse,
    MessageResponse,
)

__all__ = [
    # Auth
    "RegisterRequest",
    "LoginRequest",
    "TokenResponse",
    "UserResponse",
    # Workout
    "WorkoutCreate",
    "WorkoutUpdate",
    "ProgressObservation",
    "ProgressReport",
    "DaySlot",
    "WeeklyViewResponse",
    "MessageResponse",
]
