"""
LiftLog API - Workout domain models.

Plain pydantic models shared by the document layer, the API schemas and the
aggregation services. Exercises and sets only exist inside a workout.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from liftlog.utils.dates import ensure_utc


class WeightUnit(str, Enum):
    """Unit a set weight was logged in."""

    KG = "kg"
    LBS = "lbs"


class SetEntry(BaseModel):
    """A single set: weight is required, reps default to one."""

    model_config = ConfigDict(str_strip_whitespace=True)

    weight: float = Field(..., ge=0, description="Weight lifted")
    reps: int = Field(default=1, ge=1, description="Repetitions")
    notes: Optional[str] = None


class ExerciseEntry(BaseModel):
    """An exercise logged within a workout."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, description="Exercise name")
    unit: WeightUnit = WeightUnit.KG
    sets: List[SetEntry] = Field(default_factory=list)
    exercise_notes: Optional[str] = None


class Workout(BaseModel):
    """
    A workout as seen by the API and the aggregation services.

    Attributes:
        id: Public workout identifier.
        owner_id: Owning user's identifier (immutable).
        date: Point in time the workout took place (aware UTC).
        workout_type: Free-text category.
        notes: Free-text notes.
        exercises: Exercises in logged order.
        created_at: Record creation timestamp.
        updated_at: Last edit timestamp.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    id: UUID
    owner_id: UUID
    date: datetime
    workout_type: str = "General"
    notes: Optional[str] = None
    exercises: List[ExerciseEntry] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("date", "created_at", "updated_at")
    @classmethod
    def _as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is None:
            return value
        return ensure_utc(value)
