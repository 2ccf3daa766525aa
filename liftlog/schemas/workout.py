"""
LiftLog API - Workout Schemas.

Pydantic schemas for workout logging, progress statistics and the weekly view.
"""

from datetime import date, datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from liftlog.models.workout import ExerciseEntry, SetEntry, WeightUnit, Workout
from liftlog.utils.dates import ensure_utc


class WorkoutCreate(BaseModel):
    """
    Schema for logging a new workout.

    Attributes:
        exercises: Exercises performed, in order.
        notes: Free-text notes.
        workout_type: Free-text category (defaults to "General").
        date: When the workout took place (defaults to now).
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "date": "2024-01-08T18:30:00Z",
                "workout_type": "Push",
                "notes": "Felt strong",
                "exercises": [
                    {
                        "name": "Bench Press",
                        "unit": "kg",
                        "sets": [
                            {"weight": 70, "reps": 6},
                            {"weight": 70, "reps": 5}
                        ]
                    }
                ]
            }
        }
    )

    exercises: List[ExerciseEntry] = Field(default_factory=list)
    notes: Optional[str] = None
    workout_type: str = Field(default="General", description="Workout category")
    date: Optional[datetime] = Field(None, description="Workout date (defaults to now)")

    @field_validator("date")
    @classmethod
    def _date_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value) if value is not None else None


class WorkoutUpdate(BaseModel):
    """
    Schema for editing a workout.

    Every supplied field replaces the stored value wholesale; fields that are
    left out are kept. A null ``date`` is ignored.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    exercises: Optional[List[ExerciseEntry]] = None
    notes: Optional[str] = None
    workout_type: Optional[str] = None
    date: Optional[datetime] = None

    @field_validator("date")
    @classmethod
    def _date_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value) if value is not None else None


class ProgressObservation(BaseModel):
    """
    One exercise entry from one workout, as reported by progress statistics.

    Attributes:
        date: Date of the source workout.
        unit: Unit the weights were logged in.
        weight: Heaviest set weight.
        reps: Total repetitions across all sets.
        sets: The logged sets, in order.
    """

    date: datetime
    unit: WeightUnit
    weight: float
    reps: int
    sets: List[SetEntry]


ProgressReport = Dict[str, List[ProgressObservation]]


class DaySlot(BaseModel):
    """A calendar day of the weekly view holding at most one workout."""

    day: date
    weekday: str
    workout: Optional[Workout] = None
    duplicates: int = Field(
        default=0,
        description="Further workouts on the same day that were not placed"
    )


class WeeklyViewResponse(BaseModel):
    """Seven day slots, Monday through Sunday."""

    week_start: datetime
    week_end: datetime
    timezone: str
    days: List[DaySlot]
    total_workouts: int


class MessageResponse(BaseModel):
    message: str
