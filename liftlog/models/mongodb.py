# liftlog/models/mongodb.py
"""
LiftLog MongoDB Document Models.

Beanie ODM models for MongoDB.
"""

from beanie import Document, Indexed
from pydantic import Field
from pymongo import ASCENDING, DESCENDING, IndexModel
from datetime import datetime, timezone
from typing import Optional, List
from uuid import UUID, uuid4

from liftlog.models.workout import ExerciseEntry


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserDocument(Document):
    """User model for MongoDB."""

    uid: UUID = Field(default_factory=uuid4)
    email: Indexed(str, unique=True)  # Indexed and unique, stored lowercased
    password_hash: str
    name: str

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    last_login_at: Optional[datetime] = None

    class Settings:
        name = "users"  # Collection name in MongoDB
        indexes = [
            "uid",
        ]

    class Config:
        json_schema_extra = {
            "example": {
                "email": "jane@example.com",
                "name": "Jane Doe",
            }
        }


class WorkoutDocument(Document):
    """Logged workout model for MongoDB."""

    uid: UUID = Field(default_factory=uuid4)
    user_id: UUID
    date: datetime = Field(default_factory=utcnow)
    workout_type: str = "General"
    notes: Optional[str] = None
    exercises: List[ExerciseEntry] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    class Settings:
        name = "workouts"
        indexes = [
            IndexModel(
                [("user_id", ASCENDING), ("date", DESCENDING)],
                name="user_date",
            ),
        ]

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "date": "2024-01-08T18:30:00Z",
                "workout_type": "Push",
                "exercises": [
                    {
                        "name": "Bench Press",
                        "unit": "kg",
                        "sets": [{"weight": 70, "reps": 6}, {"weight": 70, "reps": 5}],
                    }
                ],
            }
        }
