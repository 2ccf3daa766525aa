"""
LiftLog API - Models Package.

Beanie ODM documents and the domain models returned by the stores.
"""

from liftlog.models.mongodb import UserDocument, WorkoutDocument
from liftlog.models.user import UserAccount
from liftlog.models.workout import ExerciseEntry, SetEntry, WeightUnit, Workout

__all__ = [
    "UserDocument",
    "WorkoutDocument",
    "UserAccount",
    "ExerciseEntry",
    "SetEntry",
    "WeightUnit",
    "Workout",
]
