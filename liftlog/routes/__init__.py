"""LiftLog API - Routes Package."""

from liftlog.routes import (
    auth,
    workouts,
)

__all__ = [
    "auth",
    "workouts",
]
