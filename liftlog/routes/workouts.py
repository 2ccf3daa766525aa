# liftlog/routes/workouts.py
"""
LiftLog API - Workout Routes (MongoDB).

Workout logging plus the range, progress and weekly aggregation endpoints.
"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from liftlog.dependencies import get_current_user_id, get_stats_service, get_workout_store
from liftlog.models.workout import Workout
from liftlog.schemas.workout import (
    MessageResponse,
    ProgressReport,
    WeeklyViewResponse,
    WorkoutCreate,
    WorkoutUpdate,
)
from liftlog.services.store import WorkoutStore
from liftlog.services.workout_stats import WorkoutStatsService
from liftlog.utils.dates import parse_datetime, resolve_timezone, week_bounds
from liftlog.utils.errors import NotFoundError
from settings import settings

router = APIRouter()


@router.get("", response_model=List[Workout])
async def list_workouts(
    owner_id: uuid.UUID = Depends(get_current_user_id),
    stats: WorkoutStatsService = Depends(get_stats_service)
):
    """Most recent workouts, newest first (dashboard)."""
    return await stats.list_recent(owner_id)


@router.get("/range", response_model=List[Workout])
async def get_workouts_in_range(
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    owner_id: uuid.UUID = Depends(get_current_user_id),
    stats: WorkoutStatsService = Depends(get_stats_service)
):
    """
    Workouts between startDate and endDate, both inclusive, newest first.

    Bare dates cover the whole day. Without both bounds every workout of the
    user is returned.
    """
    start = parse_datetime(start_date, "startDate") if start_date else None
    end = parse_datetime(end_date, "endDate", end_of_day=True) if end_date else None
    return await stats.query_range(owner_id, start, end)


@router.get("/stats", response_model=ProgressReport)
async def get_workout_stats(
    exercise_name: Optional[str] = Query(None, alias="exerciseName"),
    days: int = Query(settings.STATS_DEFAULT_DAYS, ge=1, le=settings.STATS_MAX_DAYS),
    owner_id: uuid.UUID = Depends(get_current_user_id),
    stats: WorkoutStatsService = Depends(get_stats_service)
):
    """Per-exercise progress over the last ``days`` days, keyed by lowercased name."""
    return await stats.aggregate_progress(owner_id, days, exercise_name)


@router.get("/weekly", response_model=WeeklyViewResponse)
async def get_weekly_view(
    date: Optional[str] = Query(None, description="Any date within the requested week"),
    tz: Optional[str] = Query(None, description="IANA timezone for calendar days"),
    owner_id: uuid.UUID = Depends(get_current_user_id),
    stats: WorkoutStatsService = Depends(get_stats_service)
):
    """Monday-to-Sunday calendar with at most one workout per day."""
    zone = resolve_timezone(tz, settings.DEFAULT_TIMEZONE)
    anchor = parse_datetime(date, "date", tz=zone) if date else datetime.now(timezone.utc)
    week_start, week_end = week_bounds(anchor, zone)
    days = await stats.weekly_view(owner_id, anchor, zone)
    return WeeklyViewResponse(
        week_start=week_start,
        week_end=week_end,
        timezone=str(zone),
        days=days,
        total_workouts=sum(1 + slot.duplicates for slot in days if slot.workout),
    )


@router.get("/{workout_id}", response_model=Workout)
async def get_workout(
    workout_id: uuid.UUID,
    owner_id: uuid.UUID = Depends(get_current_user_id),
    store: WorkoutStore = Depends(get_workout_store)
):
    """Get a single workout."""
    workout = await store.get(owner_id, workout_id)
    if not workout:
        raise NotFoundError("Workout not found")
    return workout


@router.post("", response_model=Workout, status_code=status.HTTP_201_CREATED)
async def create_workout(
    request: WorkoutCreate,
    owner_id: uuid.UUID = Depends(get_current_user_id),
    store: WorkoutStore = Depends(get_workout_store)
):
    """Log a new workout; the date defaults to now."""
    return await store.create(owner_id, {
        "date": request.date or datetime.now(timezone.utc),
        "workout_type": request.workout_type,
        "notes": request.notes,
        "exercises": request.exercises,
    })


@router.put("/{workout_id}", response_model=Workout)
async def update_workout(
    workout_id: uuid.UUID,
    request: WorkoutUpdate,
    owner_id: uuid.UUID = Depends(get_current_user_id),
    store: WorkoutStore = Depends(get_workout_store)
):
    """Replace the supplied fields of a workout."""
    changes = {field: getattr(request, field) for field in request.model_fields_set}
    # null is "leave unchanged" for fields the document requires
    for field in ("date", "workout_type", "exercises"):
        if field in changes and changes[field] is None:
            del changes[field]

    workout = await store.update(owner_id, workout_id, changes)
    if not workout:
        raise NotFoundError("Workout not found")
    return workout


@router.delete("/{workout_id}", response_model=MessageResponse)
async def delete_workout(
    workout_id: uuid.UUID,
    owner_id: uuid.UUID = Depends(get_current_user_id),
    store: WorkoutStore = Depends(get_workout_store)
):
    """Delete a workout."""
    if not await store.delete(owner_id, workout_id):
        raise NotFoundError("Workout not found")
    return MessageResponse(message="Workout deleted")
