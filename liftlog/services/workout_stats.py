"""
LiftLog API - Workout statistics service.

Date-range queries, per-exercise progress aggregation and the Monday-start
weekly calendar. Nothing here keeps state between calls: every result is a
function of the arguments and of what the store returns.
"""

import logging
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Dict, Iterable, List, Optional
from uuid import UUID

from liftlog.models.workout import ExerciseEntry, Workout
from liftlog.schemas.workout import DaySlot, ProgressObservation, ProgressReport
from liftlog.services.store import DateRange, SortOrder, WorkoutQuery, WorkoutStore
from liftlog.utils.dates import local_day, week_bounds
from liftlog.utils.errors import ValidationError

logger = logging.getLogger(__name__)

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def observe(workout: Workout, exercise: ExerciseEntry) -> ProgressObservation:
    """Summarise one exercise entry of ``workout``."""
    return ProgressObservation(
        date=workout.date,
        unit=exercise.unit,
        weight=max((s.weight for s in exercise.sets), default=0.0),
        reps=sum(s.reps for s in exercise.sets),
        sets=list(exercise.sets),
    )


def summarize_progress(workouts: Iterable[Workout]) -> ProgressReport:
    """
    Group every exercise entry of ``workouts`` by lowercased name.

    Buckets appear in first-seen order and observations keep the order of
    ``workouts``.
    """
    buckets: Dict[str, List[ProgressObservation]] = {}
    for workout in workouts:
        for exercise in workout.exercises:
            buckets.setdefault(exercise.name.lower(), []).append(observe(workout, exercise))
    return buckets


def bucketize(
    anchor: datetime,
    workouts: Iterable[Workout],
    tz: tzinfo = timezone.utc
) -> List[DaySlot]:
    """
    Place workouts into the seven days of the week containing ``anchor``.

    A workout belongs to a day when its date falls on that calendar day in
    ``tz``. Each slot holds at most one workout: on a collision the first
    workout in input order is kept and the slot counts the rest as
    ``duplicates``.

    Returns:
        List[DaySlot]: Exactly seven slots, Monday first.
    """
    week_start, _ = week_bounds(anchor, tz)
    monday = local_day(week_start, tz)
    days = [monday + timedelta(days=offset) for offset in range(7)]

    placed: Dict = {day: [] for day in days}
    for workout in workouts:
        day = local_day(workout.date, tz)
        if day in placed:
            placed[day].append(workout)

    slots = []
    for day, name in zip(days, WEEKDAYS):
        matches = placed[day]
        if len(matches) > 1:
            logger.warning(
                f"{len(matches)} workouts logged on {day.isoformat()}, "
                f"showing {matches[0].id}"
            )
        slots.append(DaySlot(
            day=day,
            weekday=name,
            workout=matches[0] if matches else None,
            duplicates=max(len(matches) - 1, 0),
        ))
    return slots


class WorkoutStatsService:
    """
    Read-side aggregation over a workout store.

    Attributes:
        store: Workout store to query.
        list_limit: Cap applied to the unbounded recent-workouts listing.
    """

    def __init__(self, store: WorkoutStore, list_limit: int = 50):
        self.store = store
        self.list_limit = list_limit

    async def list_recent(self, owner_id: UUID) -> List[Workout]:
        """Most recent workouts of the owner, newest first."""
        return await self.store.find_by_owner(
            owner_id,
            WorkoutQuery(sort=SortOrder.DESCENDING, limit=self.list_limit)
        )

    async def query_range(
        self,
        owner_id: UUID,
        start: Optional[datetime],
        end: Optional[datetime],
        order: SortOrder = SortOrder.DESCENDING
    ) -> List[Workout]:
        """
        Workouts dated within ``[start, end]``, both ends inclusive.

        The range only applies when both bounds are given; otherwise every
        workout of the owner is returned newest first. No limit is applied.

        Args:
            owner_id: Owner to scope the query to.
            start: Inclusive lower bound (aware datetime).
            end: Inclusive upper bound (aware datetime).
            order: Date ordering of the result.

        Returns:
            List[Workout]: Matching workouts, possibly empty.
        """
        if start is None or end is None:
            if start is not None or end is not None:
                logger.debug("Incomplete date range ignored")
            query = WorkoutQuery(sort=SortOrder.DESCENDING)
        else:
            query = WorkoutQuery(date_range=DateRange(start=start, end=end), sort=order)
        return await self.store.find_by_owner(owner_id, query)

    async def aggregate_progress(
        self,
        owner_id: UUID,
        lookback_days: int,
        exercise_name: Optional[str] = None,
        now: Optional[datetime] = None
    ) -> ProgressReport:
        """
        Per-exercise progress over the trailing ``lookback_days`` days.

        Args:
            owner_id: Owner to scope the query to.
            lookback_days: Length of the window ending at ``now``.
            exercise_name: Optional case-insensitive name substring; only
                workouts containing a matching exercise are read.
            now: End of the window (defaults to the current time).

        Returns:
            ProgressReport: Lowercased exercise name -> chronological
            observations. Empty when nothing matches.

        Raises:
            ValidationError: If ``lookback_days`` is not positive.
        """
        if lookback_days < 1:
            raise ValidationError("days must be a positive integer")

        needle = exercise_name.strip() if exercise_name else None
        window_start = (now or datetime.now(timezone.utc)) - timedelta(days=lookback_days)
        query = WorkoutQuery(
            date_range=DateRange(start=window_start),
            name_substring=needle or None,
            sort=SortOrder.ASCENDING,
        )
        workouts = await self.store.find_by_owner(owner_id, query)
        report = summarize_progress(workouts)
        logger.debug(
            f"Progress for owner {owner_id}: {len(workouts)} workouts, "
            f"{len(report)} exercises"
        )
        return report

    async def weekly_view(
        self,
        owner_id: UUID,
        anchor: datetime,
        tz: tzinfo = timezone.utc
    ) -> List[DaySlot]:
        """Fetch the week containing ``anchor`` and bucket it by day."""
        start, end = week_bounds(anchor, tz)
        workouts = await self.query_range(owner_id, start, end, SortOrder.DESCENDING)
        return bucketize(anchor, workouts, tz)
