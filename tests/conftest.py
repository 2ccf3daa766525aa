import os
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest

os.environ.setdefault("DATABASE_URL", "mongodb://localhost:27017")
os.environ.setdefault("DATABASE_NAME", "liftlog_test")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_LAZY_CONNECT", "false")
os.environ.setdefault("ENV", "test")
os.environ.setdefault("DEBUG", "false")

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from fastapi.testclient import TestClient

from liftlog.dependencies import get_current_user_id, get_user_store, get_workout_store
from liftlog.models.user import UserAccount
from liftlog.models.workout import ExerciseEntry, SetEntry, Workout
from liftlog.services.store import SortOrder, UserStore, WorkoutQuery, WorkoutStore
from liftlog.utils.errors import ConflictError, StorageError


class InMemoryWorkoutStore(WorkoutStore):
    """Workout store keeping documents in insertion order."""

    def __init__(self) -> None:
        self.workouts: List[Workout] = []
        self.queries: List[WorkoutQuery] = []

    def _matches(self, workout: Workout, owner_id: uuid.UUID, query: WorkoutQuery) -> bool:
        if workout.owner_id != owner_id:
            return False
        if query.date_range is not None:
            if query.date_range.start is not None and workout.date < query.date_range.start:
                return False
            if query.date_range.end is not None and workout.date > query.date_range.end:
                return False
        if query.name_substring:
            needle = query.name_substring.lower()
            if not any(needle in e.name.lower() for e in workout.exercises):
                return False
        return True

    async def find_by_owner(self, owner_id, query):
        self.queries.append(query)
        found = [w for w in self.workouts if self._matches(w, owner_id, query)]
        found.sort(key=lambda w: w.date, reverse=query.sort is SortOrder.DESCENDING)
        if query.limit:
            found = found[:query.limit]
        return found

    async def get(self, owner_id, workout_id):
        for workout in self.workouts:
            if workout.id == workout_id and workout.owner_id == owner_id:
                return workout
        return None

    async def create(self, owner_id, fields: Dict[str, Any]):
        now = datetime.now(timezone.utc)
        workout = Workout(
            id=uuid.uuid4(),
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
            **fields,
        )
        self.workouts.append(workout)
        return workout

    async def update(self, owner_id, workout_id, changes):
        for index, workout in enumerate(self.workouts):
            if workout.id == workout_id and workout.owner_id == owner_id:
                updated = workout.model_copy(
                    update={**changes, "updated_at": datetime.now(timezone.utc)}
                )
                self.workouts[index] = updated
                return updated
        return None

    async def delete(self, owner_id, workout_id):
        before = len(self.workouts)
        self.workouts = [
            w for w in self.workouts
            if not (w.id == workout_id and w.owner_id == owner_id)
        ]
        return len(self.workouts) < before


class FailingWorkoutStore(InMemoryWorkoutStore):
    """Store whose reads fail the way the Beanie store reports driver errors."""

    async def find_by_owner(self, owner_id, query):
        raise StorageError(detail="connection refused: mongo-0:27017")

    async def get(self, owner_id, workout_id):
        raise StorageError(detail="connection refused: mongo-0:27017")


class InMemoryUserStore(UserStore):
    def __init__(self) -> None:
        self.users: Dict[uuid.UUID, UserAccount] = {}

    async def get(self, user_id):
        return self.users.get(user_id)

    async def get_by_email(self, email):
        for user in self.users.values():
            if user.email == email.lower():
                return user
        return None

    async def create(self, email, name, password_hash):
        if await self.get_by_email(email):
            raise ConflictError("Email already registered")
        user = UserAccount(
            id=uuid.uuid4(),
            email=email.lower(),
            name=name,
            password_hash=password_hash,
            created_at=datetime.now(timezone.utc),
        )
        self.users[user.id] = user
        return user

    async def record_login(self, user_id):
        user = self.users.get(user_id)
        if user:
            self.users[user_id] = user.model_copy(
                update={"last_login_at": datetime.now(timezone.utc)}
            )


def make_workout(
    owner_id: uuid.UUID,
    when: datetime,
    exercises: Optional[List[ExerciseEntry]] = None,
    workout_type: str = "General",
) -> Workout:
    return Workout(
        id=uuid.uuid4(),
        owner_id=owner_id,
        date=when,
        workout_type=workout_type,
        exercises=exercises or [],
    )


def bench(*sets) -> ExerciseEntry:
    return ExerciseEntry(
        name="Bench Press",
        sets=[SetEntry(weight=w, reps=r) for w, r in sets],
    )


@pytest.fixture
def owner_id() -> uuid.UUID:
    return uuid.UUID("6f1c2a3e-0000-4000-8000-000000000001")


@pytest.fixture
def store() -> InMemoryWorkoutStore:
    return InMemoryWorkoutStore()


@pytest.fixture
def seeded_store(store, owner_id) -> InMemoryWorkoutStore:
    """Two bench sessions a week apart, plus another user's workout."""
    store.workouts.append(make_workout(
        owner_id,
        datetime(2024, 1, 1, 18, 0, tzinfo=timezone.utc),
        [bench((60, 8), (60, 8), (65, 6))],
    ))
    store.workouts.append(make_workout(
        owner_id,
        datetime(2024, 1, 8, 18, 0, tzinfo=timezone.utc),
        [bench((70, 6), (70, 5))],
    ))
    store.workouts.append(make_workout(
        uuid.uuid4(),
        datetime(2024, 1, 8, 9, 0, tzinfo=timezone.utc),
        [bench((100, 1))],
    ))
    return store


@pytest.fixture
def api():
    from main import app

    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(api, store, owner_id) -> TestClient:
    """Client authenticated as ``owner_id`` against the in-memory store."""
    api.dependency_overrides[get_workout_store] = lambda: store
    api.dependency_overrides[get_current_user_id] = lambda: owner_id
    return TestClient(api)


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def auth_client(api, store, user_store) -> TestClient:
    """Client going through real JWT authentication."""
    api.dependency_overrides[get_workout_store] = lambda: store
    api.dependency_overrides[get_user_store] = lambda: user_store
    return TestClient(api)
