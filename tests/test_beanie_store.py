import uuid
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from liftlog.dependencies import get_workout_store
from liftlog.models.mongodb import WorkoutDocument
from liftlog.services.store import BeanieWorkoutStore, SortOrder, WorkoutQuery
from liftlog.utils.errors import StorageError

OWNER = uuid.UUID("6f1c2a3e-0000-4000-8000-000000000001")


class RecordingCursor:
    """Stands in for a Beanie find query; records how it was shaped."""

    def __init__(self, documents=(), error=None):
        self.documents = list(documents)
        self.error = error
        self.sort_keys = None
        self.limit_value = None

    def sort(self, *keys):
        self.sort_keys = keys
        return self

    def limit(self, value):
        self.limit_value = value
        return self

    async def to_list(self):
        if self.error:
            raise self.error
        return list(self.documents)


def stored(when: datetime) -> SimpleNamespace:
    return SimpleNamespace(
        uid=uuid.uuid4(),
        user_id=OWNER,
        date=when,
        workout_type="General",
        notes=None,
        exercises=[],
        created_at=when,
        updated_at=when,
    )


@pytest.fixture
def cursor(monkeypatch):
    cursor = RecordingCursor()
    filters = []

    def find(criteria):
        filters.append(criteria)
        return cursor

    monkeypatch.setattr(WorkoutDocument, "find", find)
    cursor.filters = filters
    return cursor


@pytest.mark.asyncio
async def test_find_sorts_by_date_then_insertion_order(cursor):
    same_time = datetime(2024, 1, 10, 7, 0, tzinfo=timezone.utc)
    cursor.documents = [stored(same_time), stored(same_time)]

    found = await BeanieWorkoutStore().find_by_owner(OWNER, WorkoutQuery())

    assert cursor.sort_keys == ("-date", "+_id")
    assert cursor.limit_value is None
    assert cursor.filters == [{"user_id": OWNER}]
    assert [w.id for w in found] == [d.uid for d in cursor.documents]


@pytest.mark.asyncio
async def test_find_ascending_with_limit(cursor):
    await BeanieWorkoutStore().find_by_owner(
        OWNER, WorkoutQuery(sort=SortOrder.ASCENDING, limit=50)
    )
    assert cursor.sort_keys == ("+date", "+_id")
    assert cursor.limit_value == 50


@pytest.mark.asyncio
async def test_driver_errors_become_storage_errors(cursor):
    cursor.error = ServerSelectionTimeoutError("mongo-0:27017: connection refused")

    with pytest.raises(StorageError) as excinfo:
        await BeanieWorkoutStore().find_by_owner(OWNER, WorkoutQuery())

    assert excinfo.value.message == "Server error"
    assert excinfo.value.status_code == 500
    assert "mongo-0" in excinfo.value.detail


def test_driver_errors_are_reported_generically(api, client, cursor):
    cursor.error = ServerSelectionTimeoutError("mongo-0:27017: connection refused")
    api.dependency_overrides[get_workout_store] = lambda: BeanieWorkoutStore()

    response = client.get("/api/workouts")

    assert response.status_code == 500
    assert response.json() == {"message": "Server error"}
    assert "mongo-0" not in response.text
