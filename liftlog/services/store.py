"""
LiftLog API - Record stores.

The workout and user stores are the only code that talks to MongoDB. Routes
and aggregation services depend on the abstract interfaces so they can be
exercised against other implementations.
"""

import logging
import re
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, model_validator
from pymongo.errors import DuplicateKeyError, PyMongoError

from liftlog.models.mongodb import UserDocument, WorkoutDocument
from liftlog.models.user import UserAccount
from liftlog.models.workout import Workout
from liftlog.utils.errors import ConflictError, StorageError

logger = logging.getLogger(__name__)


class SortOrder(str, Enum):
    """Direction workouts are ordered by date."""

    ASCENDING = "asc"
    DESCENDING = "desc"


class DateRange(BaseModel):
    """Inclusive date bounds; either side may be open but not both."""

    model_config = ConfigDict(frozen=True)

    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @model_validator(mode="after")
    def _check_bounds(self) -> "DateRange":
        if self.start is None and self.end is None:
            raise ValueError("a date range needs at least one bound")
        return self


class WorkoutQuery(BaseModel):
    """
    Options recognised by ``WorkoutStore.find_by_owner``.

    Attributes:
        date_range: Inclusive bound filter on the workout date.
        name_substring: Case-insensitive literal substring matched against
            the names of the workout's exercises.
        sort: Date ordering of the result.
        limit: Maximum number of workouts returned.
    """

    model_config = ConfigDict(frozen=True)

    date_range: Optional[DateRange] = None
    name_substring: Optional[str] = None
    sort: SortOrder = SortOrder.DESCENDING
    limit: Optional[int] = None

    def to_filter(self, owner_id: UUID) -> Dict[str, Any]:
        """Build the MongoDB filter; options that are not set are left out."""
        criteria: Dict[str, Any] = {"user_id": owner_id}
        if self.date_range is not None:
            bounds: Dict[str, datetime] = {}
            if self.date_range.start is not None:
                bounds["$gte"] = self.date_range.start
            if self.date_range.end is not None:
                bounds["$lte"] = self.date_range.end
            criteria["date"] = bounds
        if self.name_substring:
            criteria["exercises.name"] = {
                "$regex": re.escape(self.name_substring),
                "$options": "i",
            }
        return criteria


class WorkoutStore(ABC):
    """Persistence contract for workouts; every call is scoped to an owner."""

    @abstractmethod
    async def find_by_owner(self, owner_id: UUID, query: WorkoutQuery) -> List[Workout]:
        """Workouts of ``owner_id`` matching ``query``, in the requested order."""

    @abstractmethod
    async def get(self, owner_id: UUID, workout_id: UUID) -> Optional[Workout]:
        """A single workout, or None if the owner has no such workout."""

    @abstractmethod
    async def create(self, owner_id: UUID, fields: Dict[str, Any]) -> Workout:
        """Insert a workout built from ``fields``."""

    @abstractmethod
    async def update(
        self, owner_id: UUID, workout_id: UUID, changes: Dict[str, Any]
    ) -> Optional[Workout]:
        """Replace the supplied fields; None if the workout does not exist."""

    @abstractmethod
    async def delete(self, owner_id: UUID, workout_id: UUID) -> bool:
        """Delete a workout; False if it did not exist."""


class UserStore(ABC):
    """Persistence contract for user accounts."""

    @abstractmethod
    async def get(self, user_id: UUID) -> Optional[UserAccount]:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[UserAccount]:
        ...

    @abstractmethod
    async def create(self, email: str, name: str, password_hash: str) -> UserAccount:
        """Create an account; raises ConflictError if the email is taken."""

    @abstractmethod
    async def record_login(self, user_id: UUID) -> None:
        ...


def to_workout(document: WorkoutDocument) -> Workout:
    """Convert a stored document into the domain model."""
    return Workout(
        id=document.uid,
        owner_id=document.user_id,
        date=document.date,
        workout_type=document.workout_type,
        notes=document.notes,
        exercises=document.exercises,
        created_at=document.created_at,
        updated_at=document.updated_at,
    )


def to_account(document: UserDocument) -> UserAccount:
    return UserAccount(
        id=document.uid,
        email=document.email,
        name=document.name,
        password_hash=document.password_hash,
        created_at=document.created_at,
        last_login_at=document.last_login_at,
    )


class BeanieWorkoutStore(WorkoutStore):
    """Workout store backed by the ``workouts`` collection."""

    async def _find_document(self, owner_id: UUID, workout_id: UUID) -> Optional[WorkoutDocument]:
        return await WorkoutDocument.find_one(
            {"uid": workout_id, "user_id": owner_id}
        )

    async def find_by_owner(self, owner_id: UUID, query: WorkoutQuery) -> List[Workout]:
        direction = "+date" if query.sort is SortOrder.ASCENDING else "-date"
        try:
            # _id breaks ties between equal dates in insertion order
            cursor = WorkoutDocument.find(query.to_filter(owner_id)).sort(direction, "+_id")
            if query.limit:
                cursor = cursor.limit(query.limit)
            documents = await cursor.to_list()
        except PyMongoError as e:
            logger.error(f"Workout query failed for owner {owner_id}: {e}")
            raise StorageError(detail=str(e))

        logger.debug(f"Workout query for owner {owner_id} matched {len(documents)} documents")
        return [to_workout(doc) for doc in documents]

    async def get(self, owner_id: UUID, workout_id: UUID) -> Optional[Workout]:
        try:
            document = await self._find_document(owner_id, workout_id)
        except PyMongoError as e:
            logger.error(f"Workout lookup failed: {e}")
            raise StorageError(detail=str(e))
        return to_workout(document) if document else None

    async def create(self, owner_id: UUID, fields: Dict[str, Any]) -> Workout:
        document = WorkoutDocument(uid=uuid4(), user_id=owner_id, **fields)
        try:
            await document.insert()
        except PyMongoError as e:
            logger.error(f"Failed to insert workout: {e}")
            raise StorageError(detail=str(e))
        logger.info(f"Workout {document.uid} created for owner {owner_id}")
        return to_workout(document)

    async def update(
        self, owner_id: UUID, workout_id: UUID, changes: Dict[str, Any]
    ) -> Optional[Workout]:
        try:
            document = await self._find_document(owner_id, workout_id)
            if not document:
                return None
            for field, value in changes.items():
                setattr(document, field, value)
            document.updated_at = datetime.now(timezone.utc)
            await document.save()
        except PyMongoError as e:
            logger.error(f"Failed to update workout {workout_id}: {e}")
            raise StorageError(detail=str(e))
        return to_workout(document)

    async def delete(self, owner_id: UUID, workout_id: UUID) -> bool:
        try:
            document = await self._find_document(owner_id, workout_id)
            if not document:
                return False
            await document.delete()
        except PyMongoError as e:
            logger.error(f"Failed to delete workout {workout_id}: {e}")
            raise StorageError(detail=str(e))
        logger.info(f"Workout {workout_id} deleted for owner {owner_id}")
        return True


class BeanieUserStore(UserStore):
    """User store backed by the ``users`` collection."""

    async def get(self, user_id: UUID) -> Optional[UserAccount]:
        try:
            document = await UserDocument.find_one(UserDocument.uid == user_id)
        except PyMongoError as e:
            logger.error(f"User lookup failed: {e}")
            raise StorageError(detail=str(e))
        return to_account(document) if document else None

    async def get_by_email(self, email: str) -> Optional[UserAccount]:
        try:
            document = await UserDocument.find_one(UserDocument.email == email.lower())
        except PyMongoError as e:
            logger.error(f"User lookup failed: {e}")
            raise StorageError(detail=str(e))
        return to_account(document) if document else None

    async def create(self, email: str, name: str, password_hash: str) -> UserAccount:
        document = UserDocument(
            uid=uuid4(),
            email=email.lower(),
            name=name,
            password_hash=password_hash,
        )
        try:
            await document.insert()
        except DuplicateKeyError:
            raise ConflictError("Email already registered")
        except PyMongoError as e:
            logger.error(f"Failed to create user: {e}")
            raise StorageError(detail=str(e))
        return to_account(document)

    async def record_login(self, user_id: UUID) -> None:
        try:
            document = await UserDocument.find_one(UserDocument.uid == user_id)
            if document:
                document.last_login_at = datetime.now(timezone.utc)
                await document.save()
        except PyMongoError as e:
            logger.error(f"Failed to record login for {user_id}: {e}")
            raise StorageError(detail=str(e))
