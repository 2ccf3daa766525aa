"""LiftLog API - Utilities Package."""

from liftlog.utils.dates import (
    ensure_utc,
    parse_datetime,
    resolve_timezone,
    week_bounds,
)
from liftlog.utils.errors import (
    LiftLogException,
    AuthenticationError,
    ConflictError,
    NotFoundError,
    StorageError,
    ValidationError,
)

__all__ = [
    "ensure_utc",
    "parse_datetime",
    "resolve_timezone",
    "week_bounds",
    "LiftLogException",
    "AuthenticationError",
    "ConflictError",
    "NotFoundError",
    "StorageError",
    "ValidationError",
]
