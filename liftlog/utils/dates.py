"""
LiftLog API - Date helpers.

Parsing of client-supplied date strings and calendar-week arithmetic.
All datetimes leaving this module are timezone-aware.
"""

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from liftlog.utils.errors import ValidationError


def ensure_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime (naive values are taken as UTC)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_datetime(
    value: str,
    field: str,
    end_of_day: bool = False,
    tz: tzinfo = timezone.utc
) -> datetime:
    """
    Parse an ISO-8601 date or datetime string into an aware UTC datetime.

    A bare calendar date (``2024-01-08``) is promoted to a full timestamp:
    midnight for a start bound, the last microsecond of the day when
    ``end_of_day`` is set. Naive values are interpreted in ``tz``.

    Args:
        value: Raw string from the client.
        field: Parameter name, used in the error message.
        end_of_day: Promote bare dates to 23:59:59.999999 instead of 00:00.
        tz: Timezone for naive input.

    Returns:
        datetime: Timezone-aware UTC datetime.

    Raises:
        ValidationError: If the string is not a valid ISO-8601 date.
    """
    raw = (value or "").strip()
    if not raw:
        raise ValidationError(f"{field} must not be empty")

    # fromisoformat only understands a trailing "Z" on Python 3.11+
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"

    try:
        if len(raw) == 10:
            day = date.fromisoformat(raw)
            moment = datetime.combine(day, time.max if end_of_day else time.min)
        else:
            moment = datetime.fromisoformat(raw)
    except ValueError:
        raise ValidationError(
            f"{field} is not a valid ISO-8601 date",
            detail=f"{field}={value!r}"
        )

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=tz)
    return moment.astimezone(timezone.utc)


def resolve_timezone(name: Optional[str], default: str = "UTC") -> tzinfo:
    """Look up an IANA timezone by name, raising ValidationError if unknown."""
    key = name or default
    if key.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValidationError(f"Unknown timezone: {key}")


def week_bounds(anchor: datetime, tz: tzinfo = timezone.utc) -> Tuple[datetime, datetime]:
    """
    Monday 00:00 to Sunday 23:59:59.999999 of the week containing ``anchor``.

    The week is computed on the calendar of ``tz``. Both bounds are returned
    as aware UTC datetimes.
    """
    local = ensure_utc(anchor).astimezone(tz)
    monday = local.date() - timedelta(days=local.weekday())
    sunday = monday + timedelta(days=6)
    start = datetime.combine(monday, time.min, tzinfo=tz)
    end = datetime.combine(sunday, time.max, tzinfo=tz)
    return start.astimezone(timezone.utc), end.astimezone(timezone.utc)


def local_day(moment: datetime, tz: tzinfo = timezone.utc) -> date:
    """Calendar day of ``moment`` as seen in ``tz``."""
    return ensure_utc(moment).astimezone(tz).date()
