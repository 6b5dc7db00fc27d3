# Standard library imports
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

# Local application imports
from civicdesk.settings import settings


def utc_now() -> datetime:
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes (as returned by SQLite) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def start_of_local_day(now: datetime | None = None, tz_name: str | None = None) -> datetime:
    """Local midnight of the day containing ``now``, expressed in UTC."""
    tz = ZoneInfo(tz_name or settings.LOCAL_TIMEZONE)
    local_now = as_utc(now or utc_now()).astimezone(tz)
    local_midnight = local_now.replace(hour=0, minute=0, second=0, microsecond=0)
    return local_midnight.astimezone(UTC)


def hours_between(start: datetime, end: datetime) -> float:
    return (as_utc(end) - as_utc(start)).total_seconds() / 3600
