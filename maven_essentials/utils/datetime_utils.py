"""
DateTime Utilities
==================

Timezone-aware timestamps for values reported by the application.

Functions:
- now(): timezone-aware datetime in the given timezone
- to_iso(): datetime to ISO 8601 string ('Z' suffix for UTC)
"""
import zoneinfo
from datetime import datetime, timezone as dt_timezone, tzinfo


def get_timezone(tz_name: str = "UTC") -> tzinfo:
    """Resolve a timezone name; 'UTC' is handled without the tz database."""
    if tz_name.upper() == "UTC":
        return dt_timezone.utc
    return zoneinfo.ZoneInfo(tz_name)


def now(tz_name: str = "UTC") -> datetime:
    """Current datetime in the given timezone."""
    return datetime.now(get_timezone(tz_name))


def to_iso(dt: datetime) -> str:
    """
    Convert a datetime to ISO 8601 without microseconds.

    Naive datetimes are treated as UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=dt_timezone.utc)
    iso = dt.replace(microsecond=0).isoformat()
    return iso.replace("+00:00", "Z")
