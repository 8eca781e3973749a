"""
Time helpers for the day-boundary decision.

The calendar day of a fortune is what decides whether it is still valid,
so everything that computes "today" goes through ``calendar_day``.
"""

from datetime import datetime, timezone, tzinfo
from typing import Callable, Optional, Union
from zoneinfo import ZoneInfo

Clock = Callable[[], datetime]
CalendarDay = Callable[[datetime], str]


def now_utc() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def resolve_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """
    Resolve an IANA time zone name.

    Args:
        name: Zone name such as "Europe/Berlin", or None for device-local

    Returns:
        tzinfo instance, or None meaning the local zone
    """
    if not name:
        return None
    return ZoneInfo(name)


def calendar_day(timestamp: Union[datetime, str], tz: Optional[tzinfo] = None) -> str:
    """
    Calendar day of ``timestamp`` in ``tz``.

    Args:
        timestamp: Aware datetime or ISO-8601 string. Naive values are
            taken as UTC.
        tz: Target zone; None converts to the device-local zone

    Returns:
        Day formatted as YYYY-MM-DD
    """
    if isinstance(timestamp, str):
        timestamp = parse_iso(timestamp)
    elif timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)

    return timestamp.astimezone(tz).date().isoformat()


def make_calendar_day(tz_name: Optional[str] = None) -> CalendarDay:
    """Build a ``calendar_day`` function pinned to one time zone."""
    tz = resolve_timezone(tz_name)

    def _calendar_day(timestamp: datetime) -> str:
        return calendar_day(timestamp, tz)

    return _calendar_day


def format_iso(timestamp: datetime) -> str:
    """Format an aware datetime as ISO-8601 with millisecond precision."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc).isoformat(timespec="milliseconds")


def parse_iso(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp, accepting a trailing "Z".

    Raises:
        ValueError: If ``value`` is not a valid timestamp
    """
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def epoch_millis(timestamp: datetime) -> int:
    """Milliseconds since the Unix epoch."""
    return int(timestamp.timestamp() * 1000)
