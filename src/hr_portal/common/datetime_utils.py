from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Iterator, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_time_of_day(value: Optional[str]) -> Optional[time]:
    """Parse HH:MM:SS into time; empty/None stays None."""
    if not value:
        return None
    return datetime.strptime(value, "%H:%M:%S").time()


def format_time_of_day(value: Optional[time]) -> Optional[str]:
    return value.strftime("%H:%M:%S") if value else None


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC.

    Accepts the trailing 'Z' written by older JavaScript clients.
    """
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_calendar_date(value: str, tz: Optional[tzinfo] = None) -> date:
    """Parse a calendar date from YYYY-MM-DD or a full ISO timestamp.

    Timestamps are converted to `tz` (local time when None) before the
    date is taken, so "2024-01-31T18:30:00Z" is Feb 1 in UTC+5:30.
    """
    if len(value) == 10:
        return parse_iso_date(value)
    return parse_timestamp(value).astimezone(tz).date()


def format_timestamp(value: datetime) -> str:
    return as_utc(value).isoformat()


def format_display_date(value: date) -> str:
    """Render a date as e.g. 'Jan 5, 2024'."""
    return f"{value:%b} {value.day}, {value.year}"


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every calendar date from start to end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def now_local() -> datetime:
    """Current local time.

    Wrapped so tests can patch it.
    """
    return datetime.now()


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
