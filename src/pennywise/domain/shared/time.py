"""Time utilities for the domain layer.

All persisted timestamps are UTC. Month boundaries are computed in UTC.
"""

from datetime import date, datetime, time, timedelta, timezone


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def today_utc() -> date:
    """Return current date in UTC."""
    return datetime.now(tz=timezone.utc).date()


def ensure_tz_aware(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (UTC if naive)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def to_utc(dt: datetime) -> datetime:
    """Normalize any datetime to an aware UTC datetime."""
    return ensure_tz_aware(dt).astimezone(timezone.utc)


def start_of_day_utc(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def first_day_of_month(day: date) -> date:
    return date(day.year, day.month, 1)


def next_month(day: date) -> date:
    if day.month == 12:
        return date(day.year + 1, 1, 1)
    return date(day.year, day.month + 1, 1)


def last_day_of_month(day: date) -> date:
    if day.month == 12:
        return date(day.year, 12, 31)
    return next_month(day) - timedelta(days=1)


def end_of_day_utc_exclusive(day: date) -> datetime | None:
    """Start of the day after ``day`` in UTC.

    ``None`` for ``date.max``: nothing after it is representable, so a
    window ending there has no upper bound.
    """
    if day == date.max:
        return None
    return start_of_day_utc(day + timedelta(days=1))


def months_before(day: date, months: int) -> date:
    """Return the same day-of-month ``months`` earlier, clamped to month end."""
    total = day.year * 12 + (day.month - 1) - months
    year, month = divmod(total, 12)
    target = date(year, month + 1, 1)
    return target.replace(day=min(day.day, last_day_of_month(target).day))


def month_key(dt: datetime | date) -> str:
    """Return the ``YYYY-MM`` key of a timestamp, truncated in UTC."""
    if isinstance(dt, datetime):
        dt = to_utc(dt)
    return f"{dt.year:04d}-{dt.month:02d}"


def parse_month_key(key: str) -> date:
    """Parse a ``YYYY-MM`` key back into the first day of that month."""
    year_str, month_str = key.split("-", 1)
    return date(int(year_str), int(month_str), 1)
