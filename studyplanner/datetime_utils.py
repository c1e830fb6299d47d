from datetime import datetime, date, timezone

SECONDS_PER_DAY = 24 * 60 * 60


def utcnow() -> datetime:
    """Get current naive UTC datetime, matching the stored timestamps"""
    return datetime.utcnow()


def as_datetime(value):
    """
    Treat a calendar date as midnight of that day.

    Naive datetimes pass through as UTC; aware datetimes are converted to UTC
    and made naive so they compare with stored timestamps.
    """
    if value is None:
        return None

    if isinstance(value, str):
        value = datetime.fromisoformat(value)

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    return datetime(value.year, value.month, value.day)


def reference_now(now=None) -> datetime:
    """Naive UTC reference instant; current time when now is not given"""
    return as_datetime(now) if now else utcnow()


def days_between(start, end) -> float:
    """Fractional number of days from start to end (negative if end is earlier)"""
    delta = as_datetime(end) - as_datetime(start)
    return delta.total_seconds() / SECONDS_PER_DAY


def days_until(target, now=None) -> float:
    """Fractional days from now until target"""
    return days_between(reference_now(now), target)


def days_since(origin, now=None) -> float:
    """Fractional days elapsed from origin until now"""
    return days_between(origin, reference_now(now))


def today(now=None) -> date:
    """Calendar date of the reference instant"""
    return reference_now(now).date()
