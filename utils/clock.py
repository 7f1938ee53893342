"""
Clock Helpers

Timestamps are stored as naive UTC datetimes. Services take an explicit
reference time where the result depends on "now"; this is the default.
"""

from datetime import date, datetime, timezone


def utcnow():
    """Current UTC time as a naive datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_datetime(value):
    """
    Promote a date to midnight of that day. Aware datetimes are converted
    to naive UTC; naive datetimes pass through.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")
