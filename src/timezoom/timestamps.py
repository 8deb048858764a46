"""Millisecond timestamp helpers. All timeline math runs on integer epoch milliseconds."""

from datetime import datetime, timedelta, timezone, tzinfo

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_ms(dt: datetime, tz: tzinfo = timezone.utc) -> int:
    """Convert datetime to epoch milliseconds. Naive datetimes are read as wall time in tz."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz)
    delta = dt - _EPOCH
    return (delta.days * 86400 + delta.seconds) * MS_PER_SECOND + delta.microseconds // 1000


def from_ms(ms: int, tz: tzinfo = timezone.utc) -> datetime:
    """Convert epoch milliseconds to an aware datetime in tz."""
    return (_EPOCH + timedelta(milliseconds=int(ms))).astimezone(tz)
