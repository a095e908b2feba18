from datetime import datetime, time, timedelta, timezone


def day_range(now: datetime):
    """
    Returns (start, end) for the calendar day containing `now`:
    start is midnight, end is the following midnight (exclusive).
    The tzinfo of `now` is preserved.
    """
    start = datetime.combine(now.date(), time.min, tzinfo=now.tzinfo)
    return (start, start + timedelta(days=1))


def week_range(now: datetime):
    """
    Returns (start, end) for the week containing `now`, Monday 00:00
    to the next Monday 00:00 (exclusive).
    """
    # monday = 0, sunday = 6
    monday = now.date() - timedelta(days=now.weekday())
    start = datetime.combine(monday, time.min, tzinfo=now.tzinfo)
    return (start, start + timedelta(days=7))


def as_utc(value):
    """
    Normalizes Firestore timestamps and datetimes for comparison.
    Naive datetimes are taken to be UTC. Returns None for anything else.
    """
    if value is None:
        return None
    # Firestore Timestamp-like objects expose .datetime in some SDK versions
    dt = getattr(value, "datetime", value)
    if not isinstance(dt, datetime):
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
