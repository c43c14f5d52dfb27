"""Timezone helpers.  Every timestamp the application writes is UTC-aware."""

import datetime


def utc_now() -> datetime.datetime:
    """Current time as an aware UTC datetime."""
    return datetime.datetime.now(datetime.timezone.utc)


def day_bounds(start: datetime.date, end: datetime.date) -> tuple[datetime.datetime, datetime.datetime]:
    """Aware UTC datetimes spanning ``start`` 00:00 through the end of ``end``."""
    return (
        datetime.datetime.combine(start, datetime.time.min, tzinfo=datetime.timezone.utc),
        datetime.datetime.combine(end, datetime.time.max, tzinfo=datetime.timezone.utc),
    )
