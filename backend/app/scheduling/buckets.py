"""Day buckets - expand a trip window into calendar days and group activities."""

from collections.abc import Sequence
from datetime import date, datetime, timedelta

from backend.app.models.trip import Activity, DayBucket

DATE_FORMAT = "%Y-%m-%d"


def expand_date_range(start: datetime | date, end: datetime | date) -> list[str]:
    """List every calendar day from start to end, inclusive.

    Time of day is ignored. An empty list is returned when start falls on a
    later day than end.

    Args:
        start: First instant (or date) of the range
        end: Last instant (or date) of the range

    Returns:
        Ordered YYYY-MM-DD strings, one per day
    """
    current = _calendar_day(start)
    last = _calendar_day(end)

    dates: list[str] = []
    while current <= last:
        dates.append(current.strftime(DATE_FORMAT))
        current += timedelta(days=1)

    return dates


def group_activities_by_date(
    buckets: Sequence[str], activities: Sequence[Activity]
) -> list[DayBucket]:
    """Partition activities into day buckets.

    Activities keep their input order inside each bucket (callers pass them
    sorted by occurs_at). Activities on days outside the buckets are dropped,
    and buckets without activities are kept with an empty list.

    Args:
        buckets: YYYY-MM-DD strings as produced by expand_date_range
        activities: Activities of one trip

    Returns:
        One DayBucket per input bucket, in the same order
    """
    return [
        DayBucket(
            date=bucket,
            activities=[
                activity
                for activity in activities
                if activity.occurs_at.strftime(DATE_FORMAT) == bucket
            ],
        )
        for bucket in buckets
    ]


def _calendar_day(value: datetime | date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value
