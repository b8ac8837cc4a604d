"""Models package - re-exports for convenience."""

from backend.app.models.common import UtcDatetime, to_utc, utcnow
from backend.app.models.trip import Activity, DayBucket, Link, Participant, Trip

__all__ = [
    # Common
    "UtcDatetime",
    "to_utc",
    "utcnow",
    # Trip
    "Trip",
    "Participant",
    "Activity",
    "Link",
    "DayBucket",
]
