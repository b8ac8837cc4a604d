"""Trip and activity window checks.

Both validators fail fast on the first violated rule and return None
when every rule holds. Comparisons are by instant, not by calendar day.
"""

from datetime import datetime

from backend.app.errors import (
    ActivityAfterTripEnd,
    ActivityBeforeTripStart,
    ActivityTimeConflict,
    InvalidEndDate,
    InvalidStartDate,
)
from backend.app.models.trip import Trip


def validate_trip_window(starts_at: datetime, ends_at: datetime, reference_now: datetime) -> None:
    """Check a trip window before it is created or replaced.

    Args:
        starts_at: Trip start instant
        ends_at: Trip end instant
        reference_now: Instant the start date must not precede

    Raises:
        InvalidStartDate: starts_at is before reference_now
        InvalidEndDate: ends_at is before starts_at
    """
    if starts_at < reference_now:
        raise InvalidStartDate()

    if ends_at < starts_at:
        raise InvalidEndDate()


def validate_activity_window(occurs_at: datetime, trip: Trip, *, time_taken: bool) -> None:
    """Check that an activity fits its trip window.

    Args:
        occurs_at: Activity instant
        trip: Owning trip
        time_taken: Whether any activity already exists at exactly occurs_at.
            The lookup is global across trips, not scoped to this one.

    Raises:
        ActivityBeforeTripStart: occurs_at is before trip.starts_at
        ActivityAfterTripEnd: occurs_at is after trip.ends_at
        ActivityTimeConflict: time_taken is set
    """
    if occurs_at < trip.starts_at:
        raise ActivityBeforeTripStart()

    if occurs_at > trip.ends_at:
        raise ActivityAfterTripEnd()

    if time_taken:
        raise ActivityTimeConflict()
