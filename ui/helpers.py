"""Helper functions for UI - trip form validation and API client."""

import calendar
from datetime import date, datetime, time, timezone
from typing import Any

import httpx

from ui.date_selection import DateSelection

MIN_DESTINATION_LENGTH = 4


def validate_trip_details(destination: str, selection: DateSelection) -> str | None:
    """Check the first form step before moving on to guests.

    Args:
        destination: Destination typed by the user
        selection: Current date selection

    Returns:
        Error message to show, or None if the step is complete
    """
    if not destination.strip() or selection.starts_at is None or selection.ends_at is None:
        return "Fill in all the trip details"

    if len(destination) < MIN_DESTINATION_LENGTH:
        return f"The destination must have at least {MIN_DESTINATION_LENGTH} characters"

    return None


def parse_guest_emails(raw: str) -> list[str]:
    """Split a comma/newline separated list of e-mails, dropping blanks and repeats."""
    emails: list[str] = []
    for chunk in raw.replace("\n", ",").split(","):
        email = chunk.strip()
        if email and email not in emails:
            emails.append(email)
    return emails


def selection_to_trip_window(
    selection: DateSelection, now: datetime | None = None
) -> tuple[datetime, datetime]:
    """Turn selected days into the instants sent to the API.

    The trip starts at the beginning of the first day (or now, when the first
    day is today) and ends at the last second of the last day, in UTC.

    Raises:
        ValueError: If the selection is not complete
    """
    if selection.starts_at is None or selection.ends_at is None:
        raise ValueError("selection must have both start and end dates")

    if now is None:
        now = datetime.now(timezone.utc)

    starts_at = datetime.combine(selection.starts_at, time.min, tzinfo=timezone.utc)
    ends_at = datetime.combine(selection.ends_at, time(23, 59, 59), tzinfo=timezone.utc)

    return max(starts_at, now), ends_at


def month_weeks(year: int, month: int) -> list[list[date | None]]:
    """Calendar grid for a month, weeks starting on Sunday, None outside the month."""
    cal = calendar.Calendar(firstweekday=calendar.SUNDAY)
    return [
        [day if day.month == month else None for day in week]
        for week in cal.monthdatescalendar(year, month)
    ]


def call_create_trip(
    backend_url: str,
    destination: str,
    selection: DateSelection,
    owner_name: str,
    owner_email: str,
    emails_to_invite: list[str],
) -> dict[str, Any]:
    """Call POST /trips.

    Args:
        backend_url: Backend base URL (e.g. http://localhost:3333)
        destination: Destination
        selection: Complete date selection
        owner_name: Trip owner's name
        owner_email: Trip owner's e-mail
        emails_to_invite: Guest e-mails

    Returns:
        CreateTripResponse dict

    Raises:
        httpx.HTTPStatusError: If request fails
    """
    starts_at, ends_at = selection_to_trip_window(selection)

    response = httpx.post(
        f"{backend_url}/trips",
        json={
            "destination": destination,
            "starts_at": starts_at.isoformat(),
            "ends_at": ends_at.isoformat(),
            "owner_name": owner_name,
            "owner_email": owner_email,
            "emails_to_invite": emails_to_invite,
        },
        timeout=10.0,
    )
    response.raise_for_status()
    result: dict[str, Any] = response.json()
    return result


def error_message(error: httpx.HTTPStatusError) -> str:
    """Extract the API's message from a failed response."""
    try:
        body = error.response.json()
    except ValueError:
        return f"Request failed ({error.response.status_code})"

    if isinstance(body, dict) and "message" in body:
        return str(body["message"])

    return f"Request failed ({error.response.status_code})"
