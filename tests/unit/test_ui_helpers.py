"""Test UI helper functions."""

from datetime import date, datetime, timezone

import httpx
import pytest

from ui.date_selection import DateSelection, select_date
from ui.helpers import (
    error_message,
    month_weeks,
    parse_guest_emails,
    selection_to_trip_window,
    validate_trip_details,
)


def _complete(start: date, end: date) -> DateSelection:
    return select_date(select_date(DateSelection(), start), end)


def test_validate_trip_details_missing_fields() -> None:
    """Test that a blank destination or open range asks for all details."""
    complete = _complete(date(2024, 3, 5), date(2024, 3, 8))
    partial = select_date(DateSelection(), date(2024, 3, 5))

    assert validate_trip_details("", complete) == "Fill in all the trip details"
    assert validate_trip_details("Lisbon", partial) == "Fill in all the trip details"
    assert validate_trip_details("Lisbon", DateSelection()) == "Fill in all the trip details"


def test_validate_trip_details_short_destination() -> None:
    """Test the minimum destination length."""
    complete = _complete(date(2024, 3, 5), date(2024, 3, 8))

    assert "at least 4 characters" in validate_trip_details("Rio", complete)
    assert validate_trip_details("Roma", complete) is None


def test_parse_guest_emails() -> None:
    """Test splitting on commas and newlines, dropping blanks and repeats."""
    raw = "a@example.com, b@example.com\n\n a@example.com ,c@example.com,"

    assert parse_guest_emails(raw) == ["a@example.com", "b@example.com", "c@example.com"]
    assert parse_guest_emails("   ") == []


def test_selection_to_trip_window_future_days() -> None:
    """Test that a future range spans start midnight to end 23:59:59 UTC."""
    now = datetime(2024, 3, 1, 10, 30, tzinfo=timezone.utc)
    selection = _complete(date(2024, 3, 5), date(2024, 3, 8))

    starts_at, ends_at = selection_to_trip_window(selection, now=now)

    assert starts_at == datetime(2024, 3, 5, 0, 0, tzinfo=timezone.utc)
    assert ends_at == datetime(2024, 3, 8, 23, 59, 59, tzinfo=timezone.utc)


def test_selection_to_trip_window_starting_today() -> None:
    """Test that a trip starting today starts now, so it is not in the past."""
    now = datetime(2024, 3, 5, 10, 30, tzinfo=timezone.utc)
    selection = _complete(date(2024, 3, 5), date(2024, 3, 5))

    starts_at, ends_at = selection_to_trip_window(selection, now=now)

    assert starts_at == now
    assert ends_at == datetime(2024, 3, 5, 23, 59, 59, tzinfo=timezone.utc)


def test_selection_to_trip_window_incomplete() -> None:
    """Test that an open range is rejected."""
    with pytest.raises(ValueError):
        selection_to_trip_window(select_date(DateSelection(), date(2024, 3, 5)))


def test_month_weeks() -> None:
    """Test the month grid for March 2024 (starts on a Friday)."""
    weeks = month_weeks(2024, 3)

    assert all(len(week) == 7 for week in weeks)
    assert weeks[0][:5] == [None] * 5
    assert weeks[0][5] == date(2024, 3, 1)

    days = [day for week in weeks for day in week if day is not None]
    assert len(days) == 31
    assert days[-1] == date(2024, 3, 31)


def test_error_message_from_api_body() -> None:
    """Test that the API's message is shown to the user."""
    request = httpx.Request("POST", "http://localhost:3333/trips")
    response = httpx.Response(
        400,
        json={"message": "Invalid trip start date", "code": "INVALID_START_DATE"},
        request=request,
    )
    error = httpx.HTTPStatusError("bad request", request=request, response=response)

    assert error_message(error) == "Invalid trip start date"


def test_error_message_without_json() -> None:
    """Test the fallback when the body is not JSON."""
    request = httpx.Request("POST", "http://localhost:3333/trips")
    response = httpx.Response(502, text="Bad Gateway", request=request)
    error = httpx.HTTPStatusError("bad gateway", request=request, response=response)

    assert error_message(error) == "Request failed (502)"
