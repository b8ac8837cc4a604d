"""Trip domain models - trips, participants, activities and links."""

import uuid
from datetime import datetime

from pydantic import BaseModel

from backend.app.models.common import UtcDatetime


class Trip(BaseModel):
    """A trip spanning the [starts_at, ends_at] window."""

    id: uuid.UUID
    destination: str
    starts_at: UtcDatetime
    ends_at: UtcDatetime
    is_confirmed: bool = False
    created_at: datetime | None = None


class Participant(BaseModel):
    """Someone invited to (or owning) a trip."""

    id: uuid.UUID
    trip_id: uuid.UUID
    name: str | None = None
    email: str
    is_owner: bool = False
    is_confirmed: bool = False


class Activity(BaseModel):
    """Something scheduled at an instant inside a trip window."""

    id: uuid.UUID
    trip_id: uuid.UUID
    title: str
    occurs_at: UtcDatetime


class Link(BaseModel):
    """Useful link attached to a trip (bookings, tickets, ...)."""

    id: uuid.UUID
    trip_id: uuid.UUID
    title: str
    url: str


class DayBucket(BaseModel):
    """One calendar day of a trip and the activities falling on it.

    Derived on every read, never persisted.
    """

    date: str  # YYYY-MM-DD
    activities: list[Activity]
