"""Repository protocol interfaces for data access.

Request handlers receive implementations through FastAPI dependencies
(see backend.app.api.deps) instead of reaching for a global client.
"""

import uuid
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from backend.app.models.trip import Activity, Link, Participant, Trip


@dataclass
class NewParticipant:
    """Participant data supplied when creating a trip."""

    email: str
    name: str | None = None
    is_owner: bool = False
    is_confirmed: bool = False


class TripRepository(Protocol):
    """Repository for trip operations."""

    async def create_trip(
        self,
        *,
        destination: str,
        starts_at: datetime,
        ends_at: datetime,
        participants: Sequence[NewParticipant],
    ) -> Trip:
        """Create a trip together with its initial participants.

        Args:
            destination: Where the trip goes
            starts_at: Trip start instant (UTC)
            ends_at: Trip end instant (UTC)
            participants: Owner and invitees, created in one go

        Returns:
            Created trip
        """
        ...

    async def get_trip(self, trip_id: uuid.UUID) -> Trip | None:
        """Get trip by ID.

        Args:
            trip_id: Trip ID

        Returns:
            Trip or None if not found
        """
        ...

    async def update_trip(
        self,
        trip_id: uuid.UUID,
        *,
        destination: str,
        starts_at: datetime,
        ends_at: datetime,
    ) -> Trip | None:
        """Replace destination and window of a trip.

        Args:
            trip_id: Trip ID
            destination: New destination
            starts_at: New start instant (UTC)
            ends_at: New end instant (UTC)

        Returns:
            Updated trip or None if not found
        """
        ...

    async def confirm_trip(self, trip_id: uuid.UUID) -> Trip | None:
        """Mark a trip as confirmed by its owner.

        Args:
            trip_id: Trip ID

        Returns:
            Confirmed trip or None if not found
        """
        ...


class ParticipantRepository(Protocol):
    """Repository for participant operations."""

    async def add_participant(self, trip_id: uuid.UUID, email: str) -> Participant:
        """Invite a new participant to a trip.

        Args:
            trip_id: Trip ID
            email: Invitee e-mail

        Returns:
            Created participant
        """
        ...

    async def get_participant(self, participant_id: uuid.UUID) -> Participant | None:
        """Get participant by ID."""
        ...

    async def list_participants(self, trip_id: uuid.UUID) -> list[Participant]:
        """List participants of a trip, owner first."""
        ...

    async def confirm_participant(self, participant_id: uuid.UUID) -> Participant | None:
        """Mark a participant as confirmed.

        Returns:
            Confirmed participant or None if not found
        """
        ...


class ActivityRepository(Protocol):
    """Repository for activity operations."""

    async def create_activity(
        self, trip_id: uuid.UUID, *, title: str, occurs_at: datetime
    ) -> Activity:
        """Schedule an activity on a trip."""
        ...

    async def list_activities(self, trip_id: uuid.UUID) -> list[Activity]:
        """List a trip's activities sorted ascending by occurs_at."""
        ...

    async def exists_at(self, occurs_at: datetime) -> bool:
        """Check whether any activity, on any trip, occurs at exactly this instant."""
        ...


class LinkRepository(Protocol):
    """Repository for link operations."""

    async def create_link(self, trip_id: uuid.UUID, *, title: str, url: str) -> Link:
        """Attach a link to a trip."""
        ...

    async def list_links(self, trip_id: uuid.UUID) -> list[Link]:
        """List a trip's links ordered by title."""
        ...
