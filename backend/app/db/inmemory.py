"""In-memory implementations of repository interfaces."""

import uuid
from collections.abc import Sequence
from datetime import datetime

from backend.app.db.repositories import NewParticipant
from backend.app.models.common import to_utc, utcnow
from backend.app.models.trip import Activity, Link, Participant, Trip


class InMemoryStore:
    """Tables shared by the in-memory repositories."""

    def __init__(self) -> None:
        self.trips: dict[uuid.UUID, Trip] = {}
        self.participants: dict[uuid.UUID, Participant] = {}
        self.activities: dict[uuid.UUID, Activity] = {}
        self.links: dict[uuid.UUID, Link] = {}


class InMemoryTripRepository:
    """In-memory implementation of TripRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def create_trip(
        self,
        *,
        destination: str,
        starts_at: datetime,
        ends_at: datetime,
        participants: Sequence[NewParticipant],
    ) -> Trip:
        """Create a trip together with its initial participants."""
        trip = Trip(
            id=uuid.uuid4(),
            destination=destination,
            starts_at=to_utc(starts_at),
            ends_at=to_utc(ends_at),
            is_confirmed=False,
            created_at=utcnow(),
        )
        self._store.trips[trip.id] = trip

        for new in participants:
            participant = Participant(
                id=uuid.uuid4(),
                trip_id=trip.id,
                name=new.name,
                email=new.email,
                is_owner=new.is_owner,
                is_confirmed=new.is_confirmed,
            )
            self._store.participants[participant.id] = participant

        return trip

    async def get_trip(self, trip_id: uuid.UUID) -> Trip | None:
        """Get trip by ID."""
        return self._store.trips.get(trip_id)

    async def update_trip(
        self,
        trip_id: uuid.UUID,
        *,
        destination: str,
        starts_at: datetime,
        ends_at: datetime,
    ) -> Trip | None:
        """Replace destination and window of a trip."""
        trip = self._store.trips.get(trip_id)

        if trip is None:
            return None

        updated = trip.model_copy(
            update={
                "destination": destination,
                "starts_at": to_utc(starts_at),
                "ends_at": to_utc(ends_at),
            }
        )
        self._store.trips[trip_id] = updated
        return updated

    async def confirm_trip(self, trip_id: uuid.UUID) -> Trip | None:
        """Mark a trip as confirmed by its owner."""
        trip = self._store.trips.get(trip_id)

        if trip is None:
            return None

        confirmed = trip.model_copy(update={"is_confirmed": True})
        self._store.trips[trip_id] = confirmed
        return confirmed


class InMemoryParticipantRepository:
    """In-memory implementation of ParticipantRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def add_participant(self, trip_id: uuid.UUID, email: str) -> Participant:
        """Invite a new participant to a trip."""
        participant = Participant(id=uuid.uuid4(), trip_id=trip_id, email=email)
        self._store.participants[participant.id] = participant
        return participant

    async def get_participant(self, participant_id: uuid.UUID) -> Participant | None:
        """Get participant by ID."""
        return self._store.participants.get(participant_id)

    async def list_participants(self, trip_id: uuid.UUID) -> list[Participant]:
        """List participants of a trip, owner first."""
        results = [p for p in self._store.participants.values() if p.trip_id == trip_id]
        results.sort(key=lambda p: (not p.is_owner, p.email))
        return results

    async def confirm_participant(self, participant_id: uuid.UUID) -> Participant | None:
        """Mark a participant as confirmed."""
        participant = self._store.participants.get(participant_id)

        if participant is None:
            return None

        confirmed = participant.model_copy(update={"is_confirmed": True})
        self._store.participants[participant_id] = confirmed
        return confirmed


class InMemoryActivityRepository:
    """In-memory implementation of ActivityRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def create_activity(
        self, trip_id: uuid.UUID, *, title: str, occurs_at: datetime
    ) -> Activity:
        """Schedule an activity on a trip."""
        activity = Activity(
            id=uuid.uuid4(), trip_id=trip_id, title=title, occurs_at=to_utc(occurs_at)
        )
        self._store.activities[activity.id] = activity
        return activity

    async def list_activities(self, trip_id: uuid.UUID) -> list[Activity]:
        """List a trip's activities sorted ascending by occurs_at."""
        results = [a for a in self._store.activities.values() if a.trip_id == trip_id]
        results.sort(key=lambda a: a.occurs_at)
        return results

    async def exists_at(self, occurs_at: datetime) -> bool:
        """Check whether any activity, on any trip, occurs at exactly this instant."""
        instant = to_utc(occurs_at)
        return any(a.occurs_at == instant for a in self._store.activities.values())


class InMemoryLinkRepository:
    """In-memory implementation of LinkRepository."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def create_link(self, trip_id: uuid.UUID, *, title: str, url: str) -> Link:
        """Attach a link to a trip."""
        link = Link(id=uuid.uuid4(), trip_id=trip_id, title=title, url=url)
        self._store.links[link.id] = link
        return link

    async def list_links(self, trip_id: uuid.UUID) -> list[Link]:
        """List a trip's links ordered by title."""
        results = [link for link in self._store.links.values() if link.trip_id == trip_id]
        results.sort(key=lambda link: link.title)
        return results
