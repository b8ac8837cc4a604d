"""SQL implementations of repository interfaces."""

import uuid
from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.db.models import Activity as ActivityDB
from backend.app.db.models import Link as LinkDB
from backend.app.db.models import Participant as ParticipantDB
from backend.app.db.models import Trip as TripDB
from backend.app.db.repositories import NewParticipant
from backend.app.models.common import to_utc
from backend.app.models.trip import Activity, Link, Participant, Trip


class SqlTripRepository:
    """SQL implementation of TripRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create_trip(
        self,
        *,
        destination: str,
        starts_at: datetime,
        ends_at: datetime,
        participants: Sequence[NewParticipant],
    ) -> Trip:
        """Create a trip together with its initial participants."""
        trip = TripDB(
            id=uuid.uuid4(),
            destination=destination,
            starts_at=to_utc(starts_at),
            ends_at=to_utc(ends_at),
            is_confirmed=False,
        )
        trip.participants = [
            ParticipantDB(
                id=uuid.uuid4(),
                name=new.name,
                email=new.email,
                is_owner=new.is_owner,
                is_confirmed=new.is_confirmed,
            )
            for new in participants
        ]

        self._session.add(trip)
        await self._session.commit()
        await self._session.refresh(trip)

        return Trip.model_validate(trip, from_attributes=True)

    async def get_trip(self, trip_id: uuid.UUID) -> Trip | None:
        """Get trip by ID."""
        trip = await self._session.get(TripDB, trip_id)

        if trip is None:
            return None

        return Trip.model_validate(trip, from_attributes=True)

    async def update_trip(
        self,
        trip_id: uuid.UUID,
        *,
        destination: str,
        starts_at: datetime,
        ends_at: datetime,
    ) -> Trip | None:
        """Replace destination and window of a trip."""
        trip = await self._session.get(TripDB, trip_id)

        if trip is None:
            return None

        trip.destination = destination
        trip.starts_at = to_utc(starts_at)
        trip.ends_at = to_utc(ends_at)

        await self._session.commit()
        await self._session.refresh(trip)

        return Trip.model_validate(trip, from_attributes=True)

    async def confirm_trip(self, trip_id: uuid.UUID) -> Trip | None:
        """Mark a trip as confirmed by its owner."""
        trip = await self._session.get(TripDB, trip_id)

        if trip is None:
            return None

        trip.is_confirmed = True

        await self._session.commit()
        await self._session.refresh(trip)

        return Trip.model_validate(trip, from_attributes=True)


class SqlParticipantRepository:
    """SQL implementation of ParticipantRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add_participant(self, trip_id: uuid.UUID, email: str) -> Participant:
        """Invite a new participant to a trip."""
        participant = ParticipantDB(
            id=uuid.uuid4(),
            trip_id=trip_id,
            email=email,
            is_owner=False,
            is_confirmed=False,
        )

        self._session.add(participant)
        await self._session.commit()
        await self._session.refresh(participant)

        return Participant.model_validate(participant, from_attributes=True)

    async def get_participant(self, participant_id: uuid.UUID) -> Participant | None:
        """Get participant by ID."""
        participant = await self._session.get(ParticipantDB, participant_id)

        if participant is None:
            return None

        return Participant.model_validate(participant, from_attributes=True)

    async def list_participants(self, trip_id: uuid.UUID) -> list[Participant]:
        """List participants of a trip, owner first."""
        result = await self._session.execute(
            select(ParticipantDB)
            .where(ParticipantDB.trip_id == trip_id)
            .order_by(ParticipantDB.is_owner.desc(), ParticipantDB.email)
        )

        return [
            Participant.model_validate(row, from_attributes=True)
            for row in result.scalars().all()
        ]

    async def confirm_participant(self, participant_id: uuid.UUID) -> Participant | None:
        """Mark a participant as confirmed."""
        participant = await self._session.get(ParticipantDB, participant_id)

        if participant is None:
            return None

        participant.is_confirmed = True

        await self._session.commit()
        await self._session.refresh(participant)

        return Participant.model_validate(participant, from_attributes=True)


class SqlActivityRepository:
    """SQL implementation of ActivityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create_activity(
        self, trip_id: uuid.UUID, *, title: str, occurs_at: datetime
    ) -> Activity:
        """Schedule an activity on a trip."""
        activity = ActivityDB(
            id=uuid.uuid4(),
            trip_id=trip_id,
            title=title,
            occurs_at=to_utc(occurs_at),
        )

        self._session.add(activity)
        await self._session.commit()
        await self._session.refresh(activity)

        return Activity.model_validate(activity, from_attributes=True)

    async def list_activities(self, trip_id: uuid.UUID) -> list[Activity]:
        """List a trip's activities sorted ascending by occurs_at."""
        result = await self._session.execute(
            select(ActivityDB)
            .where(ActivityDB.trip_id == trip_id)
            .order_by(ActivityDB.occurs_at.asc())
        )

        return [
            Activity.model_validate(row, from_attributes=True) for row in result.scalars().all()
        ]

    async def exists_at(self, occurs_at: datetime) -> bool:
        """Check whether any activity, on any trip, occurs at exactly this instant."""
        result = await self._session.execute(
            select(ActivityDB.id).where(ActivityDB.occurs_at == to_utc(occurs_at)).limit(1)
        )
        return result.scalar_one_or_none() is not None


class SqlLinkRepository:
    """SQL implementation of LinkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create_link(self, trip_id: uuid.UUID, *, title: str, url: str) -> Link:
        """Attach a link to a trip."""
        link = LinkDB(id=uuid.uuid4(), trip_id=trip_id, title=title, url=url)

        self._session.add(link)
        await self._session.commit()
        await self._session.refresh(link)

        return Link.model_validate(link, from_attributes=True)

    async def list_links(self, trip_id: uuid.UUID) -> list[Link]:
        """List a trip's links ordered by title."""
        result = await self._session.execute(
            select(LinkDB).where(LinkDB.trip_id == trip_id).order_by(LinkDB.title)
        )

        return [Link.model_validate(row, from_attributes=True) for row in result.scalars().all()]
