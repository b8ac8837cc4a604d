"""Dev seeding helper - creates a sample trip to click around with."""

import asyncio
import uuid
from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.db.engine import get_async_engine
from backend.app.db.repositories import NewParticipant
from backend.app.db.sql_repositories import (
    SqlActivityRepository,
    SqlLinkRepository,
    SqlTripRepository,
)
from backend.app.models.common import utcnow

DEV_OWNER_EMAIL = "dev@example.com"


async def seed_dev_trip() -> uuid.UUID:
    """Seed a three-day trip with one activity per day and a link.

    Returns:
        ID of the seeded trip
    """
    starts_at = (utcnow() + timedelta(days=7)).replace(hour=8, minute=0, second=0, microsecond=0)
    ends_at = starts_at + timedelta(days=2, hours=12)

    async with AsyncSession(get_async_engine()) as session:
        trips = SqlTripRepository(session)
        activities = SqlActivityRepository(session)
        links = SqlLinkRepository(session)

        trip = await trips.create_trip(
            destination="Florianópolis, Brazil",
            starts_at=starts_at,
            ends_at=ends_at,
            participants=[
                NewParticipant(
                    email=DEV_OWNER_EMAIL, name="Dev Owner", is_owner=True, is_confirmed=True
                ),
                NewParticipant(email="friend@example.com"),
            ],
        )
        print(f"Created dev trip {trip.id} to {trip.destination}")

        for day, title in enumerate(["Beach day", "Boat tour", "Farewell dinner"]):
            occurs_at = starts_at + timedelta(days=day, hours=2 + day)
            await activities.create_activity(trip.id, title=title, occurs_at=occurs_at)

        await links.create_link(
            trip.id, title="Airbnb reservation", url="https://www.airbnb.com/rooms/104700011"
        )

    print("✅ Dev seeding complete")
    return trip.id


if __name__ == "__main__":
    asyncio.run(seed_dev_trip())
