"""Repository dependencies for request handlers.

Handlers depend on the repository protocols; these factories bind them to
the request's database session. Tests swap them via app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.db.engine import get_session
from backend.app.db.repositories import (
    ActivityRepository,
    LinkRepository,
    ParticipantRepository,
    TripRepository,
)
from backend.app.db.sql_repositories import (
    SqlActivityRepository,
    SqlLinkRepository,
    SqlParticipantRepository,
    SqlTripRepository,
)

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_trip_repository(session: SessionDep) -> TripRepository:
    """Trip repository bound to the request session."""
    return SqlTripRepository(session)


def get_participant_repository(session: SessionDep) -> ParticipantRepository:
    """Participant repository bound to the request session."""
    return SqlParticipantRepository(session)


def get_activity_repository(session: SessionDep) -> ActivityRepository:
    """Activity repository bound to the request session."""
    return SqlActivityRepository(session)


def get_link_repository(session: SessionDep) -> LinkRepository:
    """Link repository bound to the request session."""
    return SqlLinkRepository(session)
