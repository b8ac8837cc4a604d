"""Trip endpoints - create, read, update and owner confirmation."""

import logging
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, EmailStr, Field

from backend.app.api.deps import get_participant_repository, get_trip_repository
from backend.app.config import Settings, get_settings
from backend.app.db.repositories import NewParticipant, ParticipantRepository, TripRepository
from backend.app.errors import TripNotFound
from backend.app.mail.client import MailClient, get_mail_client
from backend.app.mail.delivery import deliver
from backend.app.mail.messages import build_trip_confirmation, build_trip_invitation
from backend.app.models.common import UtcDatetime, utcnow
from backend.app.models.trip import Trip
from backend.app.scheduling.window import validate_trip_window
from backend.app.utils.metrics import metrics

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips", tags=["trips"])


class CreateTripRequest(BaseModel):
    """Request body for POST /trips."""

    destination: str = Field(..., min_length=3, description="Where the trip goes")
    starts_at: UtcDatetime
    ends_at: UtcDatetime
    owner_name: str
    owner_email: EmailStr
    emails_to_invite: list[EmailStr] = Field(default_factory=list)


class CreateTripResponse(BaseModel):
    """Response for POST /trips."""

    trip_id: str


class UpdateTripRequest(BaseModel):
    """Request body for PUT /trips/{trip_id}.

    Destination and window are always replaced together.
    """

    destination: str = Field(..., min_length=3)
    starts_at: UtcDatetime
    ends_at: UtcDatetime


class UpdateTripResponse(BaseModel):
    """Response for PUT /trips/{trip_id}."""

    trip_id: str


class TripDetailsResponse(BaseModel):
    """Response for GET /trips/{trip_id}."""

    trip: Trip


@router.post("", response_model=CreateTripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    request: CreateTripRequest,
    trips: Annotated[TripRepository, Depends(get_trip_repository)],
    mail: Annotated[MailClient, Depends(get_mail_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CreateTripResponse:
    """Create a trip with its owner and invitees, then mail the owner.

    Args:
        request: Trip creation request
        trips: Trip repository
        mail: Mail client
        settings: App settings (confirmation link base URL)

    Returns:
        Created trip ID

    Raises:
        InvalidStartDate: starts_at is in the past
        InvalidEndDate: ends_at is before starts_at
    """
    validate_trip_window(request.starts_at, request.ends_at, utcnow())

    participants = [
        NewParticipant(
            email=request.owner_email,
            name=request.owner_name,
            is_owner=True,
            is_confirmed=True,
        ),
        *(NewParticipant(email=email) for email in request.emails_to_invite),
    ]

    trip = await trips.create_trip(
        destination=request.destination,
        starts_at=request.starts_at,
        ends_at=request.ends_at,
        participants=participants,
    )
    metrics.inc_trip_created()

    logger.info(
        f"[POST /trips] trip_id={trip.id}, destination={trip.destination}, "
        f"invitees={len(request.emails_to_invite)}"
    )

    confirmation_link = f"{settings.api_base_url}/trips/{trip.id}/confirm"
    await deliver(
        mail,
        build_trip_confirmation(
            trip,
            owner_name=request.owner_name,
            owner_email=request.owner_email,
            confirmation_link=confirmation_link,
        ),
        kind="trip_confirmation",
    )

    return CreateTripResponse(trip_id=str(trip.id))


@router.get("/{trip_id}", response_model=TripDetailsResponse)
async def get_trip_details(
    trip_id: uuid.UUID,
    trips: Annotated[TripRepository, Depends(get_trip_repository)],
) -> TripDetailsResponse:
    """Get a trip by ID.

    Raises:
        TripNotFound: No trip with this ID
    """
    trip = await trips.get_trip(trip_id)

    if trip is None:
        raise TripNotFound()

    return TripDetailsResponse(trip=trip)


@router.put("/{trip_id}", response_model=UpdateTripResponse)
async def update_trip(
    trip_id: uuid.UUID,
    request: UpdateTripRequest,
    trips: Annotated[TripRepository, Depends(get_trip_repository)],
) -> UpdateTripResponse:
    """Replace a trip's destination and window.

    Raises:
        TripNotFound: No trip with this ID
        InvalidStartDate: starts_at is in the past
        InvalidEndDate: ends_at is before starts_at
    """
    trip = await trips.get_trip(trip_id)

    if trip is None:
        raise TripNotFound()

    validate_trip_window(request.starts_at, request.ends_at, utcnow())

    await trips.update_trip(
        trip_id,
        destination=request.destination,
        starts_at=request.starts_at,
        ends_at=request.ends_at,
    )

    logger.info(f"[PUT /trips/{trip_id}] destination={request.destination}")

    return UpdateTripResponse(trip_id=str(trip_id))


@router.get("/{trip_id}/confirm", response_class=RedirectResponse)
async def confirm_trip(
    trip_id: uuid.UUID,
    trips: Annotated[TripRepository, Depends(get_trip_repository)],
    participants: Annotated[ParticipantRepository, Depends(get_participant_repository)],
    mail: Annotated[MailClient, Depends(get_mail_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> RedirectResponse:
    """Confirm a trip from the owner's e-mail link and invite everyone else.

    Confirming twice only redirects; invitations go out once.

    Raises:
        TripNotFound: No trip with this ID
    """
    trip = await trips.get_trip(trip_id)

    if trip is None:
        raise TripNotFound()

    trip_page = f"{settings.web_base_url}/trips/{trip_id}"

    if trip.is_confirmed:
        return RedirectResponse(trip_page, status_code=status.HTTP_302_FOUND)

    confirmed = await trips.confirm_trip(trip_id) or trip
    invitees = [p for p in await participants.list_participants(trip_id) if not p.is_owner]

    logger.info(f"[GET /trips/{trip_id}/confirm] inviting {len(invitees)} participants")

    for participant in invitees:
        confirmation_link = f"{settings.api_base_url}/participants/{participant.id}/confirm"
        await deliver(
            mail,
            build_trip_invitation(confirmed, participant, confirmation_link=confirmation_link),
            kind="trip_invitation",
        )

    return RedirectResponse(trip_page, status_code=status.HTTP_302_FOUND)
