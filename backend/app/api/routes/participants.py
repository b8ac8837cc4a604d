"""Participant endpoints - invites, listing and invitee confirmation."""

import logging
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, EmailStr

from backend.app.api.deps import get_participant_repository, get_trip_repository
from backend.app.config import Settings, get_settings
from backend.app.db.repositories import ParticipantRepository, TripRepository
from backend.app.errors import EmailAlreadyInvited, ParticipantNotFound, TripNotFound
from backend.app.mail.client import MailClient, get_mail_client
from backend.app.mail.delivery import deliver
from backend.app.mail.messages import build_trip_invitation
from backend.app.models.trip import Participant

logger = logging.getLogger(__name__)

router = APIRouter(tags=["participants"])


class CreateInviteRequest(BaseModel):
    """Request body for POST /trips/{trip_id}/invites."""

    email: EmailStr


class CreateInviteResponse(BaseModel):
    """Response for POST /trips/{trip_id}/invites."""

    participant_id: str


class ParticipantsResponse(BaseModel):
    """Response for GET /trips/{trip_id}/participants."""

    participants: list[Participant]


class ParticipantResponse(BaseModel):
    """Response for GET /participants/{participant_id}."""

    participant: Participant


@router.post(
    "/trips/{trip_id}/invites",
    response_model=CreateInviteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_invite(
    trip_id: uuid.UUID,
    request: CreateInviteRequest,
    trips: Annotated[TripRepository, Depends(get_trip_repository)],
    participants: Annotated[ParticipantRepository, Depends(get_participant_repository)],
    mail: Annotated[MailClient, Depends(get_mail_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CreateInviteResponse:
    """Invite someone to a trip and mail them a confirmation link.

    Raises:
        TripNotFound: No trip with this ID
        EmailAlreadyInvited: The e-mail is already a participant
    """
    trip = await trips.get_trip(trip_id)

    if trip is None:
        raise TripNotFound()

    existing = {p.email for p in await participants.list_participants(trip_id)}
    if request.email in existing:
        raise EmailAlreadyInvited()

    participant = await participants.add_participant(trip_id, request.email)

    logger.info(f"[POST /trips/{trip_id}/invites] participant_id={participant.id}")

    confirmation_link = f"{settings.api_base_url}/participants/{participant.id}/confirm"
    await deliver(
        mail,
        build_trip_invitation(trip, participant, confirmation_link=confirmation_link),
        kind="trip_invitation",
    )

    return CreateInviteResponse(participant_id=str(participant.id))


@router.get("/trips/{trip_id}/participants", response_model=ParticipantsResponse)
async def get_participants(
    trip_id: uuid.UUID,
    trips: Annotated[TripRepository, Depends(get_trip_repository)],
    participants: Annotated[ParticipantRepository, Depends(get_participant_repository)],
) -> ParticipantsResponse:
    """List a trip's participants, owner first."""
    if await trips.get_trip(trip_id) is None:
        raise TripNotFound()

    return ParticipantsResponse(participants=await participants.list_participants(trip_id))


@router.get("/participants/{participant_id}", response_model=ParticipantResponse)
async def get_participant(
    participant_id: uuid.UUID,
    participants: Annotated[ParticipantRepository, Depends(get_participant_repository)],
) -> ParticipantResponse:
    """Get a participant by ID."""
    participant = await participants.get_participant(participant_id)

    if participant is None:
        raise ParticipantNotFound()

    return ParticipantResponse(participant=participant)


@router.get("/participants/{participant_id}/confirm", response_class=RedirectResponse)
async def confirm_participant(
    participant_id: uuid.UUID,
    participants: Annotated[ParticipantRepository, Depends(get_participant_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> RedirectResponse:
    """Confirm presence from an invitation link and redirect to the trip page.

    Raises:
        ParticipantNotFound: No participant with this ID
    """
    participant = await participants.get_participant(participant_id)

    if participant is None:
        raise ParticipantNotFound()

    if not participant.is_confirmed:
        await participants.confirm_participant(participant_id)
        logger.info(f"[GET /participants/{participant_id}/confirm] confirmed")

    return RedirectResponse(
        f"{settings.web_base_url}/trips/{participant.trip_id}",
        status_code=status.HTTP_302_FOUND,
    )
