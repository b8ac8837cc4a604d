"""Link endpoints - attach and list trip links."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field, HttpUrl

from backend.app.api.deps import get_link_repository, get_trip_repository
from backend.app.db.repositories import LinkRepository, TripRepository
from backend.app.errors import TripNotFound
from backend.app.models.trip import Link

router = APIRouter(prefix="/trips/{trip_id}/links", tags=["links"])


class CreateLinkRequest(BaseModel):
    """Request body for POST /trips/{trip_id}/links."""

    title: str = Field(..., min_length=3)
    url: HttpUrl


class CreateLinkResponse(BaseModel):
    """Response for POST /trips/{trip_id}/links."""

    link_id: str


class LinksResponse(BaseModel):
    """Response for GET /trips/{trip_id}/links."""

    links: list[Link]


@router.post("", response_model=CreateLinkResponse, status_code=status.HTTP_201_CREATED)
async def create_link(
    trip_id: uuid.UUID,
    request: CreateLinkRequest,
    trips: Annotated[TripRepository, Depends(get_trip_repository)],
    links: Annotated[LinkRepository, Depends(get_link_repository)],
) -> CreateLinkResponse:
    """Attach a link to a trip.

    Raises:
        TripNotFound: No trip with this ID
    """
    if await trips.get_trip(trip_id) is None:
        raise TripNotFound()

    link = await links.create_link(trip_id, title=request.title, url=str(request.url))

    return CreateLinkResponse(link_id=str(link.id))


@router.get("", response_model=LinksResponse)
async def get_links(
    trip_id: uuid.UUID,
    trips: Annotated[TripRepository, Depends(get_trip_repository)],
    links: Annotated[LinkRepository, Depends(get_link_repository)],
) -> LinksResponse:
    """List a trip's links."""
    if await trips.get_trip(trip_id) is None:
        raise TripNotFound()

    return LinksResponse(links=await links.list_links(trip_id))
