"""Activity endpoints - schedule activities and list them day by day."""

import logging
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from backend.app.api.deps import get_activity_repository, get_trip_repository
from backend.app.db.repositories import ActivityRepository, TripRepository
from backend.app.errors import TripNotFound
from backend.app.models.common import UtcDatetime
from backend.app.models.trip import DayBucket
from backend.app.scheduling.buckets import expand_date_range, group_activities_by_date
from backend.app.scheduling.window import validate_activity_window
from backend.app.utils.metrics import metrics

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips/{trip_id}/activities", tags=["activities"])


class CreateActivityRequest(BaseModel):
    """Request body for POST /trips/{trip_id}/activities."""

    title: str = Field(..., min_length=3)
    occurs_at: UtcDatetime


class CreateActivityResponse(BaseModel):
    """Response for POST /trips/{trip_id}/activities."""

    activity_id: str


class ActivitiesResponse(BaseModel):
    """Response for GET /trips/{trip_id}/activities."""

    activities: list[DayBucket]


@router.post("", response_model=CreateActivityResponse, status_code=status.HTTP_201_CREATED)
async def create_activity(
    trip_id: uuid.UUID,
    request: CreateActivityRequest,
    trips: Annotated[TripRepository, Depends(get_trip_repository)],
    activities: Annotated[ActivityRepository, Depends(get_activity_repository)],
) -> CreateActivityResponse:
    """Schedule an activity inside a trip's window.

    Raises:
        TripNotFound: No trip with this ID
        ActivityBeforeTripStart: occurs_at is before the trip starts
        ActivityAfterTripEnd: occurs_at is after the trip ends
        ActivityTimeConflict: an activity already exists at occurs_at
    """
    trip = await trips.get_trip(trip_id)

    if trip is None:
        raise TripNotFound()

    time_taken = await activities.exists_at(request.occurs_at)
    validate_activity_window(request.occurs_at, trip, time_taken=time_taken)

    activity = await activities.create_activity(
        trip_id, title=request.title, occurs_at=request.occurs_at
    )
    metrics.inc_activity_created()

    logger.info(
        f"[POST /trips/{trip_id}/activities] activity_id={activity.id}, "
        f"occurs_at={activity.occurs_at.isoformat()}"
    )

    return CreateActivityResponse(activity_id=str(activity.id))


@router.get("", response_model=ActivitiesResponse)
async def get_activities(
    trip_id: uuid.UUID,
    trips: Annotated[TripRepository, Depends(get_trip_repository)],
    activities: Annotated[ActivityRepository, Depends(get_activity_repository)],
) -> ActivitiesResponse:
    """List a trip's activities grouped into one bucket per trip day.

    Raises:
        TripNotFound: No trip with this ID
    """
    trip = await trips.get_trip(trip_id)

    if trip is None:
        raise TripNotFound()

    scheduled = await activities.list_activities(trip_id)
    buckets = expand_date_range(trip.starts_at, trip.ends_at)

    return ActivitiesResponse(activities=group_activities_by_date(buckets, scheduled))
