"""Client-facing errors.

Every error here is user-correctable: the API renders it as a JSON body
with a human readable ``message`` and a stable ``code``.

Usage:
    from backend.app.errors import TripNotFound

    raise TripNotFound()
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Stable error codes returned alongside client error messages."""

    # Trip window
    INVALID_START_DATE = "INVALID_START_DATE"
    INVALID_END_DATE = "INVALID_END_DATE"

    # Activity window
    ACTIVITY_BEFORE_TRIP_START = "ACTIVITY_BEFORE_TRIP_START"
    ACTIVITY_AFTER_TRIP_END = "ACTIVITY_AFTER_TRIP_END"
    ACTIVITY_TIME_CONFLICT = "ACTIVITY_TIME_CONFLICT"

    # Lookups
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    PARTICIPANT_NOT_FOUND = "PARTICIPANT_NOT_FOUND"

    # Invites
    EMAIL_ALREADY_INVITED = "EMAIL_ALREADY_INVITED"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_START_DATE: "Invalid trip start date",
    ErrorCode.INVALID_END_DATE: "Invalid trip end date",
    ErrorCode.ACTIVITY_BEFORE_TRIP_START: "Activity date can not be before the trip start date",
    ErrorCode.ACTIVITY_AFTER_TRIP_END: "Activity date can not be after the trip end date",
    ErrorCode.ACTIVITY_TIME_CONFLICT: "There is already an activity at that time",
    ErrorCode.TRIP_NOT_FOUND: "Trip not found",
    ErrorCode.PARTICIPANT_NOT_FOUND: "Participant not found",
    ErrorCode.EMAIL_ALREADY_INVITED: "E-mail already added",
}


class ClientError(Exception):
    """Base class for errors caused by the request, not by the server."""

    code: ErrorCode

    def __init__(self, message: str | None = None) -> None:
        self.message = message or USER_MESSAGES[self.code]
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str]:
        """Serialize for the HTTP response body."""
        return {"message": self.message, "code": self.code.value}


class NotFoundError(ClientError):
    """A referenced resource does not exist."""


class InvalidStartDate(ClientError):
    code = ErrorCode.INVALID_START_DATE


class InvalidEndDate(ClientError):
    code = ErrorCode.INVALID_END_DATE


class ActivityBeforeTripStart(ClientError):
    code = ErrorCode.ACTIVITY_BEFORE_TRIP_START


class ActivityAfterTripEnd(ClientError):
    code = ErrorCode.ACTIVITY_AFTER_TRIP_END


class ActivityTimeConflict(ClientError):
    code = ErrorCode.ACTIVITY_TIME_CONFLICT


class TripNotFound(NotFoundError):
    code = ErrorCode.TRIP_NOT_FOUND


class ParticipantNotFound(NotFoundError):
    code = ErrorCode.PARTICIPANT_NOT_FOUND


class EmailAlreadyInvited(ClientError):
    code = ErrorCode.EMAIL_ALREADY_INVITED
