"""Message builders for trip e-mails."""

from datetime import datetime
from html import escape

from backend.app.mail.client import MailMessage
from backend.app.models.trip import Participant, Trip


def format_long_date(value: datetime) -> str:
    """Format a date long-form, e.g. 'March 10, 2024'."""
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def _wrap(body: str) -> str:
    return (
        '<div style="font-family: sans-serif; font-size: 16px; line-height: 1.6;">'
        f"{body}"
        "</div>"
    )


def build_trip_confirmation(
    trip: Trip, *, owner_name: str, owner_email: str, confirmation_link: str
) -> MailMessage:
    """E-mail asking the owner to confirm a trip they just created."""
    starts = format_long_date(trip.starts_at)
    ends = format_long_date(trip.ends_at)

    html = _wrap(
        f"<p>You created a trip to <strong>{escape(trip.destination)}</strong> "
        f"from <strong>{starts}</strong> to <strong>{ends}</strong>.</p>"
        "<p></p>"
        "<p>To confirm your trip, click the link below:</p>"
        "<p></p>"
        f'<p><a href="{confirmation_link}">Confirm trip</a></p>'
    )

    return MailMessage(
        to_address=owner_email,
        to_name=owner_name,
        subject=f"Confirm your trip to {trip.destination} on {starts}",
        html=html,
    )


def build_trip_invitation(
    trip: Trip, participant: Participant, *, confirmation_link: str
) -> MailMessage:
    """E-mail inviting a participant to join a trip."""
    starts = format_long_date(trip.starts_at)
    ends = format_long_date(trip.ends_at)

    html = _wrap(
        f"<p>You have been invited to join a trip to <strong>{escape(trip.destination)}</strong> "
        f"from <strong>{starts}</strong> to <strong>{ends}</strong>.</p>"
        "<p></p>"
        "<p>To confirm your presence on the trip, click the link below:</p>"
        "<p></p>"
        f'<p><a href="{confirmation_link}">Confirm presence</a></p>'
    )

    return MailMessage(
        to_address=participant.email,
        to_name=participant.name,
        subject=f"Confirm your presence on the trip to {trip.destination} on {starts}",
        html=html,
    )
