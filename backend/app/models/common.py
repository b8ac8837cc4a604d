"""Common types shared across all models."""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator


def to_utc(value: datetime) -> datetime:
    """Normalize a timestamp to an aware UTC datetime.

    Naive values are taken to already be UTC; SQLite returns them that way.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utcnow() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


# ISO-8601 timestamp coerced to aware UTC at parse time
UtcDatetime = Annotated[datetime, AfterValidator(to_utc)]
