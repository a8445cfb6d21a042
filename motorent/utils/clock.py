# motorent/utils/clock.py
"""Default clock and identifier factory injected into the services."""

import uuid
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current time as a naive UTC datetime (how timestamps are stored)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values are assumed UTC."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def new_id() -> str:
    return str(uuid.uuid4())
