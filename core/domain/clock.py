"""Time and identity sources for the aggregates."""

import uuid
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Globally unique opaque identifier."""
    return str(uuid.uuid4())
