from datetime import UTC, datetime
from typing import Optional


def utcnow() -> datetime:
    """Naive UTC timestamp, the form stored in DateTime columns"""
    return datetime.now(UTC).replace(tzinfo=None)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to a stored naive timestamp"""
    if value is None:
        return None
    return value.replace(tzinfo=UTC)
