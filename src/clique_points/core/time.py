"""Timezone-aware UTC timestamp utilities."""

from datetime import datetime, timezone
from typing import Any, Optional

from .errors import InvalidParameterError


def utc_now() -> datetime:
    """Get current time as timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: Optional[datetime] = None) -> datetime:
    """
    Ensure datetime is timezone-aware and in UTC.

    Args:
        dt: Optional datetime. If None, returns current UTC time.
            If naive, assumes UTC. If timezone-aware, converts to UTC.

    Returns:
        Timezone-aware UTC datetime.
    """
    if dt is None:
        return utc_now()

    if dt.tzinfo is None:
        # Naive datetime, assume UTC
        return dt.replace(tzinfo=timezone.utc)

    # Convert to UTC if not already
    return dt.astimezone(timezone.utc)


def parse_timestamp(value: Any, name: str = "timestamp") -> datetime:
    """
    Parse a caller-supplied timestamp into a UTC datetime.

    Accepts datetime instances and ISO-8601 strings (a trailing "Z" is
    read as UTC). Naive values are assumed to be UTC.

    Args:
        value: Value to parse
        name: Parameter name for error messages

    Returns:
        Timezone-aware UTC datetime

    Raises:
        InvalidParameterError: If the value is not a datetime or parseable string
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, str):
        s = value.strip()
        if s.endswith("Z") or s.endswith("z"):
            s = s[:-1] + "+00:00"
        try:
            return ensure_utc(datetime.fromisoformat(s))
        except ValueError as e:
            raise InvalidParameterError(
                f"{name} is not a valid ISO-8601 timestamp: {value!r}"
            ) from e
    raise InvalidParameterError(
        f"{name} must be a datetime or ISO-8601 string, got {type(value).__name__}"
    )
