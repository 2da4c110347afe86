"""Time utilities for the domain layer."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def to_epoch_millis(dt: datetime) -> int:
    """Return the instant as milliseconds since the Unix epoch."""
    return int(dt.timestamp() * 1000)
