"""UTC datetime utilities."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(UTC)


def now_ms() -> int:
    """Wall-clock milliseconds since 1970-01-01T00:00:00Z."""
    return int(utc_now().timestamp() * 1000)


def ms_to_datetime(ms: int) -> datetime:
    """Convert Unix milliseconds to an aware UTC datetime, keeping ms precision."""
    seconds, millis = divmod(ms, 1000)
    return datetime.fromtimestamp(seconds, tz=UTC).replace(microsecond=millis * 1000)
