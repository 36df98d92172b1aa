from typing import Optional
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def current_timestamp() -> datetime:
    """Get current UTC timestamp"""
    return datetime.now(timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on the way back)."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def normalize_nullable(value: Optional[str]) -> Optional[str]:
    """Trim a string, collapsing blank values to None."""
    if value is None or not value.strip():
        return None
    return value.strip()


def load_zone(name: str) -> ZoneInfo:
    """ZoneInfo for an IANA name; ValueError for anything that is not a zone file."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        # directory names like "America" raise IsADirectoryError
        raise ValueError(f"Unknown timezone: {name}") from None
