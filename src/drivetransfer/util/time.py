from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

# Sort key for items whose timestamp is missing; sorts after every real timestamp
# when ordering newest first.
EPOCH_UTC: datetime = datetime.min.replace(tzinfo=timezone.utc)


def parse_rfc3339(value: str) -> datetime:
    """
    Parse RFC3339 timestamp string into tz-aware UTC datetime.

    Accepts strings like:
      - 2025-01-01T12:34:56Z
      - 2025-01-01T12:34:56.123Z
      - 2025-01-01T12:34:56+09:00
    """
    if not isinstance(value, str) or not value:
        raise ValueError("RFC3339 value must be a non-empty string")

    s = value.strip()
    # Python's fromisoformat doesn't accept 'Z' in 3.9/3.10, so normalize.
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"

    dt = datetime.fromisoformat(s)  # raises ValueError if invalid
    dt = normalize_dt(dt)
    return dt.astimezone(timezone.utc)


def parse_rfc3339_or_none(value: object) -> Optional[datetime]:
    """Like parse_rfc3339, but returns None for missing or unparsable values."""
    if not isinstance(value, str):
        return None
    try:
        return parse_rfc3339(value)
    except ValueError:
        return None


def normalize_dt(dt: datetime) -> datetime:
    """Ensure datetime is tz-aware. Raises if naive."""
    if not isinstance(dt, datetime):
        raise TypeError("dt must be a datetime")
    if dt.tzinfo is None:
        raise ValueError("naive datetime is not allowed; timezone-aware required")
    return dt


def to_display_date(dt: Optional[datetime]) -> Optional[str]:
    """Format a tz-aware datetime as a UTC calendar date (YYYY-MM-DD)."""
    if dt is None:
        return None
    return normalize_dt(dt).astimezone(timezone.utc).date().isoformat()
