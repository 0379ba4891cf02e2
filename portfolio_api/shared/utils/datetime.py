"""UTC timestamps for stored documents.

createdAt, updatedAt and lastUpdated are always timezone-aware UTC. Firestore
exchanges them as RFC 3339 strings with up to nanosecond precision; Python
keeps microseconds.
"""

from datetime import UTC, datetime

_RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def utc_now() -> datetime:
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Attach UTC to a naive datetime, convert an aware one; None passes through."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def format_rfc3339(dt: datetime) -> str:
    """Render as Firestore expects, e.g. 2024-05-01T12:30:00.000000Z."""
    return ensure_utc(dt).strftime(_RFC3339_FORMAT)


def parse_rfc3339(raw: str) -> datetime:
    """Parse a Firestore timestampValue (fraction truncated to microseconds)."""
    value = raw.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    date_part, sep, rest = value.partition(".")
    if sep:
        # rest is "<digits><offset>"; the offset starts at the first + or -.
        cut = next((i for i, ch in enumerate(rest) if ch in "+-"), len(rest))
        digits, offset = rest[:cut], rest[cut:]
        value = f"{date_part}.{digits[:6].ljust(6, '0')}{offset}"
    return ensure_utc(datetime.fromisoformat(value))
