"""Helpers for working with UTC datetimes."""

from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""

    return datetime.now(tz=timezone.utc)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Normalize ``value`` so it is expressed in UTC.

    Naive values are assumed to already hold UTC wall-clock time, which is how
    the SQL store persists them.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def ensure_utc_naive(value: datetime | None) -> datetime | None:
    """Return ``value`` converted to UTC but without ``tzinfo``.

    SQLite ``DATETIME`` columns drop the offset, so the store keeps naive UTC
    values and re-attaches the zone on the way out.
    """

    normalized = ensure_utc(value)
    if normalized is None:
        return None
    return normalized.replace(tzinfo=None)


def format_timestamp(value: datetime | None) -> str | None:
    """Render ``value`` as ISO-8601 with milliseconds and an explicit offset.

    UTC renders with a ``Z`` suffix, e.g. ``2024-05-01T10:15:30.123Z``.
    """

    normalized = ensure_utc(value)
    if normalized is None:
        return None
    rendered = normalized.isoformat(timespec="milliseconds")
    if rendered.endswith("+00:00"):
        rendered = rendered[: -len("+00:00")] + "Z"
    return rendered
