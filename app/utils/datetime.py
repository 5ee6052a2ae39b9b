"""Helpers for working with timezone-aware datetimes."""

from __future__ import annotations

from datetime import datetime, timezone


def ensure_utc(value: datetime | None) -> datetime | None:
    """Return ``value`` expressed in UTC.

    PostgreSQL ``timestamptz`` columns come back aware and are converted. SQLite
    has no timezone support and returns naive ``CURRENT_TIMESTAMP`` values,
    which are UTC, so a missing ``tzinfo`` is read as UTC.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_timestamp(value: datetime | None) -> str | None:
    """Render ``value`` as an ISO-8601 string in UTC, e.g. ``2024-05-01T10:00:00Z``."""

    normalized = ensure_utc(value)
    if normalized is None:
        return None
    return normalized.replace(microsecond=0).isoformat().replace("+00:00", "Z")
