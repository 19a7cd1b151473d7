"""Shared helpers for normalising points in time to aware UTC datetimes."""

from __future__ import annotations

from datetime import datetime, timezone

from dateutil import parser as date_parser

UTC = timezone.utc


def utc_now() -> datetime:
    """Return the current time in UTC."""

    return datetime.now(UTC)


def ensure_aware(dt: datetime) -> datetime:
    """Attach UTC to naive datetimes; aware values are returned unchanged."""

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt


def parse_iso(timestamp: str) -> datetime:
    """Parse an ISO timestamp, defaulting to UTC when timezone is absent.

    Raises ``ValueError`` (or ``OverflowError``) for text that is not a
    valid ISO-8601 point in time.
    """

    return ensure_aware(date_parser.isoparse(timestamp.strip()))


def from_epoch_millis(value: float) -> datetime:
    """Convert epoch milliseconds into an aware UTC datetime."""

    return datetime.fromtimestamp(value / 1000, tz=UTC)


__all__ = [
    "UTC",
    "ensure_aware",
    "from_epoch_millis",
    "parse_iso",
    "utc_now",
]
