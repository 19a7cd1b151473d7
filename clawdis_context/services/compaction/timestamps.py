"""Extract a point in time from externally-defined messages."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Callable, Optional, Sequence

from ...utils.timezones import ensure_aware, from_epoch_millis, parse_iso
from .content import get_field

TimestampExtractor = Callable[[Any], Optional[datetime]]

TIMESTAMP_FIELDS: Sequence[str] = ("timestamp", "ts", "createdAt", "created_at")


def coerce_timestamp(value: Any) -> Optional[datetime]:
    """Return an aware datetime for *value*, or ``None`` when it is not one.

    Numbers are epoch milliseconds; strings must be ISO-8601. Naive values
    are taken as UTC.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return ensure_aware(value)
    try:
        if isinstance(value, (int, float)):
            if isinstance(value, float) and not math.isfinite(value):
                return None
            return from_epoch_millis(value)
        if isinstance(value, str):
            return parse_iso(value)
    except (ValueError, OverflowError, OSError):
        return None
    return None


def field_extractor(name: str) -> TimestampExtractor:
    def _extract(message: Any) -> Optional[datetime]:
        return coerce_timestamp(get_field(message, name))

    _extract.__name__ = f"extract_{name}"
    return _extract


DEFAULT_EXTRACTORS: Sequence[TimestampExtractor] = tuple(
    field_extractor(name) for name in TIMESTAMP_FIELDS
)


def extract_timestamp(
    message: Any, extractors: Sequence[TimestampExtractor] = DEFAULT_EXTRACTORS
) -> Optional[datetime]:
    """Return the first timestamp any extractor yields for *message*."""

    for extractor in extractors:
        moment = extractor(message)
        if moment is not None:
            return moment
    return None


__all__ = [
    "DEFAULT_EXTRACTORS",
    "TIMESTAMP_FIELDS",
    "TimestampExtractor",
    "coerce_timestamp",
    "extract_timestamp",
    "field_extractor",
]
