from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Iterable, List, Sequence

from ...utils.timezones import ensure_aware
from .timestamps import DEFAULT_EXTRACTORS, TimestampExtractor, extract_timestamp

KEEP_RECENT_MINUTES = 60


@dataclass
class RecencyPartition:
    """Messages split around the recency cutoff, original order preserved."""

    cutoff: datetime
    recent: List[Any] = field(default_factory=list)
    older: List[Any] = field(default_factory=list)


def recency_cutoff(now: datetime, window_minutes: float) -> datetime:
    if window_minutes < 0:
        raise ValueError("window_minutes must be non-negative")
    return ensure_aware(now) - timedelta(minutes=window_minutes)


def partition_messages(
    messages: Iterable[Any],
    now: datetime,
    window_minutes: float = KEEP_RECENT_MINUTES,
    extractors: Sequence[TimestampExtractor] = DEFAULT_EXTRACTORS,
) -> RecencyPartition:
    """Split *messages* into the verbatim tail and the part covered by summaries.

    Messages without a usable timestamp always stay in the recent tail; the
    cutoff itself counts as recent.
    """

    partition = RecencyPartition(cutoff=recency_cutoff(now, window_minutes))
    for message in messages:
        moment = extract_timestamp(message, extractors)
        if moment is None or moment >= partition.cutoff:
            partition.recent.append(message)
        else:
            partition.older.append(message)
    return partition


def partition_recent(
    messages: Iterable[Any],
    now: datetime,
    window_minutes: float = KEEP_RECENT_MINUTES,
) -> List[Any]:
    return partition_messages(messages, now, window_minutes).recent


__all__ = [
    "KEEP_RECENT_MINUTES",
    "RecencyPartition",
    "partition_messages",
    "partition_recent",
    "recency_cutoff",
]
