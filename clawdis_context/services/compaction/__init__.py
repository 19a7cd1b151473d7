"""Context compaction: rolling summaries plus a verbatim recent window."""

from .assembler import (
    CompactedContext,
    ContextAssembler,
    build_agent_messages,
    estimate_context_tokens,
    get_context_assembler,
    load_compacted_context,
)
from .formatting import MAX_SUMMARIES_IN_CONTEXT, format_summaries_as_context
from .recency import KEEP_RECENT_MINUTES, RecencyPartition, partition_messages, partition_recent
from .store import SummaryStore
from .timestamps import extract_timestamp
from .tokens import estimate_message_tokens

__all__ = [
    "CompactedContext",
    "ContextAssembler",
    "build_agent_messages",
    "estimate_context_tokens",
    "get_context_assembler",
    "load_compacted_context",
    "MAX_SUMMARIES_IN_CONTEXT",
    "format_summaries_as_context",
    "KEEP_RECENT_MINUTES",
    "RecencyPartition",
    "partition_messages",
    "partition_recent",
    "SummaryStore",
    "extract_timestamp",
    "estimate_message_tokens",
]
