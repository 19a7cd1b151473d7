"""Service layer components."""

from .compaction import (
    CompactedContext,
    ContextAssembler,
    SummaryStore,
    build_agent_messages,
    estimate_context_tokens,
    estimate_message_tokens,
    format_summaries_as_context,
    get_context_assembler,
    load_compacted_context,
    partition_recent,
)

__all__ = [
    "CompactedContext",
    "ContextAssembler",
    "SummaryStore",
    "build_agent_messages",
    "estimate_context_tokens",
    "estimate_message_tokens",
    "format_summaries_as_context",
    "get_context_assembler",
    "load_compacted_context",
    "partition_recent",
]
