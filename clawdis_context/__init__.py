"""Context compaction service for the Clawdis agent runtime."""

from .services.compaction import CompactedContext, ContextAssembler, SummaryStore, load_compacted_context

__all__ = ["CompactedContext", "ContextAssembler", "SummaryStore", "load_compacted_context"]
