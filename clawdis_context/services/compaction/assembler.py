"""Combine stored rolling summaries with a verbatim tail of recent messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from functools import lru_cache
from typing import Any, Callable, Dict, List, Optional, Sequence

from ...config import get_settings
from ...logging_config import logger
from ...utils.timezones import utc_now
from .formatting import format_summaries_as_context
from .recency import KEEP_RECENT_MINUTES, partition_recent
from .store import SummaryStore
from .tokens import estimate_message_tokens


@dataclass
class CompactedContext:
    """Bounded context for a single agent turn."""

    summary_prefix: str = ""
    recent_messages: List[Any] = field(default_factory=list)
    was_summarized: bool = False
    summary_count: int = 0


class ContextAssembler:
    """Builds a :class:`CompactedContext` from the summary store and raw history."""

    def __init__(
        self,
        store: SummaryStore,
        keep_recent_minutes: float = KEEP_RECENT_MINUTES,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if keep_recent_minutes < 0:
            raise ValueError("keep_recent_minutes must be non-negative")
        self.store = store
        self.keep_recent_minutes = keep_recent_minutes
        self._clock = clock

    def assemble(
        self,
        session_id: str,
        all_messages: Sequence[Any],
        now: Optional[datetime] = None,
    ) -> CompactedContext:
        messages = list(all_messages)
        summary_file = self.store.load_summaries(session_id)

        # Never summarized (or nothing to show): hand back the full history.
        if summary_file is None or not summary_file.summaries:
            logger.debug(
                "no stored summaries; using full history",
                extra={"session_id": session_id, "total": len(messages)},
            )
            return CompactedContext(recent_messages=messages)

        moment = now if now is not None else self._clock()
        recent_messages = partition_recent(messages, moment, self.keep_recent_minutes)
        summary_prefix = format_summaries_as_context(summary_file.summaries)
        summary_count = len(summary_file.summaries)

        logger.info(
            "loaded %d summaries + %d recent messages (from %d total)",
            summary_count,
            len(recent_messages),
            len(messages),
            extra={"session_id": session_id},
        )

        return CompactedContext(
            summary_prefix=summary_prefix,
            recent_messages=recent_messages,
            was_summarized=bool(summary_prefix),
            summary_count=summary_count,
        )


def build_agent_messages(context: CompactedContext, role: str = "user") -> List[Any]:
    """Flatten *context* into the list handed to the agent runtime."""

    messages: List[Any] = []
    if context.summary_prefix:
        prefix: Dict[str, Any] = {"role": role, "content": context.summary_prefix}
        messages.append(prefix)
    messages.extend(context.recent_messages)
    return messages


def estimate_context_tokens(context: CompactedContext) -> int:
    return estimate_message_tokens(build_agent_messages(context))


@lru_cache(maxsize=1)
def get_context_assembler() -> ContextAssembler:
    settings = get_settings()
    return ContextAssembler(
        SummaryStore(settings.sessions_dir),
        keep_recent_minutes=settings.keep_recent_minutes,
    )


def load_compacted_context(session_id: str, all_messages: Sequence[Any]) -> CompactedContext:
    return get_context_assembler().assemble(session_id, all_messages)


__all__ = [
    "CompactedContext",
    "ContextAssembler",
    "build_agent_messages",
    "estimate_context_tokens",
    "get_context_assembler",
    "load_compacted_context",
]
