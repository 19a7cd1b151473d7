from __future__ import annotations

from typing import List, Sequence

from ...models import StoredSummary

# Roughly the last six hours of hourly summaries.
MAX_SUMMARIES_IN_CONTEXT = 6

SUMMARY_HEADER = "[Context: Earlier conversation summary - for reference only]"
SUMMARY_FOOTER = "[End summary - respond briefly to recent messages below]"
BULLET = "•"


def format_summary_line(summary: StoredSummary) -> str:
    return f"{BULLET} {summary.period}: {summary.text}"


def format_summaries_as_context(summaries: Sequence[StoredSummary]) -> str:
    """Render the most recent summaries as a reference-only context block."""

    if not summaries:
        return ""

    kept = list(summaries)[-MAX_SUMMARIES_IN_CONTEXT:]
    lines: List[str] = [SUMMARY_HEADER]
    lines.extend(format_summary_line(summary) for summary in kept)
    lines.append(SUMMARY_FOOTER)
    return "\n".join(lines) + "\n"


__all__ = [
    "BULLET",
    "MAX_SUMMARIES_IN_CONTEXT",
    "SUMMARY_FOOTER",
    "SUMMARY_HEADER",
    "format_summaries_as_context",
    "format_summary_line",
]
