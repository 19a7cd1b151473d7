"""Unit tests for rendering stored summaries into a context prefix."""

from clawdis_context.models import StoredSummary
from clawdis_context.services.compaction.formatting import (
    MAX_SUMMARIES_IN_CONTEXT,
    SUMMARY_FOOTER,
    SUMMARY_HEADER,
    format_summaries_as_context,
)


def _summaries(count):
    return [
        StoredSummary(period=f"{hour:02d}:00–{hour + 1:02d}:00", hour_key=f"h{hour}", text=f"topic {hour}")
        for hour in range(count)
    ]


def _bullets(prefix):
    return [line for line in prefix.splitlines() if line.startswith("• ")]


def test_empty_sequence_renders_nothing():
    assert format_summaries_as_context([]) == ""


def test_exact_layout():
    prefix = format_summaries_as_context(
        [
            StoredSummary(period="09:00–10:00", text="booked flights"),
            StoredSummary(period="10:00–11:00", text="compared hotels"),
        ]
    )

    assert prefix == (
        "[Context: Earlier conversation summary - for reference only]\n"
        "• 09:00–10:00: booked flights\n"
        "• 10:00–11:00: compared hotels\n"
        "[End summary - respond briefly to recent messages below]\n"
    )


def test_bullet_count_is_capped():
    for count in (1, 5, 6, 7, 20):
        prefix = format_summaries_as_context(_summaries(count))
        assert len(_bullets(prefix)) == min(count, MAX_SUMMARIES_IN_CONTEXT)


def test_keeps_most_recent_in_order():
    prefix = format_summaries_as_context(_summaries(9))

    assert _bullets(prefix) == [f"• {h:02d}:00–{h + 1:02d}:00: topic {h}" for h in range(3, 9)]
    lines = prefix.splitlines()
    assert lines[0] == SUMMARY_HEADER
    assert lines[-1] == SUMMARY_FOOTER


def test_formatting_is_deterministic():
    summaries = _summaries(8)

    assert format_summaries_as_context(summaries) == format_summaries_as_context(summaries)
