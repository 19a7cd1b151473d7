"""Unit tests for timestamp extraction and the recency window."""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from clawdis_context.services.compaction.recency import partition_messages, partition_recent
from clawdis_context.services.compaction.timestamps import coerce_timestamp, extract_timestamp

from conftest import NOW


class TestCoerceTimestamp:
    def test_datetime_naive_is_utc(self):
        assert coerce_timestamp(datetime(2026, 1, 1, 10, 0)) == datetime(2026, 1, 1, 10, 0, tzinfo=timezone.utc)

    def test_epoch_milliseconds(self):
        millis = int(NOW.timestamp() * 1000)
        assert coerce_timestamp(millis) == NOW
        assert coerce_timestamp(float(millis)) == NOW

    def test_iso_strings(self):
        assert coerce_timestamp("2026-10-17T12:00:00.000Z") == NOW
        assert coerce_timestamp("2026-10-17 14:00:00+02:00") == NOW
        assert coerce_timestamp("2026-10-17T12:00:00") == NOW

    @pytest.mark.parametrize("value", ["yesterday", "", True, float("nan"), 10**20, [], {}])
    def test_invalid_values(self, value):
        assert coerce_timestamp(value) is None


class TestExtractTimestamp:
    def test_field_order(self):
        message = {"ts": "2026-10-17T08:00:00Z", "timestamp": "2026-10-17T09:00:00Z"}
        assert extract_timestamp(message).hour == 9

    def test_falls_through_invalid_candidates(self):
        message = {"timestamp": "not a date", "createdAt": "2026-10-17T07:30:00Z"}
        assert extract_timestamp(message) == datetime(2026, 10, 17, 7, 30, tzinfo=timezone.utc)

    def test_attribute_style_message(self):
        message = SimpleNamespace(content="hi", created_at=NOW)
        assert extract_timestamp(message) == NOW

    def test_missing(self):
        assert extract_timestamp({"content": "hi"}) is None
        assert extract_timestamp(None) is None


class TestPartitionRecent:
    def test_cutoff_is_inclusive(self):
        cutoff = NOW - timedelta(minutes=60)
        at_cutoff = {"content": "edge", "timestamp": cutoff}
        just_before = {"content": "old", "timestamp": cutoff - timedelta(microseconds=1)}

        recent = partition_recent([just_before, at_cutoff], NOW, 60)

        assert recent == [at_cutoff]

    def test_untimestamped_messages_are_kept(self):
        undated = {"content": "who knows"}
        garbled = {"content": "bad", "timestamp": "???"}
        ancient = {"content": "old", "timestamp": NOW - timedelta(days=3)}

        recent = partition_recent([undated, ancient, garbled], NOW, 5)

        assert recent == [undated, garbled]

    def test_preserves_order_and_reports_older(self):
        messages = [
            {"id": 1, "timestamp": NOW - timedelta(minutes=90)},
            {"id": 2, "timestamp": NOW - timedelta(minutes=30)},
            {"id": 3},
            {"id": 4, "timestamp": NOW - timedelta(minutes=61)},
            {"id": 5, "timestamp": NOW},
        ]

        partition = partition_messages(messages, NOW, 60)

        assert [m["id"] for m in partition.recent] == [2, 3, 5]
        assert [m["id"] for m in partition.older] == [1, 4]
        assert partition.cutoff == NOW - timedelta(minutes=60)

    def test_naive_now_is_utc(self):
        message = {"timestamp": "2026-10-17T11:30:00Z"}
        assert partition_recent([message], NOW.replace(tzinfo=None), 60) == [message]

    def test_negative_window_rejected(self):
        with pytest.raises(ValueError):
            partition_recent([], NOW, -1)
