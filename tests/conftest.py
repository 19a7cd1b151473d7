"""Shared pytest fixtures for testing."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

import pytest

from clawdis_context.services.compaction import ContextAssembler, SummaryStore

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


def make_summary(period: str, text: str = "", hour_key: str = "", count: int = 4) -> Dict[str, Any]:
    return {
        "period": period,
        "hourKey": hour_key or period,
        "text": text or f"discussed things during {period}",
        "messageCount": count,
        "createdAt": "2026-10-17T09:00:00.000Z",
    }


def write_summary_file(sessions_dir: Path, session_id: str, summaries: List[Dict[str, Any]], **extra: Any) -> Path:
    payload: Dict[str, Any] = {
        "summaries": summaries,
        "lastSummarizedAt": "2026-10-17T11:05:00.000Z",
        "lastProcessedLine": 120,
    }
    payload.update(extra)
    path = sessions_dir / f"{session_id}.summary.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def sessions_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "sessions"
    directory.mkdir()
    return directory


@pytest.fixture
def store(sessions_dir: Path) -> SummaryStore:
    return SummaryStore(sessions_dir)


@pytest.fixture
def assembler(store: SummaryStore) -> ContextAssembler:
    return ContextAssembler(store, keep_recent_minutes=60, clock=lambda: NOW)
