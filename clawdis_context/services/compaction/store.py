"""Read-only access to the per-session summary files written by the summarizer job."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ...logging_config import logger
from ...models import SummaryFile

SUMMARY_SUFFIX = ".summary.json"


class SummaryStore:
    """Loads ``<sessions_dir>/<session_id>.summary.json`` snapshots.

    Missing, unreadable and corrupt files (including ones caught mid-write)
    all read as ``None``; nothing is ever written back.
    """

    def __init__(self, sessions_dir: Path) -> None:
        self._sessions_dir = Path(sessions_dir)

    @property
    def sessions_dir(self) -> Path:
        return self._sessions_dir

    def path_for(self, session_id: str) -> Optional[Path]:
        candidate = session_id or ""
        unsafe = any(ch in candidate for ch in ("/", "\\", "\x00"))
        if not candidate or unsafe or candidate in {".", ".."}:
            logger.warning("rejected session id for summary lookup", extra={"session_id": session_id})
            return None
        return self._sessions_dir / f"{candidate}{SUMMARY_SUFFIX}"

    def load_summaries(self, session_id: str) -> Optional[SummaryFile]:
        path = self.path_for(session_id)
        if path is None:
            return None
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("no summary file for session", extra={"session_id": session_id})
            return None
        except (OSError, ValueError) as exc:
            logger.debug(
                "summary file unreadable",
                extra={"error": str(exc), "path": str(path)},
            )
            return None

        try:
            return SummaryFile.model_validate_json(raw)
        except ValidationError as exc:
            logger.debug(
                "summary file failed to parse",
                extra={"error": str(exc), "path": str(path)},
            )
            return None


__all__ = ["SUMMARY_SUFFIX", "SummaryStore"]
