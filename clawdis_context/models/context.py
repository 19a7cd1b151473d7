from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .summary import SummaryFile


class ContextRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    messages: List[Dict[str, Any]] = Field(default_factory=list)
    now: Optional[datetime] = None


class ContextResponse(BaseModel):
    ok: bool = True
    session_id: str
    summary_prefix: str = ""
    recent_messages: List[Dict[str, Any]] = Field(default_factory=list)
    was_summarized: bool = False
    summary_count: int = 0
    total_messages: int = 0
    estimated_tokens: int = 0


class SummaryFileResponse(BaseModel):
    ok: bool = True
    session_id: str
    summary_file: SummaryFile
