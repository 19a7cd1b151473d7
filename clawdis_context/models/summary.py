from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)


def _default_on_error(model: type, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo) -> Any:
    # Fields the compactor never reads fall back to their defaults.
    try:
        return handler(value)
    except ValidationError:
        return model.model_fields[info.field_name].get_default(call_default_factory=True)


class StoredSummary(BaseModel):
    """One rolling-window summary written by the summarization job."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    period: str
    hour_key: str = Field(default="", alias="hourKey")
    text: str
    message_count: int = Field(default=0, alias="messageCount")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    @field_validator("hour_key", "message_count", "created_at", mode="wrap")
    @classmethod
    def _lenient(cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo) -> Any:
        return _default_on_error(cls, value, handler, info)


class SummaryFile(BaseModel):
    """Per-session summary record, oldest summary first."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    summaries: List[StoredSummary] = Field(default_factory=list)
    last_summarized_at: Optional[datetime] = Field(default=None, alias="lastSummarizedAt")
    last_processed_line: int = Field(default=0, alias="lastProcessedLine")

    @field_validator("last_summarized_at", "last_processed_line", mode="wrap")
    @classmethod
    def _lenient(cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo) -> Any:
        return _default_on_error(cls, value, handler, info)
