from .context import ContextRequest, ContextResponse, SummaryFileResponse
from .meta import HealthResponse, RootResponse
from .summary import StoredSummary, SummaryFile

__all__ = [
    "ContextRequest",
    "ContextResponse",
    "SummaryFileResponse",
    "HealthResponse",
    "RootResponse",
    "StoredSummary",
    "SummaryFile",
]
