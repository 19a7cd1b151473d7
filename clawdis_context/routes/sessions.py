from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from ..models import ContextRequest, ContextResponse, SummaryFileResponse
from ..services import ContextAssembler, estimate_context_tokens, get_context_assembler

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("/{session_id}/summaries", response_model=SummaryFileResponse)
# Expose the stored rolling summaries for a session as last written by the summarizer
def session_summaries(
    session_id: str,
    assembler: ContextAssembler = Depends(get_context_assembler),
) -> SummaryFileResponse:
    summary_file = assembler.store.load_summaries(session_id)
    if summary_file is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No summaries stored for session {session_id}",
        )
    return SummaryFileResponse(session_id=session_id, summary_file=summary_file)


@router.post("/{session_id}/context", response_model=ContextResponse)
# Preview the compacted context the agent would receive for the supplied history
def session_context(
    session_id: str,
    payload: ContextRequest,
    assembler: ContextAssembler = Depends(get_context_assembler),
) -> ContextResponse:
    context = assembler.assemble(session_id, payload.messages, now=payload.now)
    return ContextResponse(
        session_id=session_id,
        summary_prefix=context.summary_prefix,
        recent_messages=context.recent_messages,
        was_summarized=context.was_summarized,
        summary_count=context.summary_count,
        total_messages=len(payload.messages),
        estimated_tokens=estimate_context_tokens(context),
    )


__all__ = ["router"]
