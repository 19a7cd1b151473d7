from __future__ import annotations

from fastapi import APIRouter

from .meta import router as meta_router
from .sessions import router as sessions_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(meta_router)
api_router.include_router(sessions_router)

__all__ = ["api_router"]
