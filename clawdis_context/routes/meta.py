from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from ..config import Settings, get_settings
from ..models import HealthResponse, RootResponse

router = APIRouter(tags=["meta"])


@router.get("/health", response_model=HealthResponse)
# Return service health status for monitoring and load balancers
def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(ok=True, service="clawdis-context", version=settings.app_version)


@router.get("/meta", response_model=RootResponse)
# Return service metadata including available API endpoints
def meta(request: Request, settings: Settings = Depends(get_settings)) -> RootResponse:
    # Included routers are not always flattened into app.routes; the schema is.
    paths = request.app.openapi().get("paths", {})
    endpoints = sorted(path for path in paths if path.startswith("/api/"))
    return RootResponse(
        status="ok",
        service="clawdis-context",
        version=settings.app_version,
        endpoints=endpoints,
    )
