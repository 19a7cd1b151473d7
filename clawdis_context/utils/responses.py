"""Response utilities."""

from typing import Any, Optional

from fastapi.responses import JSONResponse


def error_response(message: str, *, status_code: int, detail: Optional[Any] = None) -> JSONResponse:
    """Create the ``{"ok": false, "error": ...}`` body shared by every error path."""
    payload = {"ok": False, "error": message}
    if detail:
        payload["detail"] = detail
    return JSONResponse(payload, status_code=status_code)
