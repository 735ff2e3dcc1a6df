"""
Exception handlers - map transport failures to the flat error envelope.

Every non-2xx response produced outside the calculate router still has the
``{"error": "<message>"}`` shape.
"""

from __future__ import annotations

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from calc_spine.api.schemas import INTERNAL_SERVER_ERROR, METHOD_NOT_ALLOWED, ErrorResponse
from calc_spine.core.logging import get_logger

log = get_logger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a ``{"error": message}`` JSON response."""
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors (404, 405) keep the flat envelope."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        response = error_response(exc.status_code, METHOD_NOT_ALLOWED)
    else:
        response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions - returns 500 with the generic message."""
    debug = request.app.state.settings.debug
    log.error(
        "unhandled_exception",
        path=request.url.path,
        error_type=type(exc).__name__,
        detail=str(exc) if debug else None,
        exc_info=exc,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR)
