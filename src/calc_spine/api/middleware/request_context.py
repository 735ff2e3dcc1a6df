"""Request context middleware - request ID, log binding and timing.

Every request gets an ``X-Request-ID`` (echoed from the caller or freshly
generated) bound into the structlog context for the lifetime of the request,
and an ``X-Process-Time-Ms`` header on the way out. Exceptions escaping the
app are turned into the 500 envelope here, so those responses carry both
headers too.
"""

from __future__ import annotations

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from calc_spine.api.middleware.errors import unhandled_exception_handler
from calc_spine.core.logging import LogContext, get_logger

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time-Ms"

log = get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Attach a request ID and timing to every request/response cycle."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        async with LogContext(request_id=request_id):
            start = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception as exc:
                response = await unhandled_exception_handler(request, exc)
            elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
            log.info(
                "request_completed",
                method=request.method,
                path=request.url.path,
                status=response.status_code,
                elapsed_ms=elapsed_ms,
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[PROCESS_TIME_HEADER] = str(elapsed_ms)
        return response
