"""
Health check endpoints.

``GET /health``        Primary health - runs the engine self-check.
``GET /health/ready``  Readiness probe - 503 if the self-check fails.
``GET /health/live``   Liveness probe - always 200.

The engine has no external dependencies, so the only meaningful check is
that it still evaluates a known expression to the known value.
"""

from __future__ import annotations

import time
from datetime import UTC, datetime
from typing import Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from calc_spine.core.result import Ok
from calc_spine.expression import evaluate

_START_TIME = time.monotonic()

SELF_CHECK_EXPRESSION = "(2 + 3) * 4 - 10 / 2"
SELF_CHECK_EXPECTED = 15.0


class HealthResponse(BaseModel):
    """Response from health check endpoints."""

    status: Literal["healthy", "unhealthy"]
    service: str
    version: str
    uptime_s: float
    timestamp: str


def engine_self_check() -> bool:
    """Evaluate the self-check expression and compare with the known value."""
    match evaluate(SELF_CHECK_EXPRESSION):
        case Ok(value):
            return value == SELF_CHECK_EXPECTED
        case _:
            return False


def create_health_router(service_name: str, version: str, prefix: str = "/health") -> APIRouter:
    """Create an ``APIRouter`` with the standard health endpoints."""
    router = APIRouter(tags=["health"])

    def _make_response(healthy: bool) -> JSONResponse:
        body = HealthResponse(
            status="healthy" if healthy else "unhealthy",
            service=service_name,
            version=version,
            uptime_s=round(time.monotonic() - _START_TIME, 1),
            timestamp=datetime.now(UTC).isoformat(),
        )
        return JSONResponse(content=body.model_dump(), status_code=200 if healthy else 503)

    @router.get(prefix, response_model=HealthResponse)
    async def health() -> JSONResponse:
        """Primary health - runs the engine self-check."""
        return _make_response(engine_self_check())

    @router.get(f"{prefix}/ready", response_model=HealthResponse)
    async def readiness() -> JSONResponse:
        """Readiness probe - 503 if the engine self-check fails."""
        return _make_response(engine_self_check())

    @router.get(f"{prefix}/live", response_model=HealthResponse)
    async def liveness() -> JSONResponse:
        """Liveness probe - always 200."""
        return _make_response(True)

    return router
