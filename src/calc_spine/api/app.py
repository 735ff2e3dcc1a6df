"""
FastAPI application factory.

``create_app()`` wires middleware, routers, error handlers, and
lifespan events into a single ``FastAPI`` instance.

Manifesto:
    The app factory is the single composition root. Middleware, routers
    and exception handlers are all wired here so the expression engine
    never touches ``FastAPI`` directly.

Tags:
    calc-spine, api, app-factory, composition-root, FastAPI

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from calc_spine.api.deps import get_settings
from calc_spine.api.middleware import (
    RequestContextMiddleware,
    http_exception_handler,
    unhandled_exception_handler,
)
from calc_spine.api.settings import CalcAPISettings
from calc_spine.core.logging import configure_logging, get_logger

SERVICE_NAME = "calc-spine"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan - startup / shutdown hooks."""
    log = get_logger("calc_spine.api")
    settings: CalcAPISettings = app.state.settings
    log.info(
        "calc-spine API starting",
        version=app.version,
        prefix=settings.api_prefix,
        max_expression_length=settings.max_expression_length,
    )
    yield
    log.info("calc-spine API shutting down")


def create_app(
    *,
    settings: CalcAPISettings | None = None,
) -> FastAPI:
    """Build and return a fully-configured FastAPI application.

    Parameters
    ----------
    settings : CalcAPISettings | None
        Override settings (useful for testing).  When ``None`` the cached
        singleton from :func:`get_settings` is used.
    """

    settings = settings or get_settings()

    configure_logging(
        level=settings.log_level,
        json_format=settings.log_format == "json",
        service=SERVICE_NAME,
    )

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
        docs_url=f"{settings.api_prefix}/docs",
        redoc_url=f"{settings.api_prefix}/redoc",
        openapi_url=f"{settings.api_prefix}/openapi.json",
    )

    # Stash settings on app state for middleware and handler access
    app.state.settings = settings

    # Override DI so endpoints use the provided settings
    app.dependency_overrides[get_settings] = lambda: settings

    # ── Middleware ───────────────────────────────────────────────────
    app.add_middleware(RequestContextMiddleware)

    # ── Exception handlers ───────────────────────────────────────────
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # ── Routers ──────────────────────────────────────────────────────
    from calc_spine.api.routers import calculate
    from calc_spine.api.routers.health import create_health_router

    # Health endpoints at root level (no prefix) for container healthchecks
    app.include_router(create_health_router(SERVICE_NAME, version=settings.api_version))
    app.include_router(calculate.router, prefix=settings.api_prefix)

    return app
