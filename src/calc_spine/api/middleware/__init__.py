"""API middleware and exception handlers."""

from calc_spine.api.middleware.errors import (
    http_exception_handler,
    unhandled_exception_handler,
)
from calc_spine.api.middleware.request_context import RequestContextMiddleware

__all__ = [
    "RequestContextMiddleware",
    "http_exception_handler",
    "unhandled_exception_handler",
]
