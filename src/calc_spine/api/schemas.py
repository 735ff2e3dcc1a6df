"""
Request and response envelopes for the calculate endpoint.

The wire format is deliberately flat: ``{"expression": ...}`` in,
``{"result": ...}`` or ``{"error": ...}`` out. Error bodies never carry the
internal ErrorKind.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Generic messages returned to callers
EXPRESSION_NOT_VALID = "Expression is not valid"
INTERNAL_SERVER_ERROR = "Internal server error"
METHOD_NOT_ALLOWED = "Method not allowed"


class CalculateRequest(BaseModel):
    """Body of ``POST /calculate``. A missing or null expression decodes as empty."""

    model_config = ConfigDict(extra="ignore")

    expression: str = Field(default="", description="Infix expression, e.g. '(2 + 3) * 4'")

    @field_validator("expression", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        """A JSON null leaves the expression empty."""
        return "" if value is None else value


class CalculateResponse(BaseModel):
    """Successful calculation."""

    result: str = Field(description="Evaluated value, shortest round-trip form")


class ErrorResponse(BaseModel):
    """Failed request. ``error`` is one of the generic messages above."""

    error: str
