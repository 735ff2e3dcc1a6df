"""
API settings.

Parameters that govern the REST transport, logging and the expression
length limit. All values can be overridden via environment variables
prefixed with ``CALC_`` (``CALC_PORT``, ``CALC_LOG_FORMAT``, ...).
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CalcAPISettings(BaseSettings):
    """Settings for the calc-spine REST API.

    Order of precedence (highest → lowest):
        1. Environment variables (``CALC_API_PREFIX``, etc.)
        2. ``.env`` file
        3. Defaults below
    """

    # ── Server ───────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8080, description="Bind port")
    debug: bool = Field(default=False, description="Include exception text in 500 logs")

    # ── Logging ──────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "console"] = "console"

    # ── API ──────────────────────────────────────────────────────────────
    api_prefix: str = Field(default="/api/v1", description="URL prefix for all endpoints")
    api_title: str = Field(default="calc-spine API", description="OpenAPI title")
    api_version: str = Field(default="0.1.0", description="OpenAPI version string")

    # ── Engine ───────────────────────────────────────────────────────────
    max_expression_length: int = Field(
        default=1000,
        ge=1,
        description="Maximum expression length after whitespace removal",
    )

    model_config = SettingsConfigDict(
        env_prefix="CALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
