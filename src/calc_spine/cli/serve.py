"""
CLI: ``calc-spine serve`` - start the API server.
"""

from __future__ import annotations

import typer
import uvicorn

from calc_spine.api.deps import get_settings
from calc_spine.cli.utils import console


def serve(
    host: str | None = typer.Option(None, "--host", "-h", help="Bind address (default from CALC_HOST)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port (default from CALC_PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on changes"),
    log_level: str | None = typer.Option(None, "--log-level", help="uvicorn log level"),
) -> None:
    """Start the calc-spine REST API server."""
    settings = get_settings()
    host = host or settings.host
    port = port or settings.port
    log_level = (log_level or settings.log_level).lower()

    console.print(f"[bold green]Starting calc-spine API[/bold green] on {host}:{port}")
    uvicorn.run(
        "calc_spine.api:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )
