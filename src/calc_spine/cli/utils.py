"""
CLI utility helpers - output formatting.
"""

from __future__ import annotations

import json
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from calc_spine.core.errors import CalcError

console = Console()
err_console = Console(stderr=True)


def output_json(payload: dict[str, Any]) -> None:
    """Print a payload as pretty JSON on stdout."""
    console.print_json(json.dumps(payload, default=str))


def fail(error: Exception) -> None:
    """Print an error to stderr and exit with code 1."""
    if isinstance(error, CalcError):
        code = error.kind.value if error.kind else error.category.value
        msg = error.message
    else:
        code = type(error).__name__
        msg = str(error)
    err_console.print(f"[bold red]Error[/bold red] ({code}): {escape(msg)}")
    raise typer.Exit(code=1)
