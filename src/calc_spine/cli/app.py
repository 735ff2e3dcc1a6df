"""
Root Typer application for the calc-spine CLI.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version

import typer
from typer import Typer

app = Typer(
    name="calc-spine",
    help="calc-spine - arithmetic expression evaluation service.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        try:
            v = pkg_version("calc-spine")
        except PackageNotFoundError:
            from calc_spine import __version__ as v
        typer.echo(f"calc-spine {v}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """calc-spine CLI - evaluate expressions and run the API server."""


# ── Command registration ─────────────────────────────────────────────────

from calc_spine.cli.expression import eval_expression, postfix  # noqa: E402
from calc_spine.cli.serve import serve  # noqa: E402

app.command("eval")(eval_expression)
app.command("postfix")(postfix)
app.command("serve")(serve)
