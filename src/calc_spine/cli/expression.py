"""
CLI: ``calc-spine eval`` and ``calc-spine postfix``.

Both run the engine in-process; no server is involved.
"""

from __future__ import annotations

import typer

from calc_spine.cli.utils import fail, output_json
from calc_spine.core.result import Err, Ok
from calc_spine.expression import evaluate, format_number, strip_whitespace, to_postfix
from calc_spine.expression.tokens import format_tokens


def eval_expression(
    expression: str = typer.Argument(..., help="Infix expression, e.g. '(2 + 3) * 4'"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Evaluate an arithmetic expression."""
    result = evaluate(expression)

    if as_json:
        payload = result.to_dict()
        if isinstance(result, Ok):
            payload["result"] = format_number(result.value)
        output_json(payload)
        if result.is_err():
            raise typer.Exit(code=1)
        return

    match result:
        case Ok(value):
            typer.echo(format_number(value))
        case Err(error):
            fail(error)


def postfix(
    expression: str = typer.Argument(..., help="Infix expression, e.g. '(2 + 3) * 4'"),
) -> None:
    """Print the postfix (reverse Polish) form of an expression."""
    match to_postfix(strip_whitespace(expression)):
        case Ok(tokens):
            typer.echo(format_tokens(tokens))
        case Err(error):
            fail(error)
