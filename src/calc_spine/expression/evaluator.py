"""
Postfix evaluation and the top-level ``evaluate`` entry point.

Manifesto:
    The engine is a pure function of its input string. It holds no state
    between calls, performs no I/O and never raises for an expected failure:
    every problem comes back as ``Err`` with a CalcError whose ``kind`` names
    it. That makes it safe to call from any number of request handlers at
    once and trivial to test.

Architecture:
    ::

        "2 + 3 * 4"
            │  strip whitespace, length check     → ExpressionTooLongError
            ▼
        to_postfix("2+3*4")                        → parse errors
            │
            ▼
        [2, 3, 4, *, +]
            │  evaluate_postfix (float stack)      → evaluation errors
            ▼
        Ok(14.0)

Examples:
    >>> evaluate("2+3*4").unwrap()
    14.0
    >>> evaluate("8-3-2").unwrap()
    3.0
    >>> evaluate("1/0").error.kind.value
    'DivisionByZero'

Tags:
    expression-engine, shunting-yard, rpn, calc-spine

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from calc_spine.core.errors import (
    DivisionByZeroError,
    ExpressionTooLongError,
    InvalidExpressionError,
    InvalidExpressionFinalError,
    InvalidNumberError,
)
from calc_spine.core.result import Err, Ok, Result, from_bool, try_result_with
from calc_spine.expression.parser import to_postfix
from calc_spine.expression.tokens import NumberToken, Operator, Token

MAX_EXPRESSION_LENGTH = 1000

_APPLY: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUB: lambda a, b: a - b,
    Operator.MUL: lambda a, b: a * b,
    Operator.DIV: lambda a, b: a / b,
}


def parse_number(literal: str) -> Result[float]:
    """Parse a numeric literal as a finite 64-bit float.

    ``float()`` turns out-of-range literals into infinity; those are rejected
    like malformed ones. Overflow produced by arithmetic is left alone.
    """
    return try_result_with(
        lambda: float(literal),
        lambda e: InvalidNumberError(f"invalid number: {literal}", cause=e).with_context(token=literal),
    ).flat_map(
        lambda value: from_bool(
            math.isfinite(value),
            value,
            InvalidNumberError(f"number out of range: {literal}").with_context(token=literal),
        )
    )


def evaluate_postfix(tokens: Sequence[Token]) -> Result[float]:
    """
    Fold a postfix token sequence into a single float.

    For each operator the right operand is popped first (``b``), then the
    left (``a``), and ``a op b`` is pushed back.

    Returns:
        Ok with the value, or Err carrying InvalidNumberError,
        InvalidExpressionError, DivisionByZeroError or
        InvalidExpressionFinalError
    """
    stack: list[float] = []

    for token in tokens:
        if isinstance(token, NumberToken):
            match parse_number(token.literal):
                case Ok(value):
                    stack.append(value)
                case Err(error):
                    return Err(error)
            continue

        op = token.operator
        if len(stack) < 2:
            return Err(InvalidExpressionError().with_context(token=op.value, stack_depth=len(stack)))
        b = stack.pop()
        a = stack.pop()
        if op is Operator.DIV and b == 0:
            return Err(DivisionByZeroError())
        stack.append(_APPLY[op](a, b))

    if len(stack) != 1:
        return Err(InvalidExpressionFinalError().with_context(stack_depth=len(stack)))
    return Ok(stack[0])


def strip_whitespace(expr: str) -> str:
    """Remove every whitespace character from ``expr``."""
    return "".join(expr.split())


def evaluate(expr: str, *, max_length: int = MAX_EXPRESSION_LENGTH) -> Result[float]:
    """
    Evaluate an infix arithmetic expression.

    Args:
        expr: Expression such as ``"(2 + 3) * 4"``
        max_length: Limit on the whitespace-free length

    Returns:
        Ok with the float value, or Err with the first CalcError met by the
        length check, the parser or the evaluator, with the cleaned
        expression attached as context
    """
    cleaned = strip_whitespace(expr)
    if len(cleaned) > max_length:
        return Err(ExpressionTooLongError(len(cleaned), max_length))

    return (
        to_postfix(cleaned)
        .flat_map(evaluate_postfix)
        .map_err(lambda e: e.with_context(expression=cleaned))
    )


__all__ = [
    "MAX_EXPRESSION_LENGTH",
    "evaluate",
    "evaluate_postfix",
    "parse_number",
    "strip_whitespace",
]
