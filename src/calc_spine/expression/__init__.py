"""
Arithmetic expression engine.

Tokenizes, reorders (shunting-yard) and evaluates expressions made of
digits, ``+ - * /`` and parentheses over 64-bit floats.

Usage:
    from calc_spine.expression import evaluate

    match evaluate("(2 + 3) * 4"):
        case Ok(value):
            ...
        case Err(error):
            error.kind  # ErrorKind
"""

from calc_spine.expression.evaluator import (
    MAX_EXPRESSION_LENGTH,
    evaluate,
    evaluate_postfix,
    parse_number,
    strip_whitespace,
)
from calc_spine.expression.formatting import format_number
from calc_spine.expression.parser import to_postfix
from calc_spine.expression.tokens import (
    NumberToken,
    Operator,
    OperatorToken,
    Token,
    format_tokens,
)

__all__ = [
    "MAX_EXPRESSION_LENGTH",
    "NumberToken",
    "Operator",
    "OperatorToken",
    "Token",
    "evaluate",
    "evaluate_postfix",
    "format_number",
    "format_tokens",
    "parse_number",
    "strip_whitespace",
    "to_postfix",
]
