"""
Infix to postfix conversion (shunting-yard).

Single left-to-right scan with one operator stack and one output list. The
input is expected to be whitespace-free; any character outside digits, ``.``
and ``+ - * / ( )`` is rejected.

Examples:
    >>> from calc_spine.expression.tokens import format_tokens
    >>> format_tokens(to_postfix("2+3*4").unwrap())
    '2 3 4 * +'
    >>> format_tokens(to_postfix("(2+3)*4").unwrap())
    '2 3 + 4 *'
    >>> to_postfix("(1+2").error.kind.value
    'MismatchedParenthesesAtEnd'
"""

from __future__ import annotations

from calc_spine.core.errors import (
    InvalidCharacterError,
    MismatchedParenthesesAtEndError,
    MismatchedParenthesesError,
)
from calc_spine.core.result import Err, Ok, Result
from calc_spine.expression.tokens import (
    NUMBER_CHARS,
    NumberToken,
    Operator,
    OperatorToken,
    Token,
)


def to_postfix(expr: str) -> Result[list[Token]]:
    """
    Convert a whitespace-free infix expression to postfix order.

    Numeric runs are emitted unvalidated (``1.2.3`` is one token and fails
    later at evaluation). Operators of equal precedence pop each other, so
    chains such as ``8-3-2`` associate to the left.

    Args:
        expr: Expression with all whitespace already removed

    Returns:
        Ok with the postfix token list, or Err carrying one of
        MismatchedParenthesesError, MismatchedParenthesesAtEndError,
        InvalidCharacterError
    """
    output: list[Token] = []
    stack: list[Operator] = []

    i = 0
    n = len(expr)
    while i < n:
        ch = expr[i]

        if ch in NUMBER_CHARS:
            start = i
            while i < n and expr[i] in NUMBER_CHARS:
                i += 1
            output.append(NumberToken(expr[start:i]))
            continue

        if ch == Operator.LPAREN.value:
            stack.append(Operator.LPAREN)

        elif ch == Operator.RPAREN.value:
            found = False
            while stack:
                top = stack.pop()
                if top is Operator.LPAREN:
                    found = True
                    break
                output.append(OperatorToken(top))
            if not found:
                return Err(MismatchedParenthesesError().with_context(expression=expr, token=ch))

        elif ch in "+-*/":
            incoming = Operator(ch)
            while stack:
                top = stack[-1]
                if top is Operator.LPAREN or incoming.precedence > top.precedence:
                    break
                output.append(OperatorToken(stack.pop()))
            stack.append(incoming)

        else:
            return Err(InvalidCharacterError(ch).with_context(expression=expr))

        i += 1

    while stack:
        top = stack.pop()
        if top.is_paren:
            return Err(MismatchedParenthesesAtEndError().with_context(expression=expr, token=top.value))
        output.append(OperatorToken(top))

    return Ok(output)


__all__ = ["to_postfix"]
