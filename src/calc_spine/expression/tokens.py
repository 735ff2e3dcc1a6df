"""
Token types shared by the parser and the evaluator.

A token is a tagged variant: either a :class:`NumberToken` holding the raw
literal text, or an :class:`OperatorToken` holding one :class:`Operator`.
Order in the sequence is the only structure; tokens carry no position.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Operator(str, Enum):
    """Operator and grouping symbols accepted by the parser."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    LPAREN = "("
    RPAREN = ")"

    @property
    def precedence(self) -> int:
        """Binding strength: ``* /`` bind tighter than ``+ -``; parentheses 0."""
        return _PRECEDENCE.get(self, 0)

    @property
    def is_paren(self) -> bool:
        return self in (Operator.LPAREN, Operator.RPAREN)

    @property
    def is_arithmetic(self) -> bool:
        return self in _PRECEDENCE


_PRECEDENCE: dict[Operator, int] = {
    Operator.ADD: 1,
    Operator.SUB: 1,
    Operator.MUL: 2,
    Operator.DIV: 2,
}

# Characters that extend a numeric literal run
NUMBER_CHARS = frozenset("0123456789.")


@dataclass(frozen=True, slots=True)
class NumberToken:
    """A run of digits and ``.``; parsed to a float only at evaluation time."""

    literal: str

    def __str__(self) -> str:
        return self.literal


@dataclass(frozen=True, slots=True)
class OperatorToken:
    """An arithmetic operator in postfix position."""

    operator: Operator

    @property
    def precedence(self) -> int:
        return self.operator.precedence

    def __str__(self) -> str:
        return self.operator.value


Token = NumberToken | OperatorToken


def format_tokens(tokens: list[Token]) -> str:
    """Render a token sequence as space-separated text, e.g. ``2 3 4 * +``."""
    return " ".join(str(token) for token in tokens)


__all__ = [
    "NUMBER_CHARS",
    "NumberToken",
    "Operator",
    "OperatorToken",
    "Token",
    "format_tokens",
]
