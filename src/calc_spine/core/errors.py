"""
Structured error types for calc-spine.

Provides a typed hierarchy of expression errors with the metadata the HTTP
boundary and the CLI need to log, classify and report a failed calculation.

Every failure the expression engine can produce has exactly one ErrorKind and
one CalcError subclass. The engine never raises these for expected failures;
it returns them inside ``Err`` (see :mod:`calc_spine.core.result`). Callers
that prefer exceptions can ``unwrap()`` and catch ``CalcError``.

Manifesto:
    - **One kind per failure:** ErrorKind is the stable, testable identity
    - **Category for routing:** PARSE vs EVALUATION vs VALIDATION
    - **Rich context:** Errors carry the expression and offending token
    - **Boundary erasure:** HTTP collapses kinds into one message, logs keep them

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────────┐
        │                         CalcError                               │
        │            (kind, category, context, cause)                     │
        ├─────────────────────────────────────────────────────────────────┤
        │                                                                 │
        │  PARSE                          EVALUATION                      │
        │  ─────                          ──────────                      │
        │  MismatchedParenthesesError     InvalidNumberError              │
        │  MismatchedParenthesesAtEnd..   InvalidExpressionError          │
        │  InvalidCharacterError          InvalidExpressionFinalError     │
        │  ExpressionTooLongError         DivisionByZeroError             │
        │                                                                 │
        │  VALIDATION                                                     │
        │  ──────────                                                     │
        │  ExpressionRejectedError  (boundary only, never from the core)  │
        └─────────────────────────────────────────────────────────────────┘

Examples:
    >>> error = DivisionByZeroError()
    >>> error.kind
    <ErrorKind.DIVISION_BY_ZERO: 'DivisionByZero'>
    >>> error.category
    <ErrorCategory.EVALUATION: 'EVALUATION'>
    >>> error.with_context(expression="1/0").to_dict()["context"]
    {'expression': '1/0'}

Guardrails:
    ❌ DON'T: Compare error messages in tests
    ✅ DO: Compare ``error.kind``

    ❌ DON'T: Leak ``kind`` or ``message`` into HTTP responses
    ✅ DO: Log them and return the generic envelope

Tags:
    error-handling, exception-hierarchy, error-context, calc-spine

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Identity of every failure the expression engine can return."""

    MISMATCHED_PARENTHESES = "MismatchedParentheses"
    MISMATCHED_PARENTHESES_AT_END = "MismatchedParenthesesAtEnd"
    INVALID_CHARACTER = "InvalidCharacter"
    INVALID_NUMBER = "InvalidNumber"
    INVALID_EXPRESSION = "InvalidExpression"
    INVALID_EXPRESSION_FINAL = "InvalidExpressionFinal"
    DIVISION_BY_ZERO = "DivisionByZero"
    TOO_LONG = "TooLong"


class ErrorCategory(str, Enum):
    """
    Error categories for classification and log routing.

    Attributes:
        PARSE: Rejected while scanning or reordering the expression
        EVALUATION: Rejected while folding the postfix sequence
        VALIDATION: Rejected at the boundary before reaching the engine
        INTERNAL: Bugs, unexpected state
        UNKNOWN: Uncategorized errors
    """

    PARSE = "PARSE"
    EVALUATION = "EVALUATION"
    VALIDATION = "VALIDATION"
    INTERNAL = "INTERNAL"
    UNKNOWN = "UNKNOWN"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Only set fields end up in ``to_dict()``, so log lines stay small.

    Attributes:
        expression: The expression being evaluated (whitespace removed)
        token: The token or character that triggered the failure
        metadata: Additional key-value pairs
    """

    expression: str | None = None
    token: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result: dict[str, Any] = {}
        for key in ("expression", "token"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class CalcError(Exception):
    """
    Base exception for all calc-spine errors.

    Subclasses set ``default_kind`` and ``default_category``; instances may
    override either through keyword arguments.

    Examples:
        >>> err = CalcError("boom")
        >>> err.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> err.kind is None
        True
    """

    default_kind: ErrorKind | None = None
    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_message: str = "Calculation failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        kind: ErrorKind | None = None,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.kind = kind or self.default_kind
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> CalcError:
        """
        Add context to this error (fluent API).

        Usage:
            return Err(DivisionByZeroError().with_context(expression=expr))
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "kind": self.kind.value if self.kind else None,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# PARSE ERRORS
# =============================================================================


class ParseError(CalcError):
    """Error while converting infix to postfix."""

    default_category = ErrorCategory.PARSE
    default_message = "Could not parse expression"


class MismatchedParenthesesError(ParseError):
    """A ``)`` had no matching ``(`` on the operator stack."""

    default_kind = ErrorKind.MISMATCHED_PARENTHESES
    default_message = "mismatched parentheses"


class MismatchedParenthesesAtEndError(ParseError):
    """A ``(`` was still open when the scan finished."""

    default_kind = ErrorKind.MISMATCHED_PARENTHESES_AT_END
    default_message = "mismatched parentheses in the end"


class InvalidCharacterError(ParseError):
    """The scan met a character that is neither a digit, ``.``, nor an operator."""

    default_kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, char: str, **kwargs: Any):
        super().__init__(f"invalid character: {char}", **kwargs)
        self.char = char
        if self.context.token is None:
            self.context.token = char

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["char"] = self.char
        return result


class ExpressionTooLongError(ParseError):
    """The whitespace-free expression exceeds the length limit."""

    default_kind = ErrorKind.TOO_LONG

    def __init__(self, length: int, limit: int, **kwargs: Any):
        super().__init__(f"expression too long: {length} > {limit}", **kwargs)
        self.length = length
        self.limit = limit


# =============================================================================
# EVALUATION ERRORS
# =============================================================================


class EvaluationError(CalcError):
    """Error while folding a postfix sequence into a value."""

    default_category = ErrorCategory.EVALUATION
    default_message = "Could not evaluate expression"


class InvalidNumberError(EvaluationError):
    """A numeric literal does not parse as a float (e.g. ``1.2.3``)."""

    default_kind = ErrorKind.INVALID_NUMBER
    default_message = "invalid number"


class InvalidExpressionError(EvaluationError):
    """An operator found fewer than two operands on the stack."""

    default_kind = ErrorKind.INVALID_EXPRESSION
    default_message = "invalid expression"


class InvalidExpressionFinalError(EvaluationError):
    """The stack did not hold exactly one value after the last token."""

    default_kind = ErrorKind.INVALID_EXPRESSION_FINAL
    default_message = "invalid expression final"


class DivisionByZeroError(EvaluationError):
    """Division with a zero divisor."""

    default_kind = ErrorKind.DIVISION_BY_ZERO
    default_message = "division by zero"


# =============================================================================
# BOUNDARY ERRORS
# =============================================================================


class ExpressionRejectedError(CalcError):
    """
    Input refused at the boundary before reaching the engine.

    Raised for empty or whitespace-only input and for characters outside the
    accepted set. Carries no ErrorKind because the engine never saw it.
    """

    default_category = ErrorCategory.VALIDATION
    default_message = "Expression is not valid"


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def categorize_error(error: Exception) -> ErrorCategory:
    """Get the category of an error."""
    if isinstance(error, CalcError):
        return error.category
    if isinstance(error, ZeroDivisionError):
        return ErrorCategory.EVALUATION
    if isinstance(error, ValueError):
        return ErrorCategory.VALIDATION
    return ErrorCategory.UNKNOWN


__all__ = [
    # Enums
    "ErrorKind",
    "ErrorCategory",
    # Context
    "ErrorContext",
    # Base
    "CalcError",
    # Parse
    "ParseError",
    "MismatchedParenthesesError",
    "MismatchedParenthesesAtEndError",
    "InvalidCharacterError",
    "ExpressionTooLongError",
    # Evaluation
    "EvaluationError",
    "InvalidNumberError",
    "InvalidExpressionError",
    "InvalidExpressionFinalError",
    "DivisionByZeroError",
    # Boundary
    "ExpressionRejectedError",
    # Utilities
    "categorize_error",
]
