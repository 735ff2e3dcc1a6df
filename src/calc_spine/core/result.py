"""
Result envelope for consistent success/failure handling.

Provides a typed Result[T] pattern: operations return ``Ok[T]`` on success or
``Err[T]`` carrying an exception on failure. The expression engine reports
every expected failure this way, so callers handle both paths explicitly and
no parse error escapes as an unexpected exception.

Manifesto:
    - **Explicit over Implicit:** No hidden exceptions that callers might miss
    - **Functional composition:** Chain parse and evaluate with flat_map
      instead of nested try/except blocks
    - **Typed failures:** Err carries a CalcError with a stable ErrorKind

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                     Result[T]                                │
        │                    (Type Alias)                              │
        ├─────────────────┬─────────────────┬─────────────────────────┤
        │     Ok[T]       │     Err[T]      │     Utilities           │
        │   (Success)     │   (Failure)     │                         │
        ├─────────────────┼─────────────────┼─────────────────────────┤
        │ • value: T      │ • error: Exc    │ • try_result_with()     │
        │ • map()         │ • map_err()     │ • from_bool()           │
        │ • flat_map()    │ • unwrap_or()   │                         │
        │ • unwrap()      │ • to_dict()     │                         │
        └─────────────────┴─────────────────┴─────────────────────────┘

Examples:
    >>> from calc_spine.core.result import Ok, Err, Result
    >>> def divide(a: float, b: float) -> Result[float]:
    ...     if b == 0:
    ...         return Err(ValueError("Division by zero"))
    ...     return Ok(a / b)
    >>> match divide(10, 2):
    ...     case Ok(value):
    ...         print(f"Result: {value}")
    ...     case Err(error):
    ...         print(f"Error: {error}")
    Result: 5.0

Guardrails:
    ❌ DON'T: Use unwrap() without checking is_ok() first
    ✅ DO: Use unwrap_or() or pattern matching for safe extraction

    ❌ DON'T: Raise exceptions inside map/flat_map functions
    ✅ DO: Return Err from flat_map if the operation can fail

Tags:
    result-pattern, error-handling, functional-programming, calc-spine

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from calc_spine.core.errors import CalcError


T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """
    A value produced without error.

    Examples:
        >>> Ok(7.0).map(lambda v: v * 2).unwrap()
        14.0
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """Apply ``f`` to the value."""
        return Ok(f(self.value))

    def flat_map(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """Continue with a step that may itself fail."""
        return f(self.value)

    def map_err(self, f: Callable[[Exception], Exception]) -> Result[T]:
        return self

    def to_dict(self) -> dict[str, Any]:
        return {"ok": True, "value": self.value}

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[T]):
    """
    A failure; the error travels unchanged through ``map`` and ``flat_map``,
    so the first failure in a chain is the one the caller sees.

    Examples:
        >>> Err(ValueError("x")).flat_map(lambda v: Ok(v + 1)).is_err()
        True
    """

    error: Exception

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raise the carried error."""
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, f: Callable[[T], U]) -> Result[U]:
        return Err(self.error)

    def flat_map(self, f: Callable[[T], Result[U]]) -> Result[U]:
        return Err(self.error)

    def map_err(self, f: Callable[[Exception], Exception]) -> Result[T]:
        """Replace the error, e.g. to attach context."""
        return Err(f(self.error))

    def to_dict(self) -> dict[str, Any]:
        """Serializable form; CalcErrors contribute their own ``to_dict``."""
        if isinstance(self.error, CalcError):
            error = self.error.to_dict()
        else:
            error = {"error_type": type(self.error).__name__, "message": str(self.error)}
        return {"ok": False, "error": error}

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for Result
Result = Ok[T] | Err[T]


# =============================================================================
# RESULT CONSTRUCTORS
# =============================================================================


def try_result_with(
    f: Callable[[], T],
    error_mapper: Callable[[Exception], Exception] | None = None,
) -> Result[T]:
    """
    Execute function and map exceptions to custom error types.

    Bridges exception-raising calls (``float()``, third-party code) into the
    Result world, converting the caught exception into a CalcError subclass.

    Examples:
        >>> from calc_spine.core.errors import InvalidNumberError
        >>> result = try_result_with(
        ...     lambda: float("1.2.3"),
        ...     lambda e: InvalidNumberError(cause=e),
        ... )
        >>> result.error.kind.value
        'InvalidNumber'

    Args:
        f: Zero-argument callable that may raise exceptions
        error_mapper: Optional function to transform exceptions

    Returns:
        Ok[T] if f() succeeds, Err with mapped exception if f() raises
    """
    try:
        return Ok(f())
    except Exception as e:
        if error_mapper:
            return Err(error_mapper(e))
        return Err(e)


def from_bool(
    condition: bool,
    ok_value: T,
    error: Exception,
) -> Result[T]:
    """
    Create Result from boolean condition.

    Examples:
        >>> from_bool(True, "2+2", ValueError("empty")).unwrap()
        '2+2'
        >>> from_bool(False, "", ValueError("empty")).is_err()
        True
    """
    if condition:
        return Ok(ok_value)
    return Err(error)


__all__ = [
    # Types
    "Result",
    "Ok",
    "Err",
    # Constructors
    "try_result_with",
    "from_bool",
]
