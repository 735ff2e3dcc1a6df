"""Tests for calc_spine.core.errors module."""

import pytest

from calc_spine.core.errors import (
    CalcError,
    DivisionByZeroError,
    ErrorCategory,
    ErrorContext,
    ErrorKind,
    EvaluationError,
    ExpressionRejectedError,
    ExpressionTooLongError,
    InvalidCharacterError,
    InvalidExpressionError,
    InvalidExpressionFinalError,
    InvalidNumberError,
    MismatchedParenthesesAtEndError,
    MismatchedParenthesesError,
    ParseError,
    categorize_error,
)


class TestErrorKind:
    """Test ErrorKind enum."""

    def test_kind_values(self):
        """Kinds serialize to their wire names."""
        assert ErrorKind.MISMATCHED_PARENTHESES.value == "MismatchedParentheses"
        assert ErrorKind.MISMATCHED_PARENTHESES_AT_END.value == "MismatchedParenthesesAtEnd"
        assert ErrorKind.INVALID_CHARACTER.value == "InvalidCharacter"
        assert ErrorKind.INVALID_NUMBER.value == "InvalidNumber"
        assert ErrorKind.INVALID_EXPRESSION.value == "InvalidExpression"
        assert ErrorKind.INVALID_EXPRESSION_FINAL.value == "InvalidExpressionFinal"
        assert ErrorKind.DIVISION_BY_ZERO.value == "DivisionByZero"
        assert ErrorKind.TOO_LONG.value == "TooLong"

    def test_eight_kinds(self):
        assert len(ErrorKind) == 8

    def test_is_str(self):
        """ErrorKind compares equal to its string value."""
        assert ErrorKind.DIVISION_BY_ZERO == "DivisionByZero"


class TestErrorContext:
    """Test ErrorContext dataclass."""

    def test_empty_to_dict(self):
        assert ErrorContext().to_dict() == {}

    def test_drops_unset_fields(self):
        ctx = ErrorContext(expression="1+", metadata={"stack_depth": 1})
        assert ctx.to_dict() == {"expression": "1+", "stack_depth": 1}


class TestCalcError:
    """Test CalcError base class."""

    def test_defaults(self):
        err = CalcError()
        assert err.message == "Calculation failed"
        assert err.kind is None
        assert err.category == ErrorCategory.INTERNAL
        assert err.cause is None

    def test_custom_message(self):
        err = CalcError("boom")
        assert str(err) == "boom"

    def test_overrides(self):
        err = CalcError("x", kind=ErrorKind.TOO_LONG, category=ErrorCategory.PARSE)
        assert err.kind == ErrorKind.TOO_LONG
        assert err.category == ErrorCategory.PARSE

    def test_cause_is_chained(self):
        cause = ValueError("bad float")
        err = CalcError("wrapped", cause=cause)
        assert err.__cause__ is cause

    def test_with_context_known_fields(self):
        """with_context sets named context fields."""
        err = CalcError().with_context(expression="1/0", token="/")
        assert err.context.expression == "1/0"
        assert err.context.token == "/"

    def test_with_context_extra_goes_to_metadata(self):
        err = CalcError().with_context(stack_depth=3)
        assert err.context.metadata == {"stack_depth": 3}

    def test_with_context_returns_self(self):
        err = CalcError()
        assert err.with_context(expression="1") is err

    def test_to_dict(self):
        err = DivisionByZeroError(cause=ZeroDivisionError()).with_context(expression="1/0")
        d = err.to_dict()
        assert d["error_type"] == "DivisionByZeroError"
        assert d["kind"] == "DivisionByZero"
        assert d["message"] == "division by zero"
        assert d["category"] == "EVALUATION"
        assert d["context"] == {"expression": "1/0"}
        assert "cause" in d

    def test_to_dict_omits_empty_context(self):
        assert "context" not in CalcError().to_dict()

    def test_repr(self):
        assert repr(CalcError("boom")) == "CalcError('boom', category=INTERNAL)"


class TestSubclasses:
    """Each subclass fixes its kind and category."""

    @pytest.mark.parametrize(
        "error, kind, category, parent",
        [
            (MismatchedParenthesesError(), ErrorKind.MISMATCHED_PARENTHESES, ErrorCategory.PARSE, ParseError),
            (
                MismatchedParenthesesAtEndError(),
                ErrorKind.MISMATCHED_PARENTHESES_AT_END,
                ErrorCategory.PARSE,
                ParseError,
            ),
            (InvalidCharacterError("x"), ErrorKind.INVALID_CHARACTER, ErrorCategory.PARSE, ParseError),
            (ExpressionTooLongError(1001, 1000), ErrorKind.TOO_LONG, ErrorCategory.PARSE, ParseError),
            (InvalidNumberError(), ErrorKind.INVALID_NUMBER, ErrorCategory.EVALUATION, EvaluationError),
            (InvalidExpressionError(), ErrorKind.INVALID_EXPRESSION, ErrorCategory.EVALUATION, EvaluationError),
            (
                InvalidExpressionFinalError(),
                ErrorKind.INVALID_EXPRESSION_FINAL,
                ErrorCategory.EVALUATION,
                EvaluationError,
            ),
            (DivisionByZeroError(), ErrorKind.DIVISION_BY_ZERO, ErrorCategory.EVALUATION, EvaluationError),
        ],
    )
    def test_kind_and_category(self, error, kind, category, parent):
        assert error.kind == kind
        assert error.category == category
        assert isinstance(error, parent)
        assert isinstance(error, CalcError)

    def test_default_messages(self):
        assert MismatchedParenthesesError().message == "mismatched parentheses"
        assert MismatchedParenthesesAtEndError().message == "mismatched parentheses in the end"
        assert InvalidExpressionFinalError().message == "invalid expression final"
        assert DivisionByZeroError().message == "division by zero"

    def test_invalid_character_carries_char(self):
        err = InvalidCharacterError("x")
        assert err.char == "x"
        assert err.context.token == "x"
        assert err.message == "invalid character: x"
        assert err.to_dict()["char"] == "x"

    def test_too_long_carries_sizes(self):
        err = ExpressionTooLongError(1500, 1000)
        assert err.length == 1500
        assert err.limit == 1000
        assert "1500" in err.message

    def test_expression_rejected(self):
        err = ExpressionRejectedError()
        assert err.kind is None
        assert err.category == ErrorCategory.VALIDATION
        assert err.message == "Expression is not valid"


class TestCategorizeError:
    """Test categorize_error helper."""

    def test_calc_error(self):
        assert categorize_error(DivisionByZeroError()) == ErrorCategory.EVALUATION
        assert categorize_error(MismatchedParenthesesError()) == ErrorCategory.PARSE

    def test_builtin_errors(self):
        assert categorize_error(ZeroDivisionError()) == ErrorCategory.EVALUATION
        assert categorize_error(ValueError()) == ErrorCategory.VALIDATION

    def test_unknown(self):
        assert categorize_error(RuntimeError()) == ErrorCategory.UNKNOWN
