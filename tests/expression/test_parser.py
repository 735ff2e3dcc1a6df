"""Tests for calc_spine.expression.parser module."""

import pytest

from calc_spine.core.errors import (
    ErrorKind,
    InvalidCharacterError,
    MismatchedParenthesesAtEndError,
    MismatchedParenthesesError,
)
from calc_spine.expression.parser import to_postfix
from calc_spine.expression.tokens import NumberToken, Operator, OperatorToken, format_tokens


def postfix(expr: str) -> str:
    return format_tokens(to_postfix(expr).unwrap())


class TestToPostfix:
    """Test infix to postfix conversion."""

    @pytest.mark.parametrize(
        "infix, expected",
        [
            ("2", "2"),
            ("2+3", "2 3 +"),
            ("2+3*4", "2 3 4 * +"),
            ("(2+3)*4", "2 3 + 4 *"),
            ("2*3+4", "2 3 * 4 +"),
            ("10/2-3", "10 2 / 3 -"),
            ("((1))", "1"),
            ("1+(2-3)*4/5", "1 2 3 - 4 * 5 / +"),
        ],
    )
    def test_conversion(self, infix, expected):
        assert postfix(infix) == expected

    def test_equal_precedence_is_left_associative(self):
        """Equal precedence pops the stacked operator first."""
        assert postfix("8-3-2") == "8 3 - 2 -"
        assert postfix("8/4/2") == "8 4 / 2 /"
        assert postfix("2*3/4") == "2 3 * 4 /"

    def test_multi_digit_and_decimal_runs(self):
        tokens = to_postfix("12.5+300").unwrap()
        assert tokens[0] == NumberToken("12.5")
        assert tokens[1] == NumberToken("300")

    def test_malformed_number_is_not_rejected(self):
        """Numeric runs are not validated at parse time."""
        assert to_postfix("1.2.3").unwrap() == [NumberToken("1.2.3")]

    def test_token_types(self):
        tokens = to_postfix("1+2").unwrap()
        assert tokens == [NumberToken("1"), NumberToken("2"), OperatorToken(Operator.ADD)]

    def test_empty_input(self):
        assert to_postfix("").unwrap() == []

    def test_shape_errors_pass_the_parser(self):
        """Operand-count problems are left to the evaluator."""
        assert postfix("1+") == "1 +"
        assert postfix("()") == ""


class TestParserErrors:
    """Test parser failures."""

    def test_unmatched_close(self):
        result = to_postfix("1+2)")
        assert isinstance(result.error, MismatchedParenthesesError)
        assert result.error.kind == ErrorKind.MISMATCHED_PARENTHESES

    def test_close_before_open(self):
        assert isinstance(to_postfix(")(").error, MismatchedParenthesesError)

    def test_unclosed_open(self):
        result = to_postfix("(1+2")
        assert isinstance(result.error, MismatchedParenthesesAtEndError)
        assert result.error.kind == ErrorKind.MISMATCHED_PARENTHESES_AT_END

    @pytest.mark.parametrize("char", ["x", "^", "%", " ", "a"])
    def test_invalid_character(self, char):
        result = to_postfix(f"1{char}2")
        assert isinstance(result.error, InvalidCharacterError)
        assert result.error.char == char

    def test_first_error_wins(self):
        """The scan stops at the first failure."""
        assert isinstance(to_postfix("1)x").error, MismatchedParenthesesError)

    def test_error_context(self):
        err = to_postfix("2x").error
        assert err.context.expression == "2x"
        assert err.context.token == "x"
