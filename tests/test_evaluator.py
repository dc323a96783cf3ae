"""
Tests for the expression evaluator.

Covers: single digits, compound expressions, malformed input, bracket-family
matching, division semantics, nesting limits and the result wrapper.
"""

import pytest

from bracketcalc.config import EvaluatorConfig, max_depth_ceiling
from bracketcalc.evaluator import (
    ArithmeticFault,
    EvalResult,
    ExpressionError,
    MalformedExpression,
    evaluate,
    is_well_formed,
    parse,
    try_evaluate,
)


# =========================================================================
# Well-formed expressions
# =========================================================================


class TestEvaluatorDigits:
    """A bare digit is a complete expression."""

    @pytest.mark.parametrize("digit", list("0123456789"))
    def test_every_digit(self, digit):
        assert evaluate(digit) == int(digit)

    def test_eight(self):
        assert evaluate("8") == 8


class TestEvaluatorCompound:
    """Fully-parenthesized expressions."""

    @pytest.mark.parametrize("expression,expected", [
        ("(1+2)", 3),
        ("(9-4)", 5),
        ("(3*4)", 12),
        ("(8/2)", 4),
        ("((8+7)*2)", 30),
        ("(4-(7-1))", -2),
        ("((1+1)*(2*2))", 8),
        ("((1+9)*(2-5))", -30),
    ])
    def test_known_values(self, expression, expected):
        assert evaluate(expression) == expected

    def test_nested_negative_product(self):
        # -9 * -30; the sign must come out positive
        assert evaluate("((0-9)*((1+9)*(2-5)))") == 270

    def test_mixed_families(self):
        assert evaluate("{[1+2]*(3-1)}") == 6

    def test_parse_is_evaluate(self):
        assert parse("((8+7)*2)") == 30

    def test_repeated_evaluation_is_stable(self):
        expression = "((1+9)*(2-5))"
        assert evaluate(expression) == evaluate(expression) == -30


class TestEvaluatorDivision:
    """Integer division truncates toward zero; zero divisors are arithmetic faults."""

    def test_truncates_positive(self):
        assert evaluate("(7/2)") == 3

    def test_truncates_negative_dividend(self):
        assert evaluate("((0-7)/2)") == -3

    def test_truncates_negative_divisor(self):
        assert evaluate("(7/(0-2))") == -3

    def test_both_negative(self):
        assert evaluate("((0-7)/(0-2))") == 3

    def test_division_by_zero(self):
        with pytest.raises(ArithmeticFault, match="Division by zero"):
            evaluate("(1/0)")

    def test_division_by_computed_zero(self):
        with pytest.raises(ArithmeticFault):
            evaluate("(1/(2-2))")

    def test_division_by_zero_is_not_malformed(self):
        with pytest.raises(ExpressionError) as excinfo:
            evaluate("(1/0)")
        assert not isinstance(excinfo.value, MalformedExpression)


# =========================================================================
# Malformed expressions
# =========================================================================


class TestEvaluatorMalformed:
    """Inputs that must be rejected."""

    @pytest.mark.parametrize("expression", [
        ")8+)1(())",
        "(8+())",
        "-1",
        "(   5    -7)",
        "108",
        "(8)",
        "(+8)",
    ])
    def test_reference_cases(self, expression):
        with pytest.raises(MalformedExpression):
            evaluate(expression)

    @pytest.mark.parametrize("expression", ["", "12", "(8", "(1)", "1+2", "(1+)", "(1+2"])
    def test_impossible_lengths(self, expression):
        with pytest.raises(MalformedExpression):
            evaluate(expression)

    @pytest.mark.parametrize("expression", ["x", "+", "(", " "])
    def test_single_non_digit(self, expression):
        with pytest.raises(MalformedExpression, match="not a digit"):
            evaluate(expression)

    def test_leading_digit_in_compound(self):
        with pytest.raises(MalformedExpression, match="opening bracket"):
            evaluate("1+2+3")

    def test_trailing_junk(self):
        with pytest.raises(MalformedExpression, match="closing bracket"):
            evaluate("(1+2)x")

    def test_excess_closer(self):
        with pytest.raises(MalformedExpression, match="unmatched"):
            evaluate("((1+2))+3)")

    def test_unclosed_opener(self):
        with pytest.raises(MalformedExpression, match="no operator"):
            evaluate("((1+2)")

    def test_two_operators(self):
        with pytest.raises(MalformedExpression):
            evaluate("(1+2+3)")

    def test_embedded_space(self):
        with pytest.raises(MalformedExpression):
            evaluate("(1 +2)")

    def test_error_carries_reason_and_expression(self):
        with pytest.raises(MalformedExpression) as excinfo:
            evaluate("(8)")
        assert excinfo.value.reason
        assert excinfo.value.expression == "(8)"

    def test_non_string_input(self):
        with pytest.raises(TypeError):
            evaluate(8)


# =========================================================================
# Bracket matching policy
# =========================================================================


class TestBracketMatching:
    """Strict matching by default, lenient on request."""

    def test_strict_rejects_mismatched_outer_pair(self, strict_config):
        with pytest.raises(MalformedExpression):
            evaluate("(8+1]", strict_config)

    def test_strict_rejects_mismatched_inner_pair(self, strict_config):
        with pytest.raises(MalformedExpression, match="expected"):
            evaluate("([1+2)*3)", strict_config)

    def test_default_is_strict(self):
        with pytest.raises(MalformedExpression):
            evaluate("(8+1]")

    def test_lenient_accepts_mismatched_outer_pair(self, lenient_config):
        assert evaluate("(8+1]", lenient_config) == 9

    def test_lenient_accepts_mismatched_inner_pair(self, lenient_config):
        assert evaluate("([1+2)*3}", lenient_config) == 9

    def test_lenient_still_rejects_excess_closer(self, lenient_config):
        with pytest.raises(MalformedExpression):
            evaluate(")8+)1(())", lenient_config)

    @pytest.mark.parametrize("opener,closer", [("(", ")"), ("{", "}"), ("[", "]")])
    def test_outer_family_does_not_change_value(self, opener, closer):
        assert evaluate(f"{opener}(8+7)*2{closer}") == 30


# =========================================================================
# Nesting limit
# =========================================================================


def _nested(depth: int) -> str:
    expression = "1"
    for _ in range(depth):
        expression = f"({expression}+1)"
    return expression


class TestNestingLimit:
    """Deep nesting fails fast instead of exhausting the call stack."""

    def test_within_limit(self):
        assert evaluate(_nested(100)) == 101

    def test_exceeds_default_limit(self):
        with pytest.raises(MalformedExpression, match="max_depth"):
            evaluate(_nested(1000))

    def test_custom_limit(self):
        config = EvaluatorConfig(max_depth=2)
        assert evaluate(_nested(2), config) == 3
        with pytest.raises(MalformedExpression, match="max_depth=2"):
            evaluate(_nested(3), config)

    def test_limit_of_one_allows_flat_expression(self):
        config = EvaluatorConfig(max_depth=1)
        assert evaluate("(1+2)", config) == 3
        with pytest.raises(MalformedExpression):
            evaluate("((1+2)*3)", config)

    def test_deep_input_at_ceiling_fails_fast(self):
        config = EvaluatorConfig(max_depth=max_depth_ceiling())
        deep = _nested(2000)
        with pytest.raises(MalformedExpression, match="max_depth"):
            evaluate(deep, config)
        assert isinstance(try_evaluate(deep, config).error, MalformedExpression)
        assert not is_well_formed(deep, config)

    def test_limit_above_ceiling_rejected(self):
        with pytest.raises(ValueError, match="ceiling"):
            EvaluatorConfig(max_depth=5000)


# =========================================================================
# Result wrapper and helpers
# =========================================================================


class TestTryEvaluate:
    """try_evaluate never raises evaluation errors."""

    def test_ok(self):
        result = try_evaluate("((8+7)*2)")
        assert isinstance(result, EvalResult)
        assert result.ok
        assert result.value == 30
        assert result.unwrap() == 30

    def test_malformed(self):
        result = try_evaluate("(8)")
        assert not result.ok
        assert result.value is None
        assert isinstance(result.error, MalformedExpression)
        with pytest.raises(MalformedExpression):
            result.unwrap()

    def test_arithmetic_fault(self):
        result = try_evaluate("(5/0)")
        assert not result.ok
        assert isinstance(result.error, ArithmeticFault)

    def test_respects_config(self, lenient_config):
        assert try_evaluate("(8+1]", lenient_config).value == 9


class TestIsWellFormed:

    def test_valid(self):
        assert is_well_formed("((8+7)*2)")

    def test_malformed(self):
        assert not is_well_formed("(8+())")

    def test_division_by_zero_is_well_formed(self):
        assert is_well_formed("(1/0)")

    def test_division_by_zero_does_not_hide_later_syntax_error(self):
        assert not is_well_formed("((1/0)+(8))")

    def test_lenient_config(self, lenient_config):
        assert not is_well_formed("(8+1]")
        assert is_well_formed("(8+1]", lenient_config)


class TestEvalResult:
    """A result carries exactly one of value or error."""

    def test_requires_fields(self):
        with pytest.raises(TypeError):
            EvalResult()

    def test_rejects_empty(self):
        with pytest.raises(ValueError, match="exactly one"):
            EvalResult(value=None, error=None)

    def test_rejects_both(self):
        with pytest.raises(ValueError, match="exactly one"):
            EvalResult(value=3, error=MalformedExpression())

    def test_zero_value_is_ok(self):
        result = EvalResult(value=0, error=None)
        assert result.ok
        assert result.unwrap() == 0
