"""
Tests for differential expression parsing and binding.
"""

import math
import warnings

import numpy as np
import pytest

from eulerode.errors import InvalidDataError
from eulerode.expression import DEFAULT_CONTEXT, bind, parse_expression


def compile_expression(text):
    return bind(parse_expression(text))


class TestParseExpression:
    """Tests for parse_expression."""

    @pytest.mark.parametrize("text", ["y", "x + y", "x*y - sin(x)", "(x + 1) ^ 2", "2", "-y / (1 + x**2)"])
    def test_valid_expressions(self, text):
        """Well-formed infix text should parse."""
        parse_expression(text)

    @pytest.mark.parametrize("text", ["", "   ", "x +", "(x", "x y )", "*", "x, y", "sin", "x < y"])
    def test_invalid_expressions(self, text):
        """Malformed text should raise InvalidDataError."""
        with pytest.raises(InvalidDataError, match="differential expression"):
            parse_expression(text)

    def test_arity_mismatch(self):
        """Calling a unary function with two arguments is rejected."""
        with pytest.raises(InvalidDataError):
            parse_expression("sin(x, y)")

    def test_unknown_names_become_symbols(self):
        """Names outside the context are left for bind to reject."""
        expr = parse_expression("x + z")
        assert {s.name for s in expr.free_symbols} == {"x", "z"}

    def test_context_names(self):
        """The context should hold exactly the documented constants and functions."""
        expected = {
            "pi", "e", "sqrt", "exp", "ln", "log", "abs", "sin", "cos", "tan", "asin", "acos", "atan",
            "atan2", "sinh", "cosh", "tanh", "asinh", "acosh", "atanh", "floor", "ceil", "signum",
            "max", "min",
        }
        assert set(DEFAULT_CONTEXT) == expected


class TestBind:
    """Tests for bind and evaluation."""

    def test_identity(self):
        f = compile_expression("y")
        assert f(0.0, 1.5) == 1.5

    def test_arithmetic(self):
        f = compile_expression("x * y + 1")
        assert f(2.0, 3.0) == 7.0

    def test_caret_is_power(self):
        f = compile_expression("x^2 + y")
        assert f(3.0, 1.0) == 10.0

    def test_constants(self, atol):
        f = compile_expression("pi * x + e * y")
        np.testing.assert_allclose(f(1.0, 1.0), math.pi + math.e, atol=atol)

    @pytest.mark.parametrize(
        ("text", "x", "y", "expected"),
        [
            ("sin(x) + cos(y)", 0.0, 0.0, 1.0),
            ("sqrt(x) * abs(y)", 4.0, -3.0, 6.0),
            ("exp(0) + ln(e)", 0.0, 0.0, 2.0),
            ("max(x, y) - min(x, y)", 2.0, 5.0, 3.0),
            ("floor(x) + ceil(y)", 1.7, 1.2, 3.0),
            ("signum(x) * signum(y)", -2.0, 3.0, -1.0),
            ("atan2(y, x)", 1.0, 1.0, math.pi / 4),
        ],
    )
    def test_context_functions(self, text, x, y, expected, atol):
        """Standard functions should evaluate numerically."""
        f = compile_expression(text)
        np.testing.assert_allclose(f(x, y), expected, atol=atol)

    def test_constant_expression(self):
        """An expression with no variables is still a valid slope."""
        f = compile_expression("2")
        assert f(10.0, -4.0) == 2.0

    def test_returns_float(self):
        f = compile_expression("x + y")
        assert type(f(1.0, 2.0)) is float

    def test_undeclared_variable(self):
        """x + z with variables {x, y} should name z."""
        with pytest.raises(InvalidDataError, match="z"):
            compile_expression("x + z")

    def test_failure_reports_current_values(self):
        """The message should include the x and y in effect."""
        with pytest.raises(InvalidDataError) as excinfo:
            bind(parse_expression("q * y"), x=0.5, y=2.0)

        message = str(excinfo.value)
        assert "x = 0.5" in message
        assert "y = 2.0" in message

    def test_unknown_function(self):
        with pytest.raises(InvalidDataError, match="foo"):
            compile_expression("foo(x) + y")

    def test_complex_constant_rejected(self):
        with pytest.raises(InvalidDataError, match="complex"):
            compile_expression("sqrt(-1) * y")

    def test_custom_variable_names(self):
        """Variables can be renamed, e.g. t and u."""
        f = bind(parse_expression("t * u"), var_x="t", var_y="u")
        assert f(2.0, 4.0) == 8.0

    def test_custom_names_reject_defaults(self):
        with pytest.raises(InvalidDataError, match="x"):
            bind(parse_expression("x * u"), var_x="t", var_y="u")

    def test_variable_may_not_shadow_context(self):
        with pytest.raises(InvalidDataError):
            bind(parse_expression("x"), var_x="pi", var_y="y")

    def test_domain_errors_give_nan(self):
        """Out-of-domain evaluation yields NaN instead of raising."""
        f = compile_expression("sqrt(x)")
        assert math.isnan(f(-1.0, 0.0))

    def test_division_by_zero_gives_inf(self):
        f = compile_expression("1 / x")
        assert math.isinf(f(0.0, 0.0))

    def test_no_builtins_reachable(self):
        """Python builtins are not part of the context."""
        with pytest.raises(InvalidDataError):
            compile_expression("open(x)")


class TestGrammarRestrictions:
    """Text outside the arithmetic grammar is rejected before parsing."""

    @pytest.mark.parametrize(
        "text",
        [
            "x.__class__",
            "x.__class__.__new__.__globals__['__builtins__']['print']('hi') or y",
            "(x).real + y",
            "[x][0] + y",
            "'x' + y",
            "lambda: x",
            "x if y else 1",
            "__import__(x)",
            "_x + y",
            "2j * y",
            "x! + y",
            "x # comment",
        ],
    )
    def test_rejected_syntax(self, text):
        with pytest.raises(InvalidDataError, match="differential expression"):
            parse_expression(text)

    def test_attribute_access_has_no_side_effects(self, capsys):
        with pytest.raises(InvalidDataError):
            parse_expression("x.__class__.__new__.__globals__['__builtins__']['print']('side effect') or y")

        assert "side effect" not in capsys.readouterr().out

    @pytest.mark.parametrize("text", ["2.5 * y", ".5 + x", "1e-3 * x", "x % 2", "x ** 2 - y ^ 2"])
    def test_numbers_and_operators_allowed(self, text):
        parse_expression(text)


class TestEvaluationEdgeCases:
    """Expressions that parse but misbehave when compiled or evaluated."""

    def test_factorial_is_unknown(self):
        """factorial is not part of the context."""
        with pytest.raises(InvalidDataError, match="factorial"):
            compile_expression("factorial(x) + y")

    def test_division_by_zero_constant_gives_nan(self):
        """1/0 folds to complex infinity; evaluation gives NaN instead of failing."""
        f = compile_expression("y + 1/0")
        assert math.isnan(f(0.0, 1.0))

    def test_complex_intermediate_gives_nan(self):
        """A real root of a negative number is not taken silently."""
        f = compile_expression("y + (-8)^(1/3)")
        assert math.isnan(f(0.0, 1.0))

    def test_complex_result_does_not_warn(self):
        f = compile_expression("y + (-8)^(1/3)")
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            f(0.0, 1.0)

    @pytest.mark.parametrize("text", ["max()", "min() + y", "y + max()"])
    def test_empty_max_min(self, text):
        """max and min need at least one argument."""
        with pytest.raises(InvalidDataError):
            parse_expression(text)

    def test_single_argument_max(self):
        f = compile_expression("max(y)")
        assert f(0.0, 3.0) == 3.0
