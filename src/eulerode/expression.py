"""
Differential expression parsing and binding.

An expression is infix text such as ``x * y - sin(x)`` with exactly two
free variables. Parsing turns the text into a sympy expression; binding
checks it only references the declared variables and known functions, and
lambdifies it into a plain ``f(x, y) -> float`` callable.

Grammar
-------
Numbers, names, ``+ - * / % ^ **``, parentheses and commas between
function arguments. ``^`` is exponentiation. Anything else (attribute
access, subscripts, strings, keywords, ``!``, imaginary literals) is
rejected before sympy sees the text.

Context
-------
Constants and functions resolved by name while parsing:

    pi, e
    sqrt, exp, ln, log, abs, sin, cos, tan, asin, acos, atan, atan2,
    sinh, cosh, tanh, asinh, acosh, atanh, floor, ceil, signum, max, min

Evaluation is numpy-backed, so domain errors (``sqrt(-1)`` at run time,
``1/0``) and complex intermediate results produce NaN or inf instead of
raising.
"""

import io
import keyword
import logging
import tokenize
from typing import Callable, Mapping, Optional

import numpy as np
import sympy as sp
from sympy.core.function import AppliedUndef
from sympy.parsing.sympy_parser import auto_number, auto_symbol, convert_xor, parse_expr, repeated_decimals

from eulerode.config import (
    INVALID_DIFFERENTIAL_EXPRESSION,
    UNBOUND_DIFFERENTIAL_EXPRESSION,
    VAR_X,
    VAR_Y,
)
from eulerode.errors import InvalidDataError

logger = logging.getLogger(__name__)

# No lambda or factorial notation
TRANSFORMATIONS = (auto_symbol, repeated_decimals, auto_number, convert_xor)

ALLOWED_OPERATORS = frozenset({"+", "-", "*", "/", "%", "**", "^", "(", ")", ","})

_ALLOWED_TOKEN_TYPES = frozenset(
    {tokenize.NAME, tokenize.NUMBER, tokenize.OP, tokenize.NEWLINE, tokenize.NL, tokenize.ENDMARKER}
)

# Names the generated parser code refers to
_PARSER_GLOBALS = {
    "__builtins__": {},
    "Symbol": sp.Symbol,
    "Function": sp.Function,
    "Integer": sp.Integer,
    "Float": sp.Float,
    "Rational": sp.Rational,
}


def _at_least_one_argument(func):
    """Wrap a variadic sympy function so an empty call is an arity error."""

    def call(*args):
        if not args:
            raise TypeError(f"{func.__name__} expects at least one argument")
        return func(*args)

    call.__name__ = func.__name__
    return call


DEFAULT_CONTEXT: Mapping[str, object] = {
    "pi": sp.pi,
    "e": sp.E,
    "sqrt": sp.sqrt,
    "exp": sp.exp,
    "ln": sp.log,
    "log": sp.log,
    "abs": sp.Abs,
    "sin": sp.sin,
    "cos": sp.cos,
    "tan": sp.tan,
    "asin": sp.asin,
    "acos": sp.acos,
    "atan": sp.atan,
    "atan2": sp.atan2,
    "sinh": sp.sinh,
    "cosh": sp.cosh,
    "tanh": sp.tanh,
    "asinh": sp.asinh,
    "acosh": sp.acosh,
    "atanh": sp.atanh,
    "floor": sp.floor,
    "ceil": sp.ceiling,
    "signum": sp.sign,
    "max": _at_least_one_argument(sp.Max),
    "min": _at_least_one_argument(sp.Min),
}


def _check_tokens(text: str) -> None:
    """Reject any token outside the arithmetic grammar."""
    try:
        tokens = list(tokenize.generate_tokens(io.StringIO(text).readline))
    except (tokenize.TokenError, SyntaxError) as exc:
        logger.debug("Failed to tokenize expression %r: %s", text, exc)
        raise InvalidDataError(INVALID_DIFFERENTIAL_EXPRESSION) from exc

    for token in tokens:
        kind, value = token.type, token.string
        if (
            kind not in _ALLOWED_TOKEN_TYPES
            or (kind == tokenize.OP and value not in ALLOWED_OPERATORS)
            or (kind == tokenize.NAME and (keyword.iskeyword(value) or value.startswith("_")))
            or (kind == tokenize.NUMBER and value[-1] in "jJ")
        ):
            logger.debug("Rejected token %r in expression %r", value, text)
            raise InvalidDataError(INVALID_DIFFERENTIAL_EXPRESSION)


def parse_expression(text: str, context: Optional[Mapping[str, object]] = None) -> sp.Expr:
    """
    Parse expression text into a sympy expression.

    Parameters
    ----------
    text : str
        Infix expression, e.g. ``"x^2 + y"``.
    context : mapping, optional
        Name -> sympy constant/function. Defaults to DEFAULT_CONTEXT.

    Returns
    -------
    sympy.Expr
        Parsed expression. Unknown names are left as free symbols or
        undefined functions; :func:`bind` rejects them.

    Raises
    ------
    InvalidDataError
        If the text is empty, uses syntax outside the grammar, or is not a
        valid expression.
    """
    if context is None:
        context = DEFAULT_CONTEXT

    if not text or not text.strip():
        raise InvalidDataError(INVALID_DIFFERENTIAL_EXPRESSION)

    text = text.strip()
    _check_tokens(text)

    try:
        expr = parse_expr(
            text,
            local_dict=dict(context),
            global_dict=dict(_PARSER_GLOBALS),
            transformations=TRANSFORMATIONS,
        )
    except (SyntaxError, tokenize.TokenError, TypeError, ValueError, NameError, AttributeError) as exc:
        logger.debug("Failed to parse expression %r: %s", text, exc)
        raise InvalidDataError(INVALID_DIFFERENTIAL_EXPRESSION) from exc

    # Bare names such as "sin" or a tuple "x, y" parse but are not expressions
    if not isinstance(expr, sp.Expr):
        logger.debug("Expression %r parsed to non-expression %r", text, expr)
        raise InvalidDataError(INVALID_DIFFERENTIAL_EXPRESSION)

    logger.debug("Parsed expression %r as %s", text, expr)
    return expr


def _bind_failure(reason: str, x: Optional[float], y: Optional[float]) -> InvalidDataError:
    return InvalidDataError(f"{UNBOUND_DIFFERENTIAL_EXPRESSION} {reason}\n    x = {x}\n    y = {y}")


def bind(
    expr: sp.Expr,
    context: Optional[Mapping[str, object]] = None,
    var_x: str = VAR_X,
    var_y: str = VAR_Y,
    x: Optional[float] = None,
    y: Optional[float] = None,
) -> Callable[[float, float], float]:
    """
    Bind a parsed expression to two named variables.

    Parameters
    ----------
    expr : sympy.Expr
        Expression from :func:`parse_expression`.
    context : mapping, optional
        Context the expression was parsed with. Its names may not be used
        as variables. Defaults to DEFAULT_CONTEXT.
    var_x, var_y : str
        Names of the independent and dependent variables.
    x, y : float, optional
        Current values, reported in the error message on failure.

    Returns
    -------
    callable
        f(x, y) -> float. Complex results evaluate to NaN.

    Raises
    ------
    InvalidDataError
        If the expression references other free variables or unknown
        functions, is complex-valued, or cannot be compiled.

    Examples
    --------
    >>> f = bind(parse_expression("x * y + 1"))
    >>> f(2.0, 3.0)
    7.0
    """
    if context is None:
        context = DEFAULT_CONTEXT

    if var_x == var_y or var_x in context or var_y in context:
        raise _bind_failure(f"invalid variable names '{var_x}', '{var_y}'", x, y)

    sym_x = sp.Symbol(var_x)
    sym_y = sp.Symbol(var_y)

    unknown_vars = sorted(s.name for s in expr.free_symbols if s not in (sym_x, sym_y))
    if unknown_vars:
        raise _bind_failure(f"unknown variable(s) {', '.join(unknown_vars)}", x, y)

    unknown_funcs = sorted({str(fn.func) for fn in expr.atoms(AppliedUndef)})
    if unknown_funcs:
        raise _bind_failure(f"unknown function(s) {', '.join(unknown_funcs)}", x, y)

    if expr.has(sp.I):
        raise _bind_failure("complex-valued expression", x, y)

    # Division by zero folds to complex infinity, which numpy cannot print
    expr = expr.xreplace({sp.zoo: sp.nan})

    try:
        compiled = sp.lambdify((sym_x, sym_y), expr, modules="numpy")
    except (KeyError, NameError, SyntaxError, TypeError, ValueError) as exc:
        logger.debug("Failed to lambdify %s: %s", expr, exc)
        raise _bind_failure(f"cannot evaluate {expr}", x, y) from exc

    def f(x_value: float, y_value: float) -> float:
        with np.errstate(all="ignore"):
            try:
                value = compiled(np.float64(x_value), np.float64(y_value))
            except (TypeError, ValueError, OverflowError, ZeroDivisionError) as exc:
                raise _bind_failure(f"cannot evaluate {expr}", x_value, y_value) from exc

        if np.iscomplexobj(value):
            return float("nan")
        return float(value)

    logger.debug("Bound %s to (%s, %s)", expr, var_x, var_y)
    return f
