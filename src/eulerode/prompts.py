"""
Interactive input acquisition and validation.

Each reader prints a prompt, reads one line through a :class:`Console`,
converts it and checks the field's domain constraint. Any failure raises
immediately; there is no retry. The exception message is the text shown
to the user.

Input order
-----------
lower bound, upper bound, step count, rounding precision, differential
expression, initial value.
"""

import logging
import sys
from typing import Callable, Optional, TextIO, Tuple, TypeVar

import sympy as sp

from eulerode.config import (
    CANNOT_PARSE,
    FLOAT_ROUND_PLACES,
    FLOAT_STEP_COUNT,
    INVALID_INPUT,
    NEGATIVE_ZERO_ROUND_PLACES,
    NEGATIVE_ZERO_STEP_COUNT,
    PROMPT_EXPRESSION,
    PROMPT_INITIAL_VALUE,
    PROMPT_LOWER_BOUND,
    PROMPT_ROUND_PLACES,
    PROMPT_STEP_COUNT,
    PROMPT_UPPER_BOUND,
    SMALLER_UPPER_BOUND,
)
from eulerode.errors import InvalidDataError, InvalidInputError
from eulerode.expression import parse_expression
from eulerode.utils.rounding import is_whole_number

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Console:
    """
    Line-oriented user interaction over a pair of text streams.

    Parameters
    ----------
    stdin : TextIO, optional
        Stream to read answers from. Defaults to sys.stdin.
    stdout : TextIO, optional
        Stream prompts and results are written to. Defaults to sys.stdout.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str = "") -> None:
        """Write one line of output."""
        print(text, file=self.stdout, flush=True)

    def read_line(self) -> str:
        """
        Read one line, without surrounding whitespace.

        Raises
        ------
        InvalidInputError
            If the stream is exhausted or cannot be read.
        """
        try:
            line = self.stdin.readline()
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            logger.debug("Reading from %r failed: %s", self.stdin, exc)
            raise InvalidInputError(INVALID_INPUT) from exc

        if not line:
            logger.debug("Input stream %r reached end of file", self.stdin)
            raise InvalidInputError(INVALID_INPUT)

        return line.strip()


# =============================================================================
# Generic Reader
# =============================================================================


def read_value(console: Console, cast: Callable[[str], T] = float, error_message: str = CANNOT_PARSE) -> T:
    """
    Read one line and convert it with ``cast``.

    Parameters
    ----------
    console : Console
        Source of the line.
    cast : callable, optional
        Conversion applied to the trimmed text. Default float.
    error_message : str, optional
        Message used when the conversion fails.

    Returns
    -------
    T
        Converted value.

    Raises
    ------
    InvalidInputError
        If the line cannot be read.
    InvalidDataError
        If ``cast`` rejects the text.
    """
    text = console.read_line()
    try:
        return cast(text)
    except (TypeError, ValueError) as exc:
        logger.debug("Could not convert %r with %s: %s", text, getattr(cast, "__name__", cast), exc)
        raise InvalidDataError(error_message) from exc


def _read_positive_whole(console: Console, prompt: str, fraction_message: str, sign_message: str) -> float:
    console.write(prompt)
    value = read_value(console)

    if not is_whole_number(value):
        raise InvalidDataError(fraction_message)
    if value <= 0.0:
        raise InvalidDataError(sign_message)

    return value


# =============================================================================
# Field Readers
# =============================================================================


def read_bounds(console: Console) -> Tuple[float, float]:
    """Read the interval [a, b]; the upper bound may not be below the lower."""
    console.write(PROMPT_LOWER_BOUND)
    lower_bound = read_value(console)
    console.write(PROMPT_UPPER_BOUND)
    upper_bound = read_value(console)

    if upper_bound < lower_bound:
        raise InvalidDataError(SMALLER_UPPER_BOUND)

    return lower_bound, upper_bound


def read_step_count(console: Console) -> float:
    """Read N; must be a whole number greater than zero."""
    return _read_positive_whole(console, PROMPT_STEP_COUNT, FLOAT_STEP_COUNT, NEGATIVE_ZERO_STEP_COUNT)


def read_rounding_precision(console: Console) -> float:
    """Read the number of decimal places for the step size."""
    return _read_positive_whole(console, PROMPT_ROUND_PLACES, FLOAT_ROUND_PLACES, NEGATIVE_ZERO_ROUND_PLACES)


def read_expression(console: Console) -> sp.Expr:
    """Read and parse the differential expression dy/dx = f(x, y)."""
    console.write(PROMPT_EXPRESSION)
    return parse_expression(read_value(console, cast=str))


def read_initial_value(console: Console) -> float:
    """Read y(a)."""
    console.write(PROMPT_INITIAL_VALUE)
    return read_value(console)
