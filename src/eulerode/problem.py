"""
A fully validated Euler approximation problem.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, Tuple

import sympy as sp

from eulerode.expression import bind
from eulerode.integrators.euler import EulerRecord, derive_step_size, euler_iterate
from eulerode.prompts import (
    Console,
    read_bounds,
    read_expression,
    read_initial_value,
    read_rounding_precision,
    read_step_count,
)


@dataclass(frozen=True)
class EulerProblem:
    """
    Inputs for one run of forward Euler on dy/dx = f(x, y).

    Attributes
    ----------
    bounds : tuple of float
        Interval (a, b), b >= a.
    steps : float
        Number of steps N (whole, positive).
    precision : float
        Decimal places the step size is rounded to (whole, positive).
    expression : sympy.Expr
        Parsed right-hand side f(x, y).
    initial_value : float
        y(a).
    """

    bounds: Tuple[float, float]
    steps: float
    precision: float
    expression: sp.Expr
    initial_value: float

    @property
    def step_size(self) -> float:
        """Rounded step size h."""
        return derive_step_size(self.bounds, self.steps, self.precision)

    def slope(self) -> Callable[[float, float], float]:
        """Bind the expression to (x, y); failures report x = a, y = y(a)."""
        return bind(self.expression, x=self.bounds[0], y=self.initial_value)

    def records(self) -> Iterator[EulerRecord]:
        """Run the iteration, yielding one record per step."""
        return euler_iterate(self.slope(), self.bounds[0], self.initial_value, self.step_size, int(self.steps))


def read_problem(console: Console) -> EulerProblem:
    """Prompt for every input in order, stopping at the first invalid one."""
    bounds = read_bounds(console)
    steps = read_step_count(console)
    precision = read_rounding_precision(console)
    expression = read_expression(console)
    initial_value = read_initial_value(console)

    return EulerProblem(
        bounds=bounds,
        steps=steps,
        precision=precision,
        expression=expression,
        initial_value=initial_value,
    )
