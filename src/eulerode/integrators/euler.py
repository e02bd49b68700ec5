"""
Forward Euler integration method.

The simplest explicit integration scheme. First-order accurate.

For dy/dx = f(x, y) on [a, b] with N steps of size h:

    w_0 = y(a)
    w_i = w_{i-1} + h * f(x_{i-1}, w_{i-1}),    x_i = x_{i-1} + h
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, Tuple

import numpy as np

from eulerode.utils.rounding import round_to

logger = logging.getLogger(__name__)


# =============================================================================
# Records
# =============================================================================


@dataclass(frozen=True)
class EulerRecord:
    """
    One emitted Euler step.

    Attributes
    ----------
    index : int
        1-based step index i.
    value : float
        New approximation w_i.
    previous_x : float
        x_{i-1}, the abscissa the slope was evaluated at.
    previous_y : float
        y_{i-1}, the approximation that produced w_i.
    """

    index: int
    value: float
    previous_x: float
    previous_y: float

    @property
    def previous_index(self) -> int:
        """Index of the point the step started from."""
        return self.index - 1


# =============================================================================
# Step Size
# =============================================================================


def derive_step_size(bounds: Tuple[float, float], step_count: float, precision: float) -> float:
    """
    Compute the rounded step size h = round((b - a) / N, p).

    Parameters
    ----------
    bounds : tuple of float
        Interval (a, b) with b >= a.
    step_count : float
        Number of steps N (positive, integral).
    precision : float
        Decimal places p (positive, integral).

    Returns
    -------
    float
        Step size used for every iteration.

    Examples
    --------
    >>> derive_step_size((0.0, 1.0), 4, 4)
    0.25
    >>> derive_step_size((0.0, 1.0), 3, 2)
    0.33
    """
    lower, upper = bounds
    step_size = (upper - lower) / step_count
    return round_to(step_size, int(precision))


# =============================================================================
# Integration
# =============================================================================


def euler_step(f: Callable[[float, float], float], x: float, y: float, h: float) -> float:
    """
    Perform one forward Euler step.

    Computes: y_{k+1} = y_k + h * f(x_k, y_k)

    Parameters
    ----------
    f : callable
        Slope function with signature f(x, y) -> dy/dx.
    x : float
        Current abscissa.
    y : float
        Current approximation.
    h : float
        Step size.

    Returns
    -------
    float
        Approximation at x + h.

    Examples
    --------
    >>> euler_step(lambda x, y: -y, 0.0, 1.0, 0.1)
    0.9
    """
    with np.errstate(all="ignore"):
        y_next = np.float64(y) + np.float64(h) * np.float64(f(x, y))

    return float(y_next)


def euler_iterate(
    f: Callable[[float, float], float],
    x0: float,
    y0: float,
    h: float,
    steps: int,
) -> Iterator[EulerRecord]:
    """
    Lazily run the Euler recurrence, yielding one record per step.

    Emits exactly ``steps`` records indexed 1..steps. Each record pairs the
    new approximation with the x and y it was computed from. NaN or inf
    values are carried forward unchanged; the first one is logged.

    Parameters
    ----------
    f : callable
        Slope function with signature f(x, y) -> dy/dx.
    x0 : float
        Lower bound a.
    y0 : float
        Initial value y(a).
    h : float
        Step size.
    steps : int
        Number of steps N.

    Yields
    ------
    EulerRecord
    """
    current_x = float(x0)
    current_y = float(y0)
    reported = False

    for index in range(1, int(steps) + 1):
        next_y = euler_step(f, current_x, current_y, h)

        if not reported and not np.isfinite(next_y):
            logger.warning("Non-finite value %s at step %d (x = %s); propagating.", next_y, index, current_x)
            reported = True

        yield EulerRecord(index=index, value=next_y, previous_x=current_x, previous_y=current_y)

        current_x += h
        current_y = next_y


def euler_integrate(
    f: Callable[[float, float], float],
    x0: float,
    y0: float,
    h: float,
    steps: int,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Integrate over multiple steps, returning the full trajectory.

    Parameters
    ----------
    f : callable
        Slope function with signature f(x, y) -> dy/dx.
    x0 : float
        Lower bound a.
    y0 : float
        Initial value y(a).
    h : float
        Step size.
    steps : int
        Number of steps N.

    Returns
    -------
    xs : np.ndarray, shape (N+1,)
        Abscissae x_0..x_N.
    ys : np.ndarray, shape (N+1,)
        Approximations w_0..w_N including the initial value.
    """
    N = int(steps)

    xs = np.zeros(N + 1)
    ys = np.zeros(N + 1)
    xs[0] = x0
    ys[0] = y0

    for record in euler_iterate(f, x0, y0, h, N):
        xs[record.index] = record.previous_x + h
        ys[record.index] = record.value

    return xs, ys
