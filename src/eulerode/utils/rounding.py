"""
Decimal rounding helpers.

The step size is rounded once and the rounded value drives the whole
iteration, so rounding must be deterministic and symmetric about zero.
"""

import numpy as np


def round_to(number: float, decimal_places: int) -> float:
    """
    Round a number to a fixed amount of decimal places.

    Scales by 10^decimal_places, rounds half away from zero, and rescales.

    Parameters
    ----------
    number : float
        Value to round.
    decimal_places : int
        Number of digits to keep after the decimal point.

    Returns
    -------
    float
        Rounded value.

    Examples
    --------
    >>> round_to(0.125, 2)
    0.13
    >>> round_to(-0.125, 2)
    -0.13
    >>> round_to(1 / 3, 4)
    0.3333
    """
    # Huge precisions overflow to inf and end as NaN
    with np.errstate(all="ignore"):
        power = np.float64(10.0) ** np.float64(int(decimal_places))
        scaled = np.float64(number) * power

        # np.round is half-to-even; compare against the truncated value instead
        rounded = np.trunc(scaled)
        if np.abs(scaled - rounded) >= 0.5:
            rounded += np.sign(scaled)

        return float(rounded / power)


def is_whole_number(value: float) -> bool:
    """
    Check whether a value has no fractional part.

    NaN and infinities are not whole numbers.
    """
    return float(value).is_integer()
