"""
Utility functions for eulerode.

Modules
-------
rounding : Decimal rounding used for the step size
"""

from eulerode.utils.rounding import is_whole_number, round_to

__all__ = [
    "is_whole_number",
    "round_to",
]
