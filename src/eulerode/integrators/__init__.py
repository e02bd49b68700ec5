"""
Numerical integration for first-order ODEs dy/dx = f(x, y).

Available Methods
-----------------
euler : Forward Euler (1st order)

Usage
-----
>>> from eulerode.integrators import derive_step_size, euler_iterate
>>> h = derive_step_size((0.0, 1.0), 4, 4)
>>> [r.value for r in euler_iterate(lambda x, y: y, 0.0, 1.0, h, 4)]
[1.25, 1.5625, 1.953125, 2.44140625]
"""

from .euler import EulerRecord, derive_step_size, euler_integrate, euler_iterate, euler_step

__all__ = [
    "EulerRecord",
    "derive_step_size",
    "euler_integrate",
    "euler_iterate",
    "euler_step",
]
