"""
eulerode - Forward Euler approximation of first-order ODEs.

Approximates dy/dx = f(x, y) from y(a) across [a, b] in N fixed steps,
where f is typed in as an infix expression over x and y.

    from eulerode import bind, derive_step_size, euler_iterate, parse_expression

    f = bind(parse_expression("y"))
    h = derive_step_size((0.0, 1.0), 4, 4)
    for record in euler_iterate(f, 0.0, 1.0, h, 4):
        print(record.index, record.value)
"""

__version__ = "0.1.0"

from eulerode.errors import EulerError, InvalidDataError, InvalidInputError
from eulerode.expression import DEFAULT_CONTEXT, bind, parse_expression
from eulerode.integrators import (
    EulerRecord,
    derive_step_size,
    euler_integrate,
    euler_iterate,
    euler_step,
)
from eulerode.problem import EulerProblem, read_problem
from eulerode.utils import is_whole_number, round_to

__all__ = [
    "DEFAULT_CONTEXT",
    # Errors
    "EulerError",
    # Problem
    "EulerProblem",
    # Integrators
    "EulerRecord",
    "InvalidDataError",
    "InvalidInputError",
    "__version__",
    # Expressions
    "bind",
    "derive_step_size",
    "euler_integrate",
    "euler_iterate",
    "euler_step",
    # Utilities
    "is_whole_number",
    "parse_expression",
    "read_problem",
    "round_to",
]
