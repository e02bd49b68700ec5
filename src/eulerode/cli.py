"""
eulerode command line interface.

Usage:
    eulerode [-v] [--log-file PATH]
    python -m eulerode [-v] [--log-file PATH]

Reads, one per line from stdin: lower bound a, upper bound b, step count N,
decimal places for the step size, the expression f(x, y) for dy/dx, and
y(a). Prints one block per Euler step:

    w_1 = 1.25
    x_0 = 0.0
    y_0 = 1.0

The first invalid entry prints its message and exits with status 1.
"""

import argparse
import logging
from typing import List, Optional

from eulerode import __version__
from eulerode.errors import EulerError
from eulerode.integrators.euler import EulerRecord
from eulerode.logging_config import setup_logging
from eulerode.problem import read_problem
from eulerode.prompts import Console

logger = logging.getLogger(__name__)


def format_record(record: EulerRecord) -> str:
    """Render one step as the labelled w_i / x_{i-1} / y_{i-1} block."""
    return (
        f"w_{record.index} = {record.value}\n"
        f"x_{record.previous_index} = {record.previous_x}\n"
        f"y_{record.previous_index} = {record.previous_y}"
    )


def run(console: Optional[Console] = None) -> int:
    """
    Prompt for a problem, approximate it and print every step.

    Returns
    -------
    int
        0 on success, 1 if any input was rejected.
    """
    if console is None:
        console = Console()

    try:
        problem = read_problem(console)
        logger.info(
            "Approximating dy/dx = %s on [%s, %s] with N = %d, h = %s",
            problem.expression,
            problem.bounds[0],
            problem.bounds[1],
            int(problem.steps),
            problem.step_size,
        )
        for record in problem.records():
            console.write()
            console.write(format_record(record))
    except EulerError as exc:
        logger.debug("Run aborted: %s", type(exc).__name__)
        console.write(str(exc))
        return 1

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eulerode",
        description="Approximate dy/dx = f(x, y) on [a, b] with the forward Euler method.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)
    return run()
