#!/usr/bin/env python3
"""
Example 01: Basic Approximation

Demonstrates eulerode usage without the interactive prompts:
- Parsing and binding a differential expression
- Deriving the rounded step size
- Streaming Euler records and comparing against the exact solution

Problem: dy/dx = y on [0, 1], y(0) = 1. Exact solution y = exp(x).
"""

import numpy as np

import eulerode as eo


def growth_example():
    """Approximate exp(x) with increasing step counts."""
    print("=" * 60)
    print("dy/dx = y, y(0) = 1")
    print("=" * 60)

    f = eo.bind(eo.parse_expression("y"))

    for steps in (4, 16, 64, 256):
        h = eo.derive_step_size((0.0, 1.0), steps, 6)
        xs, ys = eo.euler_integrate(f, 0.0, 1.0, h, steps)
        error = abs(ys[-1] - np.exp(xs[-1]))
        print(f"N = {steps:4d}  h = {h:<10}  y(1) ~ {ys[-1]:.8f}  error = {error:.2e}")


def records_example():
    """Print each step the way the command line does."""
    print("=" * 60)
    print("dy/dx = x - y, y(0) = 2")
    print("=" * 60)

    f = eo.bind(eo.parse_expression("x - y"))
    h = eo.derive_step_size((0.0, 1.0), 5, 2)

    for record in eo.euler_iterate(f, 0.0, 2.0, h, 5):
        print(f"w_{record.index} = {record.value:.6f}   (from x_{record.previous_index} = {record.previous_x:.2f})")


if __name__ == "__main__":
    growth_example()
    print()
    records_example()
