"""Command that solves a quadratic equation through the task scheduler."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Sequence

from depsched.scheduler import TaskScheduler


def _sqrt(value: float) -> float:
    return math.sqrt(value) if value >= 0 else math.nan


def solve_quadratic_roots(
    a: float, b: float, c: float, offset: float
) -> tuple[float, float, float]:
    """Return both roots of ``a*x*x + b*x + c`` and the second root plus ``offset``.

    A negative discriminant gives NaN roots.
    """
    if a == 0:
        raise ValueError("coefficient a must be non-zero")
    scheduler = TaskScheduler()
    id1 = scheduler.add(lambda a, c: -4 * a * c, a, c)
    id2 = scheduler.add(lambda b, v: b * b + v, b, scheduler.get_future_result(id1, float))
    id3 = scheduler.add(lambda b, d: -b + _sqrt(d), b, scheduler.get_future_result(id2, float))
    id4 = scheduler.add(lambda b, d: -b - _sqrt(d), b, scheduler.get_future_result(id2, float))
    id5 = scheduler.add(lambda a, v: v / (2 * a), a, scheduler.get_future_result(id3, float))
    id6 = scheduler.add(lambda a, v: v / (2 * a), a, scheduler.get_future_result(id4, float))
    id7 = scheduler.add(lambda n, v: v + n, offset, scheduler.get_future_result(id6, float))
    scheduler.execute_all()
    return (
        scheduler.get_result(id5, float),
        scheduler.get_result(id6, float),
        scheduler.get_result(id7, float),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Parse coefficients, solve the equation and print the results."""
    parser = argparse.ArgumentParser(
        description="Solve a*x^2 + b*x + c = 0 and shift the second root by an offset."
    )
    parser.add_argument("a", type=float, nargs="?", default=1.0)
    parser.add_argument("b", type=float, nargs="?", default=-2.0)
    parser.add_argument("c", type=float, nargs="?", default=0.0)
    parser.add_argument("offset", type=float, nargs="?", default=3.0)
    args = parser.parse_args(argv)
    try:
        first, second, shifted = solve_quadratic_roots(args.a, args.b, args.c, args.offset)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"x1 = {first:g}")
    print(f"x2 = {second:g}")
    print(f"x2 + offset = {shifted:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())