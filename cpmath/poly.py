"""Polynomials as coefficient lists: ``p[0] + p[1]*x + p[2]*x**2 + ...``."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from itertools import zip_longest

EPS = 1e-9


def evaluate(p: Sequence[float], x: float) -> float:
    """Value of the polynomial at ``x``."""
    return sum(c * x**i for i, c in enumerate(p))


def add(p1: Sequence[float], p2: Sequence[float]) -> list[float]:
    """Sum of two polynomials."""
    return [a + b for a, b in zip_longest(p1, p2, fillvalue=0.0)]


def mul(p1: Sequence[float], p2: Sequence[float]) -> list[float]:
    """Product of two polynomials; an empty factor gives an empty product."""
    if not p1 or not p2:
        return []
    result = [0.0] * (len(p1) + len(p2) - 1)
    for i, a in enumerate(p1):
        for j, b in enumerate(p2):
            result[i + j] += a * b
    return result


def roots(a: float, b: float, c: float) -> tuple[float, float] | None:
    """The two distinct real roots of ``a*x**2 + b*x + c``, smaller first for ``a > 0``.

    Returns None when the discriminant is below a small epsilon.
    """
    d = b * b - 4 * a * c
    if d < EPS:
        return None
    s = math.sqrt(d)
    return (-b - s) / (2 * a), (-b + s) / (2 * a)


def derivative(p: Sequence[float]) -> list[float]:
    """Derivative of the polynomial."""
    return [c * i for i, c in enumerate(p) if i > 0]


def main(argv: list[str] | None = None) -> int:
    """Show the polynomial operations on sample inputs."""
    argparse.ArgumentParser(description="Demonstrate polynomial operations.").parse_args(argv)
    p1 = [1.0, 2.0, 1.0]
    p2 = [0.0, 3.0]
    print(f"{evaluate(p1, 4):g}")
    print(" ".join(str(int(c)) for c in add(p1, p2)))
    print(" ".join(str(int(c)) for c in mul(p1, p2)))
    r = roots(1, 0, -1)
    if r is not None:
        print(f"{r[0]:g} {r[1]:g}")
    print(" ".join(f"{c:g}" for c in derivative(p1)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())