"""Euclid's algorithm, its extended form and modular inverses."""

from __future__ import annotations

import argparse
import math


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    if not b:
        return a, 1, 0
    g, x, y = extended_gcd(b, a % b)
    return g, y, x - (a // b) * y


def modinv(a: int, m: int) -> int:
    """Inverse of ``a`` modulo positive ``m``; ValueError if none exists."""
    if m <= 0:
        raise ValueError("modulus must be positive")
    g, x, _ = extended_gcd(a, m)
    if g > 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


def main(argv: list[str] | None = None) -> int:
    """Show the algorithms on sample values."""
    argparse.ArgumentParser(description="Demonstrate Euclid's algorithm.").parse_args(argv)
    print(f"{math.gcd(30, 50)} {gcd(30, 50)}")
    g, x, y = extended_gcd(30, 50)
    print(f"30*{x}+50*{y}={g}")
    print(modinv(19, 23))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())