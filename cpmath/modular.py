"""Arithmetic modulo a prime."""

from __future__ import annotations

import argparse

MOD = 23


def mod_add(a: int, b: int, mod: int = MOD) -> int:
    return (a + b) % mod


def mod_sub(a: int, b: int, mod: int = MOD) -> int:
    return (a - b) % mod


def mod_mul(a: int, b: int, mod: int = MOD) -> int:
    return a * b % mod


def mod_pow(a: int, b: int, mod: int = MOD) -> int:
    """``a**b`` modulo ``mod`` for a non-negative exponent."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    return pow(a, b, mod)


def mod_inv(a: int, mod: int = MOD) -> int:
    """Inverse by Fermat's little theorem; ``mod`` must be prime."""
    if a % mod == 0:
        raise ZeroDivisionError(f"{a} has no inverse modulo {mod}")
    return mod_pow(a, mod - 2, mod)


def mod_div(a: int, b: int, mod: int = MOD) -> int:
    return a * mod_inv(b, mod) % mod


def main(argv: list[str] | None = None) -> int:
    """Show each operation on sample values."""
    argparse.ArgumentParser(description="Demonstrate modular arithmetic.").parse_args(argv)
    print(mod_add(15, 19))
    print(mod_sub(15, 19))
    print(mod_mul(15, 19))
    print(mod_pow(15, 19))
    print(mod_inv(19))
    print(mod_div(15, 19))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())