"""Prime sieves, primality testing and factorization."""

from __future__ import annotations

import argparse
from collections import Counter
from dataclasses import dataclass


@dataclass(frozen=True)
class Sieve:
    """Result of a sieve up to ``limit``.

    ``factor[i]`` is a prime divisor of ``i`` for ``i >= 2`` (the smallest one for
    the Euler sieve); ``primes`` lists the primes up to ``limit``.
    """

    limit: int
    factor: tuple[int, ...]
    primes: tuple[int, ...]

    def is_prime(self, x: int) -> bool:
        """Primality test; exact for ``x`` up to the square of the largest sieved prime."""
        if x < 2:
            return False
        if x <= self.primes[-1]:
            return self.factor[x] == x
        for p in self.primes:
            if p * p > x:
                break
            if x % p == 0:
                return False
        return True

    def factorize(self, x: int) -> dict[int, int]:
        """Map each prime divisor of ``x`` to its exponent, in increasing order.

        Exact for ``x`` up to the square of the largest sieved prime.
        """
        counts: Counter[int] = Counter()
        if x <= self.primes[-1]:
            while x > 1:
                p = self.factor[x]
                counts[p] += 1
                x //= p
        else:
            for p in self.primes:
                if p * p > x:
                    break
                while x % p == 0:
                    counts[p] += 1
                    x //= p
            if x > 1:
                counts[x] += 1
        return dict(sorted(counts.items()))


def _check_limit(n: int) -> None:
    if n < 2:
        raise ValueError("sieve limit must be at least 2")


def sieve_eratosthenes(n: int) -> Sieve:
    """Sieve of Eratosthenes up to ``n``."""
    _check_limit(n)
    factor = [0] * (n + 1)
    primes = []
    for i in range(2, n + 1):
        if not factor[i]:
            factor[i] = i
            primes.append(i)
            multiples = range(i * i, n + 1, i)
            factor[i * i :: i] = [i] * len(multiples)
    return Sieve(n, tuple(factor), tuple(primes))


def sieve_euler(n: int) -> Sieve:
    """Linear sieve up to ``n``; every composite is marked exactly once."""
    _check_limit(n)
    factor = [0] * (n + 1)
    primes: list[int] = []
    for i in range(2, n + 1):
        if not factor[i]:
            factor[i] = i
            primes.append(i)
        for p in primes:
            if p > factor[i] or i * p > n:
                break
            factor[i * p] = p
    return Sieve(n, tuple(factor), tuple(primes))


def _format_factors(x: int, factors: dict[int, int]) -> str:
    terms = "".join(f"{p}^{e} * " for p, e in factors.items())
    return f"{x}={terms}1"


def main(argv: list[str] | None = None) -> int:
    """Show the sieves, primality tests and factorizations on sample values."""
    argparse.ArgumentParser(description="Demonstrate prime sieves.").parse_args(argv)
    eratosthenes = sieve_eratosthenes(100)
    euler = sieve_euler(100)
    print("Eratosthenes:\t" + " ".join(map(str, eratosthenes.primes)))
    print("Euler:\t\t" + " ".join(map(str, euler.primes)))
    for x in (9973, 9971):
        print(f"is_prime({x})={int(euler.is_prime(x))}")
    for x in (9997, 9973, 9975):
        print(_format_factors(x, euler.factorize(x)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())